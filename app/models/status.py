from dataclasses import dataclass
from typing import Any, Mapping, Optional

# 存储过程以这两列返回错误状态
STATUS_CODE_COLUMN = "code_Status"
STATUS_MESSAGE_COLUMN = "message_Status"


@dataclass(frozen=True)
class StatusRow:
    """
    存储过程返回的错误状态行

    code_Status 不为空时，该行表示失败而不是数据
    """
    code: Optional[int]
    message: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StatusRow":
        return cls(
            code=row.get(STATUS_CODE_COLUMN),
            message=str(row.get(STATUS_MESSAGE_COLUMN) or ""),
        )


def is_status_row(row: Optional[Mapping[str, Any]]) -> bool:
    """判断一行结果是否为错误状态行"""
    return row is not None and row.get(STATUS_CODE_COLUMN) is not None
