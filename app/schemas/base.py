from decimal import Decimal
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# JSON 中金额以数字而不是字符串输出
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """
    接口模型基类

    线上字段使用 camelCase，Python 侧使用 snake_case
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
