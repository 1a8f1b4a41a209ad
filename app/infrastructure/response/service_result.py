"""Outcome envelope shared by every service operation."""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .response_formatter import standard_response


@dataclass(frozen=True)
class ServiceResult:
    """
    Result of a service call.

    A failed result never carries data and a successful one never carries
    errors; use :meth:`ok` and :meth:`error` rather than the constructor.
    """
    success: bool
    message: str = ""
    errors: List[str] = field(default_factory=list)
    data: Any = None

    def __post_init__(self):
        if not self.success and self.data is not None:
            raise ValueError("A failed ServiceResult cannot carry data")
        if self.success and self.errors:
            raise ValueError("A successful ServiceResult cannot carry errors")

    @classmethod
    def ok(cls, data: Any = None, message: str = "") -> "ServiceResult":
        return cls(success=True, message=message, errors=[], data=data)

    @classmethod
    def error(cls, message: str, errors: Optional[List[str]] = None) -> "ServiceResult":
        return cls(success=False, message=message, errors=list(errors or []), data=None)

    def to_response(self, serializer: Optional[Callable[[Any], Any]] = None) -> Dict[str, Any]:
        """Render the JSON envelope, serializing ``data`` when present."""
        data = self.data
        if data is not None and serializer is not None:
            data = serializer(data)
        return standard_response(
            success=self.success,
            message=self.message,
            errors=self.errors,
            data=data,
        )
