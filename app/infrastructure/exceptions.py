"""
Custom exceptions for the Infrastructure layer.
"""
from typing import Optional


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class DatabaseConnectionError(InfrastructureError):
    """The database could not be reached or the driver rejected the call."""
    pass


class ProcedureError(InfrastructureError):
    """
    A stored procedure answered with a status row instead of data.

    The message is the procedure's own human readable text and is what
    ``str(exc)`` returns, so callers can surface it verbatim.
    """

    def __init__(self, message: str, code: Optional[int] = None, procedure: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.procedure = procedure

    def __repr__(self) -> str:
        return f"ProcedureError(procedure={self.procedure!r}, code={self.code!r}, message={self.message!r})"
