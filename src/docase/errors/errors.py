"""Structured errors for misuse of the unwrap protocol.

These are programming errors: a failure container asked for its payload, a
signal nobody owns, a context used after its call returned. They fail loudly
instead of producing a wrong but plausible container.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable codes for protocol violations."""
    PAYLOAD_ON_FAILURE = "PAYLOAD_ON_FAILURE"
    FAILURE_ON_SUCCESS = "FAILURE_ON_SUCCESS"
    NOT_UNWRAPPABLE = "NOT_UNWRAPPABLE"
    STALE_CONTEXT = "STALE_CONTEXT"
    NO_ACTIVE_CONTEXT = "NO_ACTIVE_CONTEXT"
    ORPHANED_SIGNAL = "ORPHANED_SIGNAL"
    INVALID_TARGET = "INVALID_TARGET"
    UNKNOWN = "UNKNOWN"


class DoError(BaseModel):
    """Structured description of a protocol violation.
    
    Example:
        >>> error = DoError.create("payload() on Failure('x')", ErrorCode.PAYLOAD_ON_FAILURE)
        >>> print(error.render())
        [PAYLOAD_ON_FAILURE] payload() on Failure('x')
    """
    
    model_config = {"frozen": True}
    
    message: str = Field(..., description="Human-readable description")
    code: ErrorCode = Field(default=ErrorCode.UNKNOWN, description="Machine-readable error code")
    context_id: int | None = Field(default=None, description="Identity of the do-context involved")
    details: str | None = Field(default=None, description="Additional diagnostic text")
    
    @classmethod
    def create(
        cls,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        context_id: int | None = None,
        details: str | None = None,
    ) -> Self:
        """Factory method for cleaner construction."""
        return cls(message=message, code=code, context_id=context_id, details=details)
    
    def render(self) -> str:
        """Format error as a single diagnostic block."""
        ctx = f" (context #{self.context_id})" if self.context_id is not None else ""
        lines = [f"[{self.code}] {self.message}{ctx}"]
        if self.details:
            lines.append(f"Details: {self.details}")
        return "\n".join(lines)
    
    def __str__(self) -> str:
        return self.render()


class DoException(RuntimeError):
    """Exception wrapping a DoError for raising."""
    
    __slots__ = ("error",)
    
    def __init__(self, error: DoError) -> None:
        self.error = error
        super().__init__(error.render())
    
    @property
    def code(self) -> ErrorCode:
        return self.error.code
    
    @classmethod
    def create(
        cls,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        context_id: int | None = None,
        details: str | None = None,
    ) -> Self:
        """Create exception ready to raise."""
        return cls(DoError.create(message, code, context_id=context_id, details=details))
