"""Error types raised when the unwrap protocol is misused.

- ErrorCode: codes for each kind of violation
- DoError/DoException: structured error model and the exception carrying it
"""

from .errors import DoError, DoException, ErrorCode

__all__ = ["ErrorCode", "DoError", "DoException"]
