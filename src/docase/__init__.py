"""docase - do-notation for Result, Maybe and Attempt containers.

Unwrap container payloads inline and return the first failure early, without
branching after every step.

Quick Start:
    >>> from docase import do, DoContext, Success, Failure, Result
    >>>
    >>> def find_user(user_id: int) -> Result[dict, str]:
    ...     return Success({"id": user_id}) if user_id > 0 else Failure("no user")
    >>>
    >>> @do
    ... def greeting(user_id: int, do: DoContext) -> Result[str, str]:
    ...     user = do.unwrap(find_user(user_id))
    ...     return Success(f"hello #{user['id']}")
    >>>
    >>> greeting(7)
    Success('hello #7')
    >>> greeting(0)
    Failure('no user')

Several independent containers at once (first failure wins):
    >>> @do
    ... def add(do: DoContext) -> Maybe[int]:
    ...     return Some(sum(do.unwrap_all(Some(1), Some(2))))

Class-based installation:
    >>> @do_for("call")
    ... class Transfer:
    ...     def call(self, do: DoContext) -> Result[int, str]: ...
"""

from __future__ import annotations

__version__ = "0.1.0"

from .do import DoContext, ShortCircuit, current_context, do, do_for, unwrap, unwrap_all
from .errors import DoError, DoException, ErrorCode
from .foundation import clear_settings_cache, configure_logging, get_logger, get_settings
from .monads import (
    Attempt,
    Error,
    Failure,
    Maybe,
    Nothing,
    Result,
    Some,
    Success,
    Unwrappable,
    Value,
    attempt,
    maybe,
)

__all__ = [
    "__version__",
    # Do-notation
    "do", "do_for", "DoContext", "ShortCircuit", "current_context", "unwrap", "unwrap_all",
    # Containers
    "Unwrappable",
    "Result", "Success", "Failure",
    "Maybe", "Some", "Nothing", "maybe",
    "Attempt", "Value", "Error", "attempt",
    # Errors
    "ErrorCode", "DoError", "DoException",
    # Config & logging
    "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
