"""Container types understood by the do-notation.

- Result: Success(value) | Failure(error)
- Maybe: Some(value) | Nothing
- Attempt: Value(value) | Error(exception)

Each implements the Unwrappable capability (is_success, payload, as_failure).

Example:
    >>> from docase.monads import Success, Failure, Some, maybe, attempt
    >>> Success(1).bind(lambda x: Success(x + 1))
    Success(2)
    >>> maybe({"a": 1}.get("b"))
    Nothing
    >>> attempt(lambda: 10 // 2)
    Value(5)
"""

from .attempt import Attempt, Error, Value, attempt
from .maybe import Maybe, Nothing, Some, maybe
from .protocol import Unwrappable
from .result import Failure, Result, Success

__all__ = [
    # Capability
    "Unwrappable",
    # Result
    "Result", "Success", "Failure",
    # Maybe
    "Maybe", "Some", "Nothing", "maybe",
    # Attempt
    "Attempt", "Value", "Error", "attempt",
]
