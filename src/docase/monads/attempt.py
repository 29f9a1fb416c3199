"""Attempt monad: the outcome of running code that may raise.

attempt() runs a callable and captures selected exceptions as Error values,
letting everything else propagate:

    >>> attempt(lambda: 1 / 0)
    Error(ZeroDivisionError('division by zero'))
    >>> attempt(lambda: int("7"), ValueError)
    Value(7)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import DoException, ErrorCode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .maybe import Maybe
    from .result import Result

T = TypeVar("T")
U = TypeVar("U")


class Attempt(Generic[T]):
    """Value(value) or Error(exception)."""

    __slots__ = ("_value", "_is_value")
    __match_args__ = ("_value",)

    def __init__(self, value: T | BaseException, is_value: bool) -> None:
        self._value = value
        self._is_value = is_value

    @classmethod
    def pure(cls, value: T) -> Attempt[T]:
        """Lift a plain value into Value."""
        return cls(value, True)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_value(self) -> bool:
        return self._is_value

    def is_error(self) -> bool:
        return not self._is_value

    is_success = is_value

    # ─── Unwrappable ─────────────────────────────────────────────────

    def payload(self) -> T:
        """Computed value. Raises DoException on Error."""
        if self._is_value:
            return self._value  # type: ignore[return-value]
        raise DoException.create(f"payload() on {self!r}", ErrorCode.PAYLOAD_ON_FAILURE)

    def as_failure(self) -> Attempt[T]:
        """The Error itself. Raises DoException on Value."""
        if not self._is_value:
            return self
        raise DoException.create(f"as_failure() on {self!r}", ErrorCode.FAILURE_ON_SUCCESS)

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def exception(self) -> BaseException | None:
        """Captured exception, None on Value."""
        return None if self._is_value else self._value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return self._value if self._is_value else default  # type: ignore[return-value]

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Attempt[U]:
        return Attempt(f(self._value), True) if self._is_value else self  # type: ignore[arg-type,return-value]

    def bind(self, f: Callable[[T], Attempt[U]]) -> Attempt[U]:
        return f(self._value) if self._is_value else self  # type: ignore[arg-type,return-value]

    flat_map = bind

    def recover(self, f: Callable[[BaseException], T]) -> Attempt[T]:
        """Turn an Error into a Value computed from its exception."""
        return self if self._is_value else Attempt(f(self._value), True)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────

    def to_result(self) -> Result[T, BaseException]:
        from .result import Failure, Success
        return Success(self._value) if self._is_value else Failure(self._value)  # type: ignore[arg-type]

    def to_maybe(self) -> Maybe[T]:
        from .maybe import Nothing, maybe
        return maybe(self._value) if self._is_value else Nothing  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_value  # noqa: E731
    __hash__ = lambda self: hash((Attempt, self._is_value, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Value' if self._is_value else 'Error'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_value == other._is_value and self._value == other._value if isinstance(other, Attempt) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        if self._is_value:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Value(value: T) -> Attempt[T]:  # noqa: N802
    """Construct Value variant."""
    return Attempt(value, True)


def Error(exception: BaseException) -> Attempt[T]:  # noqa: N802
    """Construct Error variant."""
    return Attempt(exception, False)


def attempt(fn: Callable[[], T], *catch: type[BaseException]) -> Attempt[T]:
    """Run fn, capturing exceptions of the given types (default Exception) as Error."""
    try:
        return Attempt(fn(), True)
    except catch or (Exception,) as exc:
        return Attempt(exc, False)
