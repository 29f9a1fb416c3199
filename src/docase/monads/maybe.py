"""Maybe monad: an optional value, Some(value) or Nothing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import DoException, ErrorCode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Maybe(Generic[T]):
    """Some(value) or Nothing.

    Nothing is a singleton; Some never wraps Python's None. Use maybe() to lift
    a possibly-None value.

    Examples:
        >>> Some(2).map(lambda x: x + 1)
        Some(3)
        >>> Nothing.map(lambda x: x + 1)
        Nothing
        >>> maybe(None)
        Nothing
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: T | None, is_some: bool) -> None:
        self._value = value
        self._is_some = is_some

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    is_success = is_some

    # ─── Unwrappable ─────────────────────────────────────────────────

    def payload(self) -> T:
        """Wrapped value. Raises DoException on Nothing."""
        if self._is_some:
            return self._value  # type: ignore[return-value]
        raise DoException.create("payload() on Nothing", ErrorCode.PAYLOAD_ON_FAILURE)

    def as_failure(self) -> Maybe[T]:
        """Nothing itself. Raises DoException on Some."""
        if not self._is_some:
            return self
        raise DoException.create(f"as_failure() on {self!r}", ErrorCode.FAILURE_ON_SUCCESS)

    def value_or(self, default: T) -> T:
        return self._value if self._is_some else default  # type: ignore[return-value]

    # ─── Functor / Monad ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Apply f to the value. A None result from f becomes Nothing."""
        return maybe(f(self._value)) if self._is_some else self  # type: ignore[arg-type,return-value]

    def bind(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self._value) if self._is_some else self  # type: ignore[arg-type,return-value]

    flat_map = bind

    def or_(self, other: Maybe[T]) -> Maybe[T]:
        """Self if Some, else other."""
        return self if self._is_some else other

    # ─── Conversion ──────────────────────────────────────────────────

    def to_result(self, error: E) -> Result[T, E]:
        """Success(value) on Some, Failure(error) on Nothing."""
        from .result import Failure, Success
        return Success(self._value) if self._is_some else Failure(error)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_some  # noqa: E731
    __hash__ = lambda self: hash((Maybe, self._is_some, self._value))  # noqa: E731
    __repr__ = lambda self: f"Some({self._value!r})" if self._is_some else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_some == other._is_some and self._value == other._value if isinstance(other, Maybe) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        if self._is_some:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════

Nothing: Maybe = Maybe(None, False)


def Some(value: T) -> Maybe[T]:  # noqa: N802
    """Construct Some variant. Raises ValueError for None."""
    if value is None:
        raise ValueError("Some() cannot wrap None, use maybe() or Nothing")
    return Maybe(value, True)


def maybe(value: T | None) -> Maybe[T]:
    """Lift an optional value: None → Nothing, anything else → Some."""
    return Nothing if value is None else Maybe(value, True)
