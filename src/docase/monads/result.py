"""Result monad: a computation that either succeeded or failed.

Discriminated union of Success and Failure with the usual operations:
- Functor: map, alt_map
- Monad: bind / flat_map
- Recovery: or_else, value_or
- Unwrappable: is_success, payload, as_failure (used by the do-notation)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..errors import DoException, ErrorCode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .maybe import Maybe

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Success(value) or Failure(error).

    Examples:
        >>> Success(42).map(lambda x: x * 2)
        Success(84)
        >>> Failure("fail").map(lambda x: x * 2)
        Failure('fail')
        >>> Success(5).bind(lambda x: Success(x * 2) if x > 0 else Failure("neg"))
        Success(10)
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Result is the Success variant."""
        return self._is_ok

    def is_failure(self) -> bool:
        """Check if Result is the Failure variant."""
        return not self._is_ok

    # ─── Unwrappable ─────────────────────────────────────────────────

    def payload(self) -> T:
        """Success value. Raises DoException on Failure."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise DoException.create(f"payload() on {self!r}", ErrorCode.PAYLOAD_ON_FAILURE)

    def as_failure(self) -> Result[T, E]:
        """The Failure itself. Raises DoException on Success."""
        if not self._is_ok:
            return self
        raise DoException.create(f"as_failure() on {self!r}", ErrorCode.FAILURE_ON_SUCCESS)

    # ─── Value Extraction ────────────────────────────────────────────

    def failure(self) -> E:
        """Failure value. Raises DoException on Success."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise DoException.create(f"failure() on {self!r}", ErrorCode.FAILURE_ON_SUCCESS)

    def value_or(self, default: T) -> T:
        """Success value or default."""
        return self._value if self._is_ok else default  # type: ignore[return-value]

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to Success value. Result[T,E] → (T→U) → Result[U,E]"""
        return Result(f(self._value), _OK) if self._is_ok else self  # type: ignore[arg-type,return-value]

    def alt_map(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to Failure value. Result[T,E] → (E→F) → Result[T,F]"""
        return self if self._is_ok else Result(f(self._value), _ERR)  # type: ignore[arg-type,return-value]

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain operations that can fail."""
        return f(self._value) if self._is_ok else self  # type: ignore[arg-type,return-value]

    flat_map = bind

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """On Failure, apply f to recover. On Success, pass through."""
        return self if self._is_ok else f(self._value)  # type: ignore[arg-type,return-value]

    # ─── Conversion ──────────────────────────────────────────────────

    def to_maybe(self) -> Maybe[T]:
        """Some(value) on Success, Nothing on Failure."""
        from .maybe import Nothing, Some
        return Some(self._value) if self._is_ok else Nothing  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((Result, self._is_ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._is_ok else 'Failure'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        return self._is_ok == other._is_ok and self._value == other._value if isinstance(other, Result) else NotImplemented

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if Success, nothing if Failure."""
        if self._is_ok:
            yield self._value  # type: ignore[misc]


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Success variant."""
    return Result(value, _OK)


def Failure(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Failure variant."""
    return Result(error, _ERR)
