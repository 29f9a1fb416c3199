"""Per-invocation do-context and the short-circuit signal it raises.

A DoContext belongs to exactly one call of a do-wrapped function. Unwrapping a
success hands back its payload; unwrapping a failure raises ShortCircuit tagged
with the context's identity, which only the wrapper that created the context
will catch.

The stack of live contexts is kept in a ContextVar so that the module-level
unwrap()/unwrap_all() helpers can find the innermost one without the context
being passed around explicitly.
"""

from __future__ import annotations

import itertools
from contextvars import ContextVar, Token
from typing import Any, TypeVar

from ..errors import DoException, ErrorCode
from ..monads.protocol import Unwrappable

T = TypeVar("T")

_identities = itertools.count(1)

# Innermost context last
_live: ContextVar[tuple[DoContext, ...]] = ContextVar("docase_live_contexts", default=())


class ShortCircuit(BaseException):  # noqa: N818
    """Non-local exit carrying a failure container back to its owning wrapper.

    Derives from BaseException so `except Exception` blocks in user code let it
    through. Helpers that catch everything to run a side effect (rollback,
    cleanup) must re-raise it unchanged; owner and failure are read-only.
    """

    __slots__ = ("_owner", "_failure")

    def __init__(self, owner: int, failure: Unwrappable[Any]) -> None:
        self._owner = owner
        self._failure = failure
        super().__init__(owner, failure)

    @property
    def owner(self) -> int:
        """Identity of the DoContext that raised this signal."""
        return self._owner

    @property
    def failure(self) -> Unwrappable[Any]:
        """Failure-shaped container the owning call returns."""
        return self._failure

    def __repr__(self) -> str:
        return f"ShortCircuit(owner={self._owner}, failure={self._failure!r})"

    __str__ = __repr__


class DoContext:
    """Unwrap capability for a single invocation.

    Calling the context directly mirrors a block yield: one container gives its
    payload, several give a tuple of payloads.

    Example:
        >>> @do
        ... def total(do: DoContext) -> Result[int, str]:
        ...     a = do.unwrap(Success(1))
        ...     b, c = do.unwrap_all(Success(2), Success(3))
        ...     return Success(a + b + c)
        >>> total()
        Success(6)
    """

    __slots__ = ("_identity", "_closed")

    def __init__(self) -> None:
        self._identity = next(_identities)
        self._closed = False

    @property
    def identity(self) -> int:
        return self._identity

    @property
    def closed(self) -> bool:
        """True once the owning call has returned."""
        return self._closed

    def close(self) -> None:
        self._closed = True

    def unwrap(self, container: Unwrappable[T]) -> T:
        """Payload of a success; a failure aborts the call with that failure."""
        self._ensure_open()
        return self._unwrap_one(container)

    def unwrap_all(self, *containers: Unwrappable[Any]) -> tuple[Any, ...]:
        """Payloads of all containers, in order.

        Containers are checked left to right and the first failure aborts the
        call; later containers are never inspected.
        """
        self._ensure_open()
        return tuple(self._unwrap_one(c) for c in containers)

    def __call__(self, *containers: Unwrappable[Any]) -> Any:
        if len(containers) == 1:
            return self.unwrap(containers[0])
        return self.unwrap_all(*containers)

    def _unwrap_one(self, container: Unwrappable[T]) -> T:
        if not isinstance(container, Unwrappable):
            raise DoException.create(
                f"cannot unwrap {type(container).__name__}: {container!r}",
                ErrorCode.NOT_UNWRAPPABLE,
                context_id=self._identity,
            )
        if container.is_success():
            return container.payload()
        raise ShortCircuit(self._identity, container.as_failure())

    def _ensure_open(self) -> None:
        if self._closed:
            raise DoException.create(
                "unwrap on a context whose call has already returned",
                ErrorCode.STALE_CONTEXT,
                context_id=self._identity,
            )

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"DoContext(#{self._identity}, {state})"


# ─────────────────────────────────────────────────────────────────────────────
# Live Context Stack
# ─────────────────────────────────────────────────────────────────────────────


def push_context(ctx: DoContext) -> Token[tuple[DoContext, ...]]:
    """Make ctx the innermost live context. Returns token for pop_context()."""
    return _live.set((*_live.get(), ctx))


def pop_context(ctx: DoContext, token: Token[tuple[DoContext, ...]]) -> None:
    """Close ctx and restore the stack as it was before push_context()."""
    ctx.close()
    _live.reset(token)


def is_live(identity: int) -> bool:
    """Whether a context with this identity is currently executing."""
    return any(ctx.identity == identity for ctx in _live.get())


def current_context() -> DoContext:
    """Innermost live context. Raises DoException outside any do-wrapped call."""
    if stack := _live.get():
        return stack[-1]
    raise DoException.create("unwrap called outside a do-wrapped function", ErrorCode.NO_ACTIVE_CONTEXT)


def unwrap(container: Unwrappable[T]) -> T:
    """Unwrap against the innermost live context."""
    return current_context().unwrap(container)


def unwrap_all(*containers: Unwrappable[Any]) -> tuple[Any, ...]:
    """Unwrap several containers against the innermost live context."""
    return current_context().unwrap_all(*containers)
