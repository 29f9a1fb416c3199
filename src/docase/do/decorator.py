"""Installation of do-notation on functions and methods.

    >>> @do
    ... def add(do: DoContext) -> Result[int, str]:
    ...     one, two = do.unwrap_all(Success(1), Failure("no_two"))
    ...     return Success(one + two)
    >>> add()
    Failure('no_two')

The wrapper creates a fresh DoContext per call, passes it to the body as a
keyword argument, and turns a ShortCircuit raised by that context into the
call's return value. Signals from any other context are left alone.
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar, overload

from ..errors import DoException, ErrorCode
from ..foundation.config import get_settings
from ..foundation.logging import get_logger
from .context import DoContext, ShortCircuit, is_live, pop_context, push_context

R = TypeVar("R")
C = TypeVar("C", bound=type)

log = get_logger("do")

_MARKER = "__do_notation__"


class _FromSettings:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<from settings>"


FROM_SETTINGS: Any = _FromSettings()


# ─────────────────────────────────────────────────────────────────────────────
# Function Decorator
# ─────────────────────────────────────────────────────────────────────────────


@overload
def do(func: Callable[..., R], /) -> Callable[..., R]: ...


@overload
def do(*, inject: str | None = ...) -> Callable[[Callable[..., R]], Callable[..., R]]: ...


def do(
    func: Callable[..., R] | None = None,
    /,
    *,
    inject: str | None = FROM_SETTINGS,
) -> Callable[..., R] | Callable[[Callable[..., R]], Callable[..., R]]:
    """Give a function inline unwrap with early return on failure.

    Args:
        func: Function whose body unwraps containers
        inject: Keyword the DoContext is passed under. Defaults to the
            configured name ("do"), which is only passed if the function
            declares a parameter of that name. A **kwargs catch-all only
            receives the context when inject is given explicitly. None
            never passes it; the body then uses the module-level
            unwrap()/unwrap_all() helpers.

    Raises:
        DoException: INVALID_TARGET if an explicit inject name is not a
            parameter of func

    Example:
        >>> @do(inject="m")
        ... def lookup(m: DoContext, key: str) -> Maybe[str]:
        ...     return Some(m(maybe(os.environ.get(key))).upper())
    """
    def decorator(fn: Callable[..., R]) -> Callable[..., R]:
        return _install(fn, _resolve_inject(fn, inject))

    return decorator(func) if func is not None else decorator


def _resolve_inject(fn: Callable[..., Any], inject: str | None) -> str | None:
    if inject is None:
        return None
    explicit = inject is not FROM_SETTINGS
    name = inject if explicit else get_settings().do.inject_name
    if _accepts_keyword(fn, name, via_var_keyword=explicit):
        return name
    if explicit:
        raise DoException.create(
            f"{fn.__qualname__} has no parameter {name!r} to receive the do-context",
            ErrorCode.INVALID_TARGET,
        )
    return None


def _accepts_keyword(fn: Callable[..., Any], name: str, *, via_var_keyword: bool) -> bool:
    """Named parameter always qualifies; **kwargs only when the name was asked for explicitly."""
    params = inspect.signature(fn).parameters
    if (p := params.get(name)) is not None:
        return p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)
    return via_var_keyword and any(p.kind is p.VAR_KEYWORD for p in params.values())


def _install(fn: Callable[..., R], inject: str | None) -> Callable[..., R]:
    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        ctx = DoContext()
        if inject is not None:
            if inject in kwargs:
                raise TypeError(f"{fn.__qualname__}() got an explicit value for do-context argument {inject!r}")
            kwargs[inject] = ctx
        token = push_context(ctx)
        try:
            return fn(*args, **kwargs)
        except ShortCircuit as signal:
            return _resolve(fn, ctx, signal)
        finally:
            pop_context(ctx, token)

    setattr(wrapper, _MARKER, True)
    return wrapper


def _resolve(fn: Callable[..., Any], ctx: DoContext, signal: ShortCircuit) -> Any:
    """Failure for our own signal; re-raise for a live outer context; fail loudly otherwise."""
    trace = get_settings().do.trace_short_circuits
    if signal.owner == ctx.identity:
        if trace:
            log.debug("%s short-circuited (context #%d): %r", fn.__qualname__, ctx.identity, signal.failure)
        return signal.failure
    if is_live(signal.owner):
        if trace:
            log.debug("%s passing signal for context #%d outward", fn.__qualname__, signal.owner)
        raise signal
    log.error("%s received orphaned signal %r", fn.__qualname__, signal)
    raise DoException.create(
        f"short-circuit for context #{signal.owner} reached {fn.__qualname__} with no live owner",
        ErrorCode.ORPHANED_SIGNAL,
        context_id=ctx.identity,
        details=repr(signal),
    ) from signal


# ─────────────────────────────────────────────────────────────────────────────
# Class Decorator
# ─────────────────────────────────────────────────────────────────────────────


def do_for(*names: str, inject: str | None = FROM_SETTINGS) -> Callable[[C], C]:
    """Install do-notation on the named methods of a class.

    Methods already wrapped are left as they are. staticmethod and
    classmethod members are unwrapped, decorated and rewrapped.

    Example:
        >>> @do_for("call")
        ... class CreateAccount:
        ...     def call(self, form: dict, do: DoContext) -> Result[Account, str]:
        ...         values = do(validate(form))
        ...         return Success(Account(**values))
    """
    def decorator(cls: C) -> C:
        for name in names:
            try:
                member = inspect.getattr_static(cls, name)
            except AttributeError:
                raise DoException.create(f"{cls.__qualname__} has no method {name!r}", ErrorCode.INVALID_TARGET) from None

            wrapper_type = type(member) if isinstance(member, (staticmethod, classmethod)) else None
            target = member.__func__ if wrapper_type else member
            if not callable(target):
                raise DoException.create(f"{cls.__qualname__}.{name} is not callable", ErrorCode.INVALID_TARGET)
            if getattr(target, _MARKER, False):
                continue

            wrapped = do(target, inject=inject)
            setattr(cls, name, wrapper_type(wrapped) if wrapper_type else wrapped)
        return cls

    return decorator
