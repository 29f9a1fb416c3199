"""Tests for identity scoping between nested do-wrapped calls."""

from __future__ import annotations

import pytest

from docase import (
    DoContext,
    DoException,
    ErrorCode,
    Failure,
    Result,
    ShortCircuit,
    Success,
    current_context,
    do,
    unwrap,
)


def test_inner_failure_is_a_normal_return() -> None:
    """An inner call's short-circuit never aborts the outer body."""
    trail: list[str] = []
    
    @do
    def inner(do: DoContext) -> Result[int, str]:
        do.unwrap(Failure("inner failed"))
        return Success(0)
    
    @do
    def outer(do: DoContext) -> Result[str, str]:
        result = inner()
        trail.append(f"outer saw {result!r}")
        return Success("outer finished")
    
    assert outer() == Success("outer finished")
    assert trail == ["outer saw Failure('inner failed')"]


def test_unwrapping_inner_failure_aborts_outer() -> None:
    @do
    def inner(do: DoContext) -> Result[int, str]:
        return Success(do.unwrap(Failure("deep")))
    
    @do
    def outer(do: DoContext) -> Result[int, str]:
        value = do.unwrap(inner())
        return Success(value + 1)
    
    assert outer() == Failure("deep")


def test_each_call_gets_fresh_identity() -> None:
    seen: list[DoContext] = []
    
    @do
    def capture(do: DoContext) -> Result[int, str]:
        seen.append(do)
        return Success(do.identity)
    
    first, second = capture(), capture()
    assert first != second
    assert seen[0] is not seen[1]


def test_outer_context_used_inside_inner_call() -> None:
    """A signal owned by a live outer context passes through the inner wrapper."""
    inner_finished: list[bool] = []
    
    @do
    def inner(outer_ctx: DoContext, do: DoContext) -> Result[int, str]:
        outer_ctx.unwrap(Failure("outer's failure"))
        inner_finished.append(True)
        return Success(1)
    
    @do
    def outer(do: DoContext) -> Result[int, str]:
        inner(do)
        return Success(2)
    
    assert outer() == Failure("outer's failure")
    assert inner_finished == []


def test_module_level_unwrap_targets_innermost_call() -> None:
    @do(inject=None)
    def inner() -> Result[int, str]:
        return Success(unwrap(Failure("inner")))
    
    @do(inject=None)
    def outer() -> Result[str, str]:
        outer_id = current_context().identity
        result = inner()
        assert current_context().identity == outer_id
        return Success(f"inner returned {result!r}")
    
    assert outer() == Success("inner returned Failure('inner')")


def test_orphaned_signal_fails_loudly() -> None:
    @do
    def body(do: DoContext) -> Result[int, str]:
        raise ShortCircuit(owner=-1, failure=Failure("nobody's"))
    
    with pytest.raises(DoException) as info:
        body()
    assert info.value.code is ErrorCode.ORPHANED_SIGNAL
    assert isinstance(info.value.__cause__, ShortCircuit)


def test_stale_context_fails_loudly() -> None:
    leaked: list[DoContext] = []
    
    @do
    def body(do: DoContext) -> Result[int, str]:
        leaked.append(do)
        return Success(1)
    
    body()
    assert leaked[0].closed
    with pytest.raises(DoException) as info:
        leaked[0].unwrap(Success(1))
    assert info.value.code is ErrorCode.STALE_CONTEXT


def test_unwrap_outside_any_call() -> None:
    with pytest.raises(DoException) as info:
        unwrap(Success(1))
    assert info.value.code is ErrorCode.NO_ACTIVE_CONTEXT


def test_context_stack_restored_after_errors() -> None:
    @do
    def boom(do: DoContext) -> Result[int, str]:
        raise ValueError("genuine")
    
    with pytest.raises(ValueError):
        boom()
    with pytest.raises(DoException):
        current_context()


def test_signal_is_read_only() -> None:
    signal = ShortCircuit(7, Failure("x"))
    assert signal.owner == 7
    assert signal.failure == Failure("x")
    with pytest.raises(AttributeError):
        signal.owner = 8  # type: ignore[misc]
