"""Tests for the Result container.

Validates:
- Success/Failure construction and accessors
- map, alt_map, bind, or_else
- Unwrappable capability and its misuse errors
- Equality, hashing, truthiness
"""

from __future__ import annotations

import pytest

from docase import DoException, ErrorCode, Failure, Nothing, Result, Some, Success, Unwrappable


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_success_construction() -> None:
    """Test Success variant construction and accessors."""
    result: Result[int, str] = Success(42)
    
    assert result.is_success()
    assert not result.is_failure()
    assert result.payload() == 42
    assert result.value_or(0) == 42


def test_failure_construction() -> None:
    """Test Failure variant construction and accessors."""
    result: Result[int, str] = Failure("failed")
    
    assert not result.is_success()
    assert result.is_failure()
    assert result.failure() == "failed"
    assert result.value_or(0) == 0


# ═════════════════════════════════════════════════════════════════════════════
# Unwrappable Capability
# ═════════════════════════════════════════════════════════════════════════════


def test_implements_unwrappable() -> None:
    assert isinstance(Success(1), Unwrappable)
    assert isinstance(Failure("x"), Unwrappable)


def test_as_failure_returns_same_container() -> None:
    """as_failure hands back the failure unchanged."""
    fail: Result[int, str] = Failure("no_one")
    assert fail.as_failure() is fail


def test_payload_on_failure_raises() -> None:
    with pytest.raises(DoException) as info:
        Failure("boom").payload()
    assert info.value.code is ErrorCode.PAYLOAD_ON_FAILURE
    assert "boom" in str(info.value)


def test_as_failure_on_success_raises() -> None:
    with pytest.raises(DoException) as info:
        Success(1).as_failure()
    assert info.value.code is ErrorCode.FAILURE_ON_SUCCESS


def test_failure_accessor_on_success_raises() -> None:
    with pytest.raises(DoException):
        Success(1).failure()


# ═════════════════════════════════════════════════════════════════════════════
# Operations
# ═════════════════════════════════════════════════════════════════════════════


def test_map() -> None:
    """map applies only to Success."""
    assert Success(5).map(lambda x: x * 2) == Success(10)
    assert Failure("fail").map(lambda x: x * 2) == Failure("fail")


def test_alt_map() -> None:
    """alt_map applies only to Failure."""
    assert Failure("fail").alt_map(lambda e: f"Error: {e}") == Failure("Error: fail")
    assert Success(42).alt_map(lambda e: f"Error: {e}") == Success(42)


def test_bind_chains() -> None:
    def positive(x: int) -> Result[int, str]:
        return Success(x) if x > 0 else Failure("must be positive")
    
    assert Success(5).bind(positive) == Success(5)
    assert Success(-1).bind(positive) == Failure("must be positive")
    assert Failure("earlier").bind(positive) == Failure("earlier")
    assert Success(5).flat_map(positive) == Success(5).bind(positive)


def test_or_else() -> None:
    assert Failure("fail").or_else(lambda _: Success(42)) == Success(42)
    assert Success(5).or_else(lambda _: Success(42)) == Success(5)


def test_to_maybe() -> None:
    assert Success(3).to_maybe() == Some(3)
    assert Failure("x").to_maybe() is Nothing


# ═════════════════════════════════════════════════════════════════════════════
# Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_equality() -> None:
    """Test structural equality."""
    assert Success(42) == Success(42)
    assert Failure("fail") == Failure("fail")
    assert Success(42) != Success(43)
    assert Success(42) != Failure(42)
    assert Success(1) != Some(1)


def test_hash_and_repr() -> None:
    assert len({Success(1), Success(1), Failure(1)}) == 2
    assert repr(Success(3)) == "Success(3)"
    assert repr(Failure("no_two")) == "Failure('no_two')"


def test_truthiness_and_iteration() -> None:
    assert bool(Success(0)) is True
    assert bool(Failure("x")) is False
    assert list(Success(42)) == [42]
    assert list(Failure("x")) == []
