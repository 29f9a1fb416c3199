"""Tests for the structured error model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docase import DoError, DoException, ErrorCode


def test_render_includes_code_and_context() -> None:
    error = DoError.create("payload() on Nothing", ErrorCode.PAYLOAD_ON_FAILURE, context_id=4, details="extra")
    
    assert error.render() == "[PAYLOAD_ON_FAILURE] payload() on Nothing (context #4)\nDetails: extra"
    assert str(error) == error.render()


def test_error_is_immutable() -> None:
    error = DoError.create("stale", ErrorCode.STALE_CONTEXT)
    
    with pytest.raises(ValidationError):
        error.message = "changed"  # type: ignore[misc]
    assert error.message == "stale"


def test_exception_carries_error() -> None:
    exc = DoException.create("orphan", ErrorCode.ORPHANED_SIGNAL, context_id=2)
    
    assert isinstance(exc, RuntimeError)
    assert exc.code is ErrorCode.ORPHANED_SIGNAL
    assert exc.error.context_id == 2
    assert str(exc) == "[ORPHANED_SIGNAL] orphan (context #2)"
