"""Capability shared by every container the do-notation can unwrap."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Unwrappable(Protocol[T_co]):
    """A container that is either a success carrying a payload or a failure.

    The do-notation core only ever talks to containers through these three
    methods and never looks at the payload itself:

    - is_success: True for Success / Some / Value
    - payload: the wrapped value, only defined on a success
    - as_failure: the failure-shaped container to hand back to the caller
    """

    def is_success(self) -> bool: ...
    def payload(self) -> T_co: ...
    def as_failure(self) -> Unwrappable[T_co]: ...
