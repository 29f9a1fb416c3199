"""Examples of do-notation in docase.

Demonstrates:
- Sequencing fallible steps with early return
- A transactional helper that observes and re-raises the short-circuit
- Nested do-wrapped calls, each resolving its own failures
- Applicative unwrap over Maybe and Attempt
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TypeVar

from .do import DoContext, do, do_for, unwrap_all
from .monads import Attempt, Failure, Maybe, Result, Success, attempt, maybe

T = TypeVar("T")


# ═════════════════════════════════════════════════════════════════════════════
# Example 1: Ledger Transfer With Rollback
# ═════════════════════════════════════════════════════════════════════════════


@dataclass
class Ledger:
    """In-memory balances with all-or-nothing transfers."""

    balances: dict[str, int] = field(default_factory=dict)
    caps: dict[str, int] = field(default_factory=dict)
    rolled_back: bool = False

    def account(self, name: str) -> Result[str, str]:
        return Success(name) if name in self.balances else Failure(f"unknown account: {name}")

    def withdraw(self, name: str, amount: int) -> Result[int, str]:
        if self.balances[name] < amount:
            return Failure(f"insufficient funds in {name}")
        self.balances[name] -= amount
        return Success(self.balances[name])

    def deposit(self, name: str, amount: int) -> Result[int, str]:
        if (cap := self.caps.get(name)) is not None and self.balances[name] + amount > cap:
            return Failure(f"deposit would exceed cap of {name}")
        self.balances[name] += amount
        return Success(self.balances[name])

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Restore balances if the block exits early for any reason."""
        snapshot = dict(self.balances)
        try:
            yield
        except BaseException:
            self.balances = snapshot
            self.rolled_back = True
            raise

    @do
    def transfer(self, source: str, target: str, amount: int, do: DoContext) -> Result[dict[str, int], str]:
        with self.transaction():
            src, dst = do.unwrap_all(self.account(source), self.account(target))
            do.unwrap(self.withdraw(src, amount))
            do.unwrap(self.deposit(dst, amount))
        return Success(dict(self.balances))


def example_transfer() -> None:
    ledger = Ledger({"alice": 10, "bob": 0})
    assert ledger.transfer("alice", "bob", 4) == Success({"alice": 6, "bob": 4})
    assert not ledger.rolled_back

    assert ledger.transfer("alice", "carol", 1) == Failure("unknown account: carol")
    assert ledger.transfer("bob", "alice", 50) == Failure("insufficient funds in bob")
    assert ledger.rolled_back
    assert ledger.balances == {"alice": 6, "bob": 4}

    # withdrawal already applied when the deposit fails
    capped = Ledger({"alice": 10, "bob": 8}, caps={"bob": 10})
    assert capped.transfer("alice", "bob", 5) == Failure("deposit would exceed cap of bob")
    assert capped.balances == {"alice": 10, "bob": 8}


# ═════════════════════════════════════════════════════════════════════════════
# Example 2: Nested Do-Wrapped Calls
# ═════════════════════════════════════════════════════════════════════════════


def parse_age(raw: str) -> Result[int, str]:
    if not raw.isdigit():
        return Failure(f"invalid age: {raw!r}")
    return Success(int(raw))


@do
def validate(form: dict[str, str], do: DoContext) -> Result[dict[str, object], str]:
    name = do.unwrap(maybe(form.get("name")).to_result("name is required"))
    age = do.unwrap(parse_age(form.get("age", "")))
    return Success({"name": name, "age": age})


@do_for("call")
class Register:
    """Validate each form, keeping the valid ones and the first error of each bad one."""

    def call(self, forms: list[dict[str, str]], do: DoContext) -> Result[list[dict[str, object]], list[str]]:
        errors: list[str] = []
        users = []
        for form in forms:
            # validate() resolves its own failure; this body keeps running
            checked = validate(form)
            if checked.is_failure():
                errors.append(checked.failure())
            else:
                users.append(do.unwrap(checked))
        return Failure(errors) if errors else Success(users)


def example_register() -> None:
    ok = Register().call([{"name": "ada", "age": "36"}])
    assert ok == Success([{"name": "ada", "age": 36}])

    bad = Register().call([{"name": "ada", "age": "x"}, {"age": "3"}])
    assert bad == Failure(["invalid age: 'x'", "name is required"])


# ═════════════════════════════════════════════════════════════════════════════
# Example 3: Maybe And Attempt Without An Injected Context
# ═════════════════════════════════════════════════════════════════════════════


@do(inject=None)
def sum_settings(settings: dict[str, int], *keys: str) -> Maybe[int]:
    """Sum several optional settings; any missing key gives Nothing."""
    return maybe(sum(unwrap_all(*(maybe(settings.get(k)) for k in keys))))


@do(inject=None)
def divide_all(pairs: list[tuple[int, int]], combine: Callable[..., T]) -> Attempt[T]:
    """Integer-divide each pair; the first ZeroDivisionError becomes the result."""
    quotients = unwrap_all(*(attempt(lambda a=a, b=b: a // b, ZeroDivisionError) for a, b in pairs))
    return Attempt.pure(combine(*quotients))


def example_applicative() -> None:
    assert sum_settings({"a": 1, "b": 2}, "a", "b") == maybe(3)
    assert sum_settings({"a": 1}, "a", "b").is_none()

    assert divide_all([(4, 2), (9, 3)], lambda *q: sum(q)) == Attempt.pure(5)
    assert divide_all([(4, 0), (9, 3)], lambda *q: sum(q)).is_error()


def run_all_examples() -> None:
    """Execute every example."""
    example_transfer()
    example_register()
    example_applicative()
