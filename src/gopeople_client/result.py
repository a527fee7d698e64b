"""Success-or-failure values and the combinators that chain them."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar, Union

from gopeople_client.exceptions import GoPeopleError

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Err", "Ok", "Result", "and_then", "traverse"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying a :class:`GoPeopleError`."""

    error: GoPeopleError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error

    def map(self, fn: Callable[[object], object]) -> Err:
        return self


Result: TypeAlias = Union[Ok[T], Err]


def traverse(
    items: Iterable[T], fn: Callable[[T], Result[U]]
) -> Result[list[U]]:
    """Apply ``fn`` to every item, stopping at the first ``Err``."""
    values: list[U] = []
    for item in items:
        outcome = fn(item)
        if isinstance(outcome, Err):
            return outcome
        values.append(outcome.value)
    return Ok(values)


async def and_then(
    first: Awaitable[Result[T]],
    step: Callable[[T], Awaitable[Result[U]]],
) -> Result[U]:
    """Await ``first``; on success run ``step`` with its value.

    ``step`` is only called (and so its pipeline only started) when
    ``first`` succeeded. The value of ``first`` is discarded once it has
    been handed to ``step``.
    """
    outcome = await first
    if isinstance(outcome, Err):
        return outcome
    return await step(outcome.value)
