from __future__ import annotations

from typing import Any, NoReturn

from monadic import Just, Maybe, Nothing


def add1(value: int) -> int:
    return value + 1


async def async_add1(value: int) -> int:
    return add1(value)


def add(x: int) -> Any:
    return lambda y: x + y


def async_add(x: int) -> Any:
    async def _add(y: int) -> int:
        return x + y

    return _add


def divide5_by(value: int) -> Maybe[float]:
    if value == 0:
        return Nothing()
    return Just(5 / value)


async def async_divide5_by(value: int) -> Maybe[float]:
    return divide5_by(value)


async def settled[T](value: T) -> T:
    return value


def fails_if_executed(*args: Any) -> NoReturn:
    msg = "This should not be executed"
    raise AssertionError(msg)
