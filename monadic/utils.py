from __future__ import annotations

import asyncio
import inspect
import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Self, cast

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Generator

logger = logging.getLogger(__name__)


def is_deferred(value: object) -> bool:
    return isinstance(value, Future) or inspect.isawaitable(value)


async def resolve[T](value: T | Awaitable[T] | Future[T]) -> T:
    """Await ``value`` when it is awaitable or a thread future, return it as is otherwise."""
    if isinstance(value, Future):
        return await asyncio.wrap_future(value)
    if inspect.isawaitable(value):
        return await value
    return cast("T", value)


async def apply[T](fn: Callable[..., T | Awaitable[T]], *args: Any) -> T:
    """
    Call ``fn`` and resolve whatever it returns.

    Exceptions raised by ``fn``, synchronously or by the awaitable it
    returns, propagate to the caller untouched.
    """
    try:
        return await resolve(fn(*args))
    except Exception:
        logger.debug("callback %s raised, rejecting", getattr(fn, "__qualname__", repr(fn)), exc_info=True)
        raise


def discard(value: object) -> None:
    # an unused coroutine must be closed or asyncio warns it was never awaited
    if inspect.iscoroutine(value):
        value.close()


async def completed[T](value: T) -> T:
    return value


def settle[T](aw: Awaitable[T] | Future[T]) -> asyncio.Future[T]:
    if isinstance(aw, Future):
        return asyncio.wrap_future(aw)
    return asyncio.ensure_future(aw)


class Deferred[T]:
    """
    An awaitable over a single settle-once future.

    The wrapped awaitable is scheduled the first time the instance is
    awaited; every later await observes that same future, so no step of a
    chain ever runs twice.
    """

    def __init__(self, aw: Awaitable[T] | Future[T]) -> None:
        self._aw = aw
        self._f: asyncio.Future[T] | None = None

    @classmethod
    def from_(cls, aw: Awaitable[T] | Future[T]) -> Self:
        return cls(aw)

    def __await__(self) -> Generator[Any, None, T]:
        if self._f is None:
            self._f = settle(self._aw)
        return self._f.__await__()
