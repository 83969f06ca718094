from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal, NoReturn, final

from typing_extensions import TypeIs

from monadic.errors import UnwrapError
from monadic.result import Err, Ok, ResultPromise
from monadic.utils import Deferred, apply, discard, resolve

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from concurrent.futures import Future

    from monadic.result import Result

NOTHING_MESSAGE: Final = "Attempted to extract a value from a Nothing"


@final
@dataclass(frozen=True)
class Just[T]:
    """
    A value that is present.
    """

    value: T

    def __repr__(self) -> str:
        return f"Just({self.value!r})"

    def is_just(self) -> Literal[True]:
        return True

    def is_nothing(self) -> Literal[False]:
        return False

    def or_raise(self) -> T:
        return self.value

    def with_default(self, default: object) -> T:
        return self.value

    def or_else_do(self, fn: Callable[[], object]) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Just[U]:
        return Just(fn(self.value))

    def filter(self, pred: Callable[[T], bool]) -> Maybe[T]:
        if pred(self.value):
            return self
        return Nothing()

    def chain[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return fn(self.value)

    def to_result[E](self, error: E) -> Ok[T]:
        return Ok(self.value)


@final
@dataclass(frozen=True)
class Nothing[T]:
    """
    The absence of a value.

    Absence is not a failure: every transformation short-circuits and
    returns this same instance without calling the function it was given.
    """

    def __repr__(self) -> str:
        return "Nothing()"

    def is_just(self) -> Literal[False]:
        return False

    def is_nothing(self) -> Literal[True]:
        return True

    def or_raise(self) -> NoReturn:
        raise UnwrapError(self, NOTHING_MESSAGE)

    def with_default[U](self, default: U) -> U:
        return default

    def or_else_do[U](self, fn: Callable[[], U]) -> U:
        return fn()

    def map(self, fn: Callable[[Any], object]) -> Nothing[T]:
        return self

    def filter(self, pred: Callable[[Any], bool]) -> Nothing[T]:
        return self

    def chain(self, fn: Callable[[Any], Maybe[Any]]) -> Nothing[T]:
        return self

    def to_result[E](self, error: E) -> Err[E]:
        return Err(error)


type Maybe[T] = Just[T] | Nothing[T]

# a type to use in `isinstance` checks
JustNothing: Final = (Just, Nothing)


def just[T](value: T) -> Just[T]:
    return Just(value)


def nothing() -> Nothing[Any]:
    return Nothing()


def from_optional[T](value: T | None) -> Maybe[T]:
    """Return `Nothing` for `None` and `Just(value)` for anything else, falsy values included."""
    if value is None:
        return Nothing()
    return Just(value)


def is_maybe(value: object) -> TypeIs[Just[Any] | Nothing[Any]]:
    return isinstance(value, JustNothing)


@final
class MaybePromise[T](Deferred[Maybe[T]]):
    """
    A deferred `Maybe`.

    Built from an awaitable of a `Maybe` with `MaybePromise.from_`. Awaiting
    it yields that `Maybe`, or raises whatever the awaitable raised.
    Functions given to `map`, `filter`, `chain` and `or_else_do` may return
    plain values or awaitables, both are resolved before the next step runs.

    Nothing runs until the promise is first awaited, so a promise that is
    dropped unawaited leaves its steps unrun and asyncio reports the
    pending coroutine as never awaited.
    """

    async def is_just(self) -> bool:
        return (await self).is_just()

    async def is_nothing(self) -> bool:
        return (await self).is_nothing()

    async def or_raise(self) -> T:
        return (await self).or_raise()

    async def with_default[U](self, default: U | Awaitable[U] | Future[U]) -> T | U:
        m = await self
        match m:
            case Just(value):
                discard(default)
                return value
            case Nothing():
                return await resolve(default)

    async def or_else_do[U](self, fn: Callable[[], U | Awaitable[U]]) -> T | U:
        m = await self
        match m:
            case Just(value):
                return value
            case Nothing():
                return await apply(fn)

    def map[U](self, fn: Callable[[T], U | Awaitable[U]]) -> MaybePromise[U]:
        async def _map() -> Maybe[U]:
            m = await self
            match m:
                case Just(value):
                    return Just(await apply(fn, value))
                case Nothing():
                    return Nothing()

        return MaybePromise(_map())

    def filter(self, pred: Callable[[T], bool | Awaitable[bool]]) -> MaybePromise[T]:
        async def _filter() -> Maybe[T]:
            m = await self
            match m:
                case Just(value):
                    return m if await apply(pred, value) else Nothing()
                case Nothing():
                    return m

        return MaybePromise(_filter())

    def chain[U](self, fn: Callable[[T], Maybe[U] | Awaitable[Maybe[U]]]) -> MaybePromise[U]:
        async def _chain() -> Maybe[U]:
            m = await self
            match m:
                case Just(value):
                    return await apply(fn, value)
                case Nothing():
                    return Nothing()

        return MaybePromise(_chain())

    def to_result[E](self, error: E) -> ResultPromise[T, E]:
        async def _to_result() -> Result[T, E]:
            return (await self).to_result(error)

        return ResultPromise(_to_result())
