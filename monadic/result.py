from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Literal, NoReturn, final

from typing_extensions import TypeIs

from monadic.errors import UnwrapError
from monadic.utils import Deferred, apply, completed, discard, is_deferred, resolve

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from concurrent.futures import Future


@final
@dataclass(frozen=True)
class Ok[T]:
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def map[U](self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], object]) -> Ok[T]:
        return self

    def filter[E](self, pred: Callable[[T], bool], error: E) -> Ok[T] | Err[E]:
        """
        Keep this `Ok` when `pred` holds for its value, turn it into `Err(error)` otherwise.
        """
        if pred(self.value):
            return self
        return Err(error)

    def chain[U, E](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_raise(self, error_or_message: str | BaseException) -> T:
        """
        Return the value.
        """
        return self.value

    def with_default(self, default: object) -> T | Awaitable[T]:
        """
        Return the value, or an awaitable of it when `default` is deferred.
        """
        if is_deferred(default):
            discard(default)
            return completed(self.value)
        return self.value


@final
@dataclass(frozen=True)
class Err[E]:
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[Any], object]) -> Err[E]:
        return self

    def map_err[F](self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def filter(self, pred: Callable[[Any], bool], error: object) -> Err[E]:
        """
        Return this `Err` untouched, `pred` is never called.

        An `Err` can neither be rescued nor have its error replaced by `filter`.
        """
        return self

    def chain(self, fn: Callable[[Any], Result[Any, Any]]) -> Err[E]:
        """
        Return this `Err`, `fn` is never called.

        Once a chain has failed every following step is skipped, so the
        first error is the one that is kept.
        """
        return self

    def or_raise(self, error_or_message: str | BaseException) -> NoReturn:
        """
        Raise `error_or_message` when it is an exception, otherwise wrap the
        message in an `UnwrapError`.
        """
        if isinstance(error_or_message, BaseException):
            raise error_or_message

        exc = UnwrapError(self, error_or_message)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def with_default[U](self, default: U | Awaitable[U] | Future[U]) -> U | Awaitable[U]:
        if is_deferred(default):
            return resolve(default)
        return default


# define Result as a generic type alias for use in type annotations
type Result[T, E] = Ok[T] | Err[E]

# a type to use in `isinstance` checks
OkErr: Final = (Ok, Err)


def ok[T](value: T) -> Ok[T]:
    return Ok(value)


def err[E](error: E) -> Err[E]:
    return Err(error)


def is_result(value: object) -> TypeIs[Ok[Any] | Err[Any]]:
    return isinstance(value, OkErr)


def async_ok[T](value: T | Awaitable[T] | Future[T]) -> ResultPromise[T, Any]:
    """Lift a value, or an awaitable of one, into a `ResultPromise` settling to `Ok`."""

    async def _ok() -> Result[T, Any]:
        return Ok(await resolve(value))

    return ResultPromise(_ok())


def async_err[E](error: E | Awaitable[E] | Future[E]) -> ResultPromise[Any, E]:
    """Lift an error, or an awaitable of one, into a `ResultPromise` settling to `Err`."""

    async def _err() -> Result[Any, E]:
        return Err(await resolve(error))

    return ResultPromise(_err())


@final
class ResultPromise[T, E](Deferred[Result[T, E]]):
    """
    A deferred `Result`.

    Awaiting a `ResultPromise` yields the `Result` it settles to. Callbacks
    given to `map`, `map_err`, `filter` and `chain` may return plain values
    or awaitables; an exception raised by any of them rejects the promise
    and is never turned into an `Err`.

    Nothing runs until the promise is first awaited, so a promise that is
    dropped unawaited leaves its steps unrun and asyncio reports the
    pending coroutine as never awaited.
    """

    async def is_ok(self) -> bool:
        return (await self).is_ok()

    async def is_err(self) -> bool:
        return (await self).is_err()

    async def or_raise(self, error_or_message: str | BaseException) -> T:
        return (await self).or_raise(error_or_message)

    async def with_default[U](self, default: U | Awaitable[U] | Future[U]) -> T | U:
        r = await self
        match r:
            case Ok(value):
                discard(default)
                return value
            case Err():
                return await resolve(default)

    def map[U](self, fn: Callable[[T], U | Awaitable[U]]) -> ResultPromise[U, E]:
        async def _map() -> Result[U, E]:
            r = await self
            match r:
                case Ok(value):
                    return Ok(await apply(fn, value))
                case Err():
                    return r

        return ResultPromise(_map())

    def map_err[F](self, fn: Callable[[E], F | Awaitable[F]]) -> ResultPromise[T, F]:
        async def _map_err() -> Result[T, F]:
            r = await self
            match r:
                case Ok():
                    return r
                case Err(error):
                    return Err(await apply(fn, error))

        return ResultPromise(_map_err())

    def filter(self, pred: Callable[[T], bool | Awaitable[bool]], error: E | Awaitable[E]) -> ResultPromise[T, E]:
        async def _filter() -> Result[T, E]:
            r = await self
            match r:
                case Ok(value):
                    if await apply(pred, value):
                        discard(error)
                        return r
                    return Err(await resolve(error))
                case Err():
                    discard(error)
                    return r

        return ResultPromise(_filter())

    def chain[U](self, fn: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]]) -> ResultPromise[U, E]:
        async def _chain() -> Result[U, E]:
            r = await self
            match r:
                case Ok(value):
                    return await apply(fn, value)
                case Err():
                    return r

        return ResultPromise(_chain())
