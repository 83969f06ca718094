from __future__ import annotations

import inspect
from concurrent.futures import Future
from typing import Any

import pytest

from monadic import Err, Just, Ok, Result, UnwrapError, err, is_result, ok
from tests.helpers import add, fails_if_executed, settled


class CustomError(Exception):
    pass


def assert_ok(result: Result[Any, Any], expected: Any) -> None:
    assert result.is_ok()
    assert result == Ok(expected)


def assert_err(result: Result[Any, Any], expected: Any) -> None:
    assert result.is_err()
    assert result == Err(expected)


def test_constructors() -> None:
    assert_ok(ok("OK"), "OK")
    assert_err(err("Err"), "Err")
    assert repr(ok(1)) == "Ok(1)"
    assert repr(err("e")) == "Err('e')"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Ok(1), True),
        (Err(1), True),
        (Just(1), False),
        (1, False),
        (None, False),
        ((True, 1), False),
    ],
)
def test_is_result(value: Any, expected: bool) -> None:
    assert is_result(value) is expected


def test_map() -> None:
    assert_ok(ok(12).map(add(-2)).map(add(10)), 20)
    assert_err(err("Fail").map(lambda _: 0).map(add(-2)).map(add(10)), "Fail")

    e = err("Fail")
    assert e.map(fails_if_executed) is e


def test_map_err() -> None:
    assert_ok(ok(0).map_err(add(-2)).map_err(add(10)), 0)
    assert_err(err(12).map_err(add(-2)).map_err(lambda _: "Fail"), "Fail")
    assert_err(err(12).map_err(add(-2)), 10)

    o = ok(0)
    assert o.map_err(fails_if_executed) is o


def test_filter() -> None:
    o = ok(45)

    assert_ok(o.filter(lambda n: n > 20, "Not greater than 20"), 45)
    should_be_err = o.filter(lambda n: n < 20, "Not less than 20")
    assert_err(should_be_err, "Not less than 20")

    # filter can neither rescue an Err nor replace its error
    assert_err(should_be_err.filter(lambda _: True, "OK"), "Not less than 20")
    assert_err(should_be_err.filter(lambda _: False, "OK"), "Not less than 20")
    assert should_be_err.filter(fails_if_executed, "OK") is should_be_err


def test_chain() -> None:
    o = ok("Some user data")

    should_remain_ok = o.chain(lambda _: ok("Posts that the user has authored")).chain(lambda _: ok("List of commenters"))

    should_become_err = (
        o.chain(lambda _: err("Malformed query"))
        .chain(lambda _: ok("Once a result has become Err, it cannot be rescued"))
        .chain(lambda _: ok("The Err will skip these operations"))
    )

    should_remain_err = should_become_err.chain(lambda _: err("Skipped chains cannot supersede the Err")).chain(
        lambda _: err("An Err can be mapped over using map_err"),
    )

    assert_ok(should_remain_ok, "List of commenters")
    assert_err(should_become_err, "Malformed query")
    assert_err(should_remain_err, "Malformed query")
    assert should_become_err.chain(fails_if_executed) is should_become_err


def test_or_raise() -> None:
    o = ok(50)
    e = err("Nothing here...")

    assert o.or_raise("This should not raise") == 50
    assert o.or_raise(TypeError("This should also not raise")) == 50

    with pytest.raises(UnwrapError, match="This will be wrapped in an UnwrapError") as exc_info:
        e.or_raise("This will be wrapped in an UnwrapError")
    assert exc_info.value.container is e

    with pytest.raises(TypeError, match="This will be a TypeError"):
        e.or_raise(TypeError("This will be a TypeError"))


def test_or_raise_keeps_the_given_exception() -> None:
    error = CustomError("msg")

    with pytest.raises(CustomError) as exc_info:
        err("x").or_raise(error)
    assert exc_info.value is error
    assert exc_info.value.__cause__ is None


def test_or_raise_chains_exception_errors() -> None:
    cause = ValueError("boom")

    with pytest.raises(UnwrapError) as exc_info:
        err(cause).or_raise("msg")
    assert exc_info.value.__cause__ is cause


def test_with_default() -> None:
    assert ok(20).with_default(40) == 20
    assert err("Err").with_default(40) == 40


def test_pattern_matching() -> None:
    match ok(1).chain(lambda v: err(f"bad {v}")):
        case Ok():
            pytest.fail("expected an Err")
        case Err(error):
            assert error == "bad 1"


@pytest.mark.asyncio
async def test_with_default_is_awaitable_for_deferred_defaults() -> None:
    default = settled(40)
    from_ok = ok(20).with_default(default)
    assert inspect.isawaitable(from_ok)
    assert await from_ok == 20
    assert default.cr_frame is None

    from_err = err("Err").with_default(settled(40))
    assert inspect.isawaitable(from_err)
    assert await from_err == 40

    cf: Future[int] = Future()
    cf.set_result(40)
    assert await ok(20).with_default(cf) == 20
    assert await err("Err").with_default(cf) == 40
