from __future__ import annotations

from .errors import UnwrapError
from .logging import set_log_level
from .maybe import Just, JustNothing, Maybe, MaybePromise, Nothing, from_optional, is_maybe, just, nothing
from .result import Err, Ok, OkErr, Result, ResultPromise, async_err, async_ok, err, is_result, ok

__all__ = [
    "Err",
    "Just",
    "JustNothing",
    "Maybe",
    "MaybePromise",
    "Nothing",
    "Ok",
    "OkErr",
    "Result",
    "ResultPromise",
    "UnwrapError",
    "async_err",
    "async_ok",
    "err",
    "from_optional",
    "is_maybe",
    "is_result",
    "just",
    "nothing",
    "ok",
    "set_log_level",
]
