from __future__ import annotations

from typing import Any


class UnwrapError(Exception):
    """
    Exception raised from ``or_raise`` calls.

    The container the value could not be extracted from is kept on the
    ``.container`` attribute; its type information is lost, so it is meant
    for inspection only.
    """

    def __init__(self, container: Any, message: str) -> None:
        super().__init__(message)
        self.container = container

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.container, str(self)))
