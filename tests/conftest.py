from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from monadic import set_log_level

if TYPE_CHECKING:
    from collections.abc import Generator


def pytest_configure() -> None:
    logging.basicConfig(level=logging.ERROR)  # set log levels very high for tests
    set_log_level("ERROR")


@pytest.fixture
def restore_log_level() -> Generator[None]:
    logger = logging.getLogger("monadic")
    level = logger.level
    yield
    logger.setLevel(level)
