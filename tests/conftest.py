import io
from datetime import datetime

import pytest

from logify.inspection import set_inspection_logger
from logify.logger import Logger


class FixedClock:
    """Callable clock returning a settable datetime."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 1, 19, 9, 5, 7))


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def plain_logger(tmp_path, stream, clock):
    """A debug-level, uncolored, untimed Logger writing into tmp_path."""
    return Logger(
        level="debug",
        with_time=False,
        colorize=False,
        base_dir=str(tmp_path),
        stream=stream,
        clock=clock,
    )


@pytest.fixture
def inspection_logger(plain_logger):
    set_inspection_logger(plain_logger)
    yield plain_logger
    set_inspection_logger(None)
