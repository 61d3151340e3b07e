"""Unit tests for the @timed profiling decorator."""

import pytest
from loguru import logger

from cl_resize_crop.utils.profiling import timed


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="INFO", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_timed_returns_result_and_logs(log_messages: list[str]):
    @timed
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert any("[PROFILE]" in m and "add" in m for m in log_messages)


def test_timed_logs_on_exception(log_messages: list[str]):
    @timed
    def fail() -> None:
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        fail()

    assert any("[PROFILE]" in m and "fail" in m for m in log_messages)


def test_timed_preserves_metadata():
    @timed
    def documented() -> None:
        """Docstring survives."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docstring survives."
