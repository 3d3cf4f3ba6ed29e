#!/usr/bin/env python3
"""Pytest fixtures for osc52 tests.

Provides canned payloads, their base64 forms, and a stream double that
refuses writes a set number of times.
"""

import io

import pytest

from osc52.sequence import Osc52

ESC = "\x1b"
BEL = "\x07"

HELLO_WORLD = "hello world"
HELLO_WORLD_B64 = "aGVsbG8gd29ybGQ="

# 95 bytes, 128 base64 characters: one full screen chunk plus a partial one.
LONG_HELLO = " ".join([HELLO_WORLD] * 8)


class FlakyStream(io.StringIO):
    """StringIO whose write raises BlockingIOError a set number of times.

    Attributes:
        failures: Writes still to refuse.
        accept: Characters accepted before each refused write raises.
        report_written: If False, raise the two-argument BlockingIOError,
            which carries no characters_written.
    """

    def __init__(self, failures: int, accept: int = 0, report_written: bool = True) -> None:
        super().__init__()
        self.failures = failures
        self.accept = accept
        self.report_written = report_written
        self.flushes = 0

    def write(self, s: str) -> int:
        if self.failures > 0:
            self.failures -= 1
            written = super().write(s[:self.accept])
            if not self.report_written:
                raise BlockingIOError(11, "Resource temporarily unavailable")
            raise BlockingIOError(11, "Resource temporarily unavailable", written)
        return super().write(s)

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


@pytest.fixture
def hello() -> Osc52:
    """Create a SET request for "hello world" with default settings."""
    return Osc52.of(HELLO_WORLD)


@pytest.fixture
def no_retry_sleep(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make tenacity retries in terminal_io return immediately."""
    from osc52.terminal_io import _write_pending

    monkeypatch.setattr(_write_pending.retry, "sleep", lambda seconds: None)


class FlakyBuffer(io.BytesIO):
    """BytesIO whose first write accepts only some bytes, then raises.

    Attributes:
        accept: Bytes accepted by the refused write.
        refused: True once the refused write has happened.
    """

    def __init__(self, accept: int) -> None:
        super().__init__()
        self.accept = accept
        self.refused = False

    def write(self, b) -> int:
        if not self.refused:
            self.refused = True
            written = super().write(bytes(b[:self.accept]))
            raise BlockingIOError(11, "Resource temporarily unavailable", written)
        return super().write(b)
