#!/usr/bin/env python3
"""Writing rendered OSC 52 sequences to a terminal.

The sequence builder itself performs no I/O. This module is what the CLI
uses to deliver a sequence: it writes the whole text and flushes, retrying
with tenacity when a non-blocking terminal temporarily refuses output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from osc52.writer_constants import (
    INITIAL_WAIT,
    MAX_ATTEMPTS,
    MAX_WAIT,
    TTY_PATH,
    WAIT_MULTIPLIER,
)

logger = logging.getLogger(__name__)


class TerminalError(Exception):
    """
    Exception raised when no terminal is available to write to.

    Raised by open_tty() when the process has no controlling terminal.
    """

    pass


@dataclass
class PendingWrite:
    """Progress of a write that may be interrupted part way.

    Attributes:
        data: Full data to write, bytes for a binary layer or str for a
            plain text stream.
        offset: Number of units of data already accepted by the stream.
            Bytes or characters, matching the type of data.
    """

    data: bytes | str
    offset: int = 0


def open_tty(path: str = TTY_PATH) -> TextIO:
    """Open the controlling terminal for writing.

    Args:
        path: Terminal device path.

    Returns:
        Text stream writing UTF-8 to the terminal. The caller closes it.

    Raises:
        TerminalError: If the terminal cannot be opened.
    """
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as e:
        raise TerminalError(f"Cannot open terminal {path}: {e}") from e


def _log_retry(retry_state: RetryCallState) -> None:
    """Log a refused write before tenacity sleeps."""
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.debug("Terminal write attempt %d refused: %s, will retry",
                 retry_state.attempt_number, exc)


@retry(
    wait=wait_exponential(
        multiplier=INITIAL_WAIT,
        exp_base=WAIT_MULTIPLIER,
        max=MAX_WAIT,
    ),
    retry=retry_if_exception_type((BlockingIOError, InterruptedError)),
    stop=stop_after_attempt(MAX_ATTEMPTS),
    before_sleep=_log_retry,
    reraise=True,
)
def _write_pending(pending: PendingWrite, stream: BinaryIO | TextIO) -> None:
    """Write the unwritten remainder of pending and flush.

    Args:
        pending: Write progress, advanced as the stream accepts data.
        stream: Destination stream accepting the type of pending.data.

    Raises:
        BlockingIOError: If the stream still refuses after all attempts.
        InterruptedError: If every attempt is interrupted.
    """
    if pending.offset < len(pending.data):
        try:
            stream.write(pending.data[pending.offset:])
        except BlockingIOError as e:
            pending.offset += getattr(e, "characters_written", 0)
            raise
        pending.offset = len(pending.data)
    stream.flush()


def write_sequence(sequence: str, stream: TextIO) -> int:
    """Write a rendered sequence to a stream and flush it.

    When the stream has a binary buffer, as sys.stdout and an opened tty
    do, the sequence is encoded with the stream's encoding and written to
    the buffer, so a partial write resumes at the right byte.

    Args:
        sequence: Rendered OSC 52 sequence. May be empty.
        stream: Destination text stream, usually stdout, stderr or a tty.

    Returns:
        Number of characters written. 0 for an empty sequence, in which
        case the stream is not touched.
    """
    if not sequence:
        return 0
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        _write_pending(PendingWrite(sequence), stream)
    else:
        stream.flush()
        encoding = getattr(stream, "encoding", None) or "utf-8"
        data = sequence.encode(encoding, errors="replace")
        _write_pending(PendingWrite(data), buffer)
    logger.debug("Wrote %d characters to terminal", len(sequence))
    return len(sequence)
