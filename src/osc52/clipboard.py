"""Clipboard buffers addressable by an OSC 52 request."""

from enum import Enum


class Clipboard(Enum):
    """Clipboard buffer targeted by a set, query, or clear request.

    The value is the Pc selector character written into the sequence.
    Secondary, select and cut buffers are not supported.
    """

    SYSTEM = "c"
    PRIMARY = "p"

    @property
    def selector(self) -> str:
        """Return the selector character for the wire format."""
        return self.value
