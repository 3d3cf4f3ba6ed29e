#!/usr/bin/env python3
"""
Immutable builder for OSC 52 clipboard sequences.

OSC 52 lets a program inside a terminal set, query, or clear the terminal's
clipboard:

    ESC ] 52 ; Pc ; Pd BEL

Pc is the clipboard selector ("c" system, "p" primary). Pd is the base64
encoded data to copy, "?" to ask the terminal for the current contents, or
any other text to clear the clipboard.

Osc52 holds one such request. Every mutator returns a new instance, so a
base request can be shared and specialized freely, including across threads.
Rendering is pure: writing the result to the terminal is up to the caller.

Example:
    sys.stderr.write(Osc52.of("hello world").primary().tmux().render())
    sys.stderr.write(str(Osc52.of_query()))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from osc52.clipboard import Clipboard
from osc52.constants import BEL, CLEAR_BODY, OSC52_PREFIX, QUERY_BODY
from osc52.encoding import encode_payload, exceeds_limit, screen_join
from osc52.mode import Mode
from osc52.operation import Operation

logger = logging.getLogger(__name__)


def _join(strings: tuple[str, ...]) -> str:
    """Join payload pieces with a single space."""
    return " ".join(strings)


@dataclass(frozen=True)
class Osc52:
    """
    One OSC 52 request.

    Equality and hashing are structural over all five fields.

    Attributes:
        payload: Text to copy. Only used by the SET operation.
        limit: Maximum payload size in UTF-8 bytes. 0 disables the limit;
            negative values are clamped to 0.
        operation: Whether to set, query, or clear the clipboard.
        mode: Multiplexer escaping to wrap the sequence in.
        clipboard: Clipboard buffer to target.
    """

    payload: str = ""
    limit: int = 0
    operation: Operation = Operation.SET
    mode: Mode = Mode.DEFAULT
    clipboard: Clipboard = Clipboard.SYSTEM

    def __post_init__(self) -> None:
        if not isinstance(self.payload, str):
            raise TypeError(f"payload must be str, got {type(self.payload).__name__}")
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise TypeError(f"limit must be int, got {type(self.limit).__name__}")
        if not isinstance(self.operation, Operation):
            raise TypeError(f"operation must be Operation, got {self.operation!r}")
        if not isinstance(self.mode, Mode):
            raise TypeError(f"mode must be Mode, got {self.mode!r}")
        if not isinstance(self.clipboard, Clipboard):
            raise TypeError(f"clipboard must be Clipboard, got {self.clipboard!r}")
        object.__setattr__(self, "limit", max(0, self.limit))

    @classmethod
    def of(cls, *strings: str) -> Osc52:
        """
        Create a set request for the given strings joined by a space.

        Args:
            *strings: Payload pieces. No arguments gives an empty payload.

        Returns:
            A SET request on the system clipboard with no limit.
        """
        return cls(payload=_join(strings))

    @classmethod
    def of_query(cls) -> Osc52:
        """Create a request asking the terminal for the system clipboard."""
        return cls().query()

    @classmethod
    def of_clear(cls) -> Osc52:
        """Create a request clearing the system clipboard."""
        return cls().clear()

    def with_mode(self, mode: Mode) -> Osc52:
        """Return a copy using the given multiplexer mode."""
        return replace(self, mode=mode)

    def tmux(self) -> Osc52:
        """
        Return a copy escaped for tmux.

        Not needed when tmux runs with "set-clipboard on".
        """
        return self.with_mode(Mode.TMUX)

    def screen(self) -> Osc52:
        """Return a copy escaped for GNU screen using DCS sequences."""
        return self.with_mode(Mode.SCREEN)

    def with_clipboard(self, clipboard: Clipboard) -> Osc52:
        """Return a copy targeting the given clipboard buffer."""
        return replace(self, clipboard=clipboard)

    def primary(self) -> Osc52:
        """Return a copy targeting the primary selection."""
        return self.with_clipboard(Clipboard.PRIMARY)

    def with_string(self, *strings: str) -> Osc52:
        """Return a copy whose payload is the strings joined by a space."""
        return replace(self, payload=_join(strings))

    def with_limit(self, limit: int) -> Osc52:
        """
        Return a copy with a payload byte limit.

        Each terminal has its own maximum sequence length. Payloads longer
        than the limit are not emitted. 0 or a negative value disables it.
        """
        return replace(self, limit=limit)

    def with_operation(self, operation: Operation) -> Osc52:
        """Return a copy performing the given operation."""
        return replace(self, operation=operation)

    def query(self) -> Osc52:
        """Return a copy that queries the clipboard."""
        return self.with_operation(Operation.QUERY)

    def clear(self) -> Osc52:
        """Return a copy that clears the clipboard."""
        return self.with_operation(Operation.CLEAR)

    def _body(self) -> str | None:
        """Return the Pd field, or None when the payload is over the limit."""
        if self.operation is Operation.QUERY:
            return QUERY_BODY
        if self.operation is Operation.CLEAR:
            return CLEAR_BODY
        if exceeds_limit(self.payload, self.limit):
            logger.debug("Payload exceeds limit of %d bytes, not emitting", self.limit)
            return None
        encoded = encode_payload(self.payload)
        if self.mode is Mode.SCREEN:
            return screen_join(encoded)
        return encoded

    def render(self) -> str:
        """
        Render the request to its wire format.

        Returns:
            The complete escape sequence, or "" for a SET request whose
            payload exceeds the limit.
        """
        body = self._body()
        if body is None:
            return ""
        return (
            self.mode.start
            + OSC52_PREFIX
            + self.clipboard.selector
            + ";"
            + body
            + BEL
            + self.mode.end
        )

    def __str__(self) -> str:
        return self.render()
