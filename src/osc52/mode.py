#!/usr/bin/env python3
"""Multiplexer escaping modes for OSC 52 sequences.

GNU screen and tmux do not forward OSC 52 to the outer terminal on their
own. Wrapping the sequence in a DCS passthrough gets it there unchanged.
tmux does not need this when its "set-clipboard" option is on.
"""

from enum import Enum

from osc52.constants import DCS_END, DCS_START, TMUX_START


class Mode(Enum):
    """Escaping convention applied around the OSC 52 sequence."""

    DEFAULT = "default"
    SCREEN = "screen"
    TMUX = "tmux"

    @property
    def start(self) -> str:
        """Return the escape emitted before the OSC 52 sequence."""
        if self is Mode.TMUX:
            return TMUX_START
        if self is Mode.SCREEN:
            return DCS_START
        return ""

    @property
    def end(self) -> str:
        """Return the escape emitted after the OSC 52 sequence."""
        if self is Mode.DEFAULT:
            return ""
        return DCS_END
