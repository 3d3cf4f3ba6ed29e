#!/usr/bin/env python3
"""Control characters and fixed fragments of the OSC 52 wire format.

An OSC 52 request has the form:

    ESC ] 52 ; Pc ; Pd BEL

where Pc selects the clipboard buffer and Pd is the base64 payload, "?" to
query, or any non-base64 text to clear. Multiplexers that do not forward OSC
sequences need the request wrapped in a DCS passthrough.

See https://invisible-island.net/xterm/ctlseqs/ctlseqs.html under
"Operating System Commands", Ps = 52 (Manipulate Selection Data).
"""

# Escape (0x1B), introduces every control sequence.
ESC: str = "\x1b"

# Bell (0x07), terminates the OSC.
BEL: str = "\x07"

# Start of every OSC 52 request, before the clipboard selector.
OSC52_PREFIX: str = ESC + "]52;"

# DCS introducer and string terminator used for multiplexer passthrough.
DCS_START: str = ESC + "P"
DCS_END: str = ESC + "\\"

# tmux passthrough opener. The trailing ESC doubles the OSC's own ESC so
# the sequence survives the outer tmux session.
TMUX_START: str = DCS_START + "tmux;" + ESC

# screen drops DCS bodies that are too long, so the base64 text is split
# into segments of this many characters, each in its own DCS.
SCREEN_CHUNK_SIZE: int = 76

# Separator between screen segments: close the current DCS, open the next.
SCREEN_CHUNK_SEPARATOR: str = DCS_END + DCS_START

# Body asking the terminal to report the clipboard contents.
QUERY_BODY: str = "?"

# Any body that is neither base64 nor "?" clears the clipboard.
CLEAR_BODY: str = "!"
