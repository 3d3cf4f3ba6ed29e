"""OSC 52 operations."""

from enum import Enum


class Operation(Enum):
    """Which of the three OSC 52 behaviors a request encodes."""

    SET = "set"
    QUERY = "query"
    CLEAR = "clear"
