#!/usr/bin/env python3
"""Constants for terminal write retry configuration.

These constants control the exponential backoff used when the terminal
is in non-blocking mode and temporarily refuses output.
"""

# Initial delay between write attempts in seconds.
INITIAL_WAIT: float = 0.05

# Maximum delay between write attempts in seconds.
MAX_WAIT: float = 1.0

# Growth factor for exponential backoff (delay = initial * multiplier^attempt).
WAIT_MULTIPLIER: float = 2.0

# Give up after this many attempts and re-raise the last error.
MAX_ATTEMPTS: int = 5

# Controlling terminal of the current process.
TTY_PATH: str = "/dev/tty"
