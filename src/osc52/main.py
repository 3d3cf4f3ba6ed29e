"""CLI handling for osc52.

This module provides the command-line interface for osc52: it builds an
OSC 52 request from the options, renders it, and writes it to stdout or the
controlling terminal. The multiplexer mode is never guessed; pass --tmux or
--screen when running inside one.

Usage:
    osc52 [--primary] [--tmux | --screen] [--limit N] [--tty] [TEXT]...
    osc52 --query [--primary] [--tmux | --screen] [--tty]
    osc52 --clear [--primary] [--tmux | --screen] [--tty]
"""

import sys

import click

from osc52.main_logging import configure_logging
from osc52.main_options import ExclusiveFlag
from osc52.sequence import Osc52


@click.command()
@click.argument("text", nargs=-1)
@click.option(
    "--query",
    is_flag=True,
    cls=ExclusiveFlag,
    exclusive_with=["clear"],
    help="Ask the terminal for the clipboard contents",
)
@click.option(
    "--clear",
    is_flag=True,
    cls=ExclusiveFlag,
    exclusive_with=["query"],
    help="Clear the clipboard",
)
@click.option(
    "--tmux",
    is_flag=True,
    cls=ExclusiveFlag,
    exclusive_with=["screen"],
    help="Wrap the sequence for tmux passthrough",
)
@click.option(
    "--screen",
    is_flag=True,
    cls=ExclusiveFlag,
    exclusive_with=["tmux"],
    help="Wrap the sequence for GNU screen passthrough",
)
@click.option(
    "--primary",
    is_flag=True,
    help="Target the primary selection instead of the system clipboard",
)
@click.option(
    "--limit",
    type=int,
    default=0,
    envvar="OSC52_LIMIT",
    show_default=True,
    help="Refuse payloads larger than this many bytes (0 for no limit)",
)
@click.option(
    "--tty",
    is_flag=True,
    help="Write to /dev/tty instead of stdout",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(
    text: tuple[str, ...],
    query: bool,
    clear: bool,
    tmux: bool,
    screen: bool,
    primary: bool,
    limit: int,
    tty: bool,
    verbose: bool,
) -> None:
    """Copy TEXT (or stdin) to the terminal clipboard with OSC 52."""
    if text and (query or clear):
        raise click.UsageError("TEXT cannot be combined with --query or --clear")

    configure_logging(verbose)

    request = _build_request(text, query, clear, tmux, screen, primary, limit)
    sequence = request.render()
    if not sequence:
        click.echo(f"Error: payload exceeds limit of {request.limit} bytes", err=True)
        sys.exit(1)

    _write(sequence, tty)


def _build_request(
    text: tuple[str, ...],
    query: bool,
    clear: bool,
    tmux: bool,
    screen: bool,
    primary: bool,
    limit: int,
) -> Osc52:
    """Build the request described by the command-line options.

    With no TEXT and no --query or --clear, the payload is read from stdin
    (see _read_stdin).

    Returns:
        The request to render.
    """
    if query:
        request = Osc52.of_query()
    elif clear:
        request = Osc52.of_clear()
    elif text:
        request = Osc52.of(*text)
    else:
        request = Osc52.of(_read_stdin())

    if tmux:
        request = request.tmux()
    elif screen:
        request = request.screen()
    if primary:
        request = request.primary()
    return request.with_limit(limit)


def _read_stdin() -> str:
    """Read the payload from stdin as UTF-8.

    Bytes that are not valid UTF-8 become U+FFFD rather than failing.
    """
    return sys.stdin.buffer.read().decode("utf-8", errors="replace")


def _write(sequence: str, tty: bool) -> None:
    """Write the sequence to stdout or the controlling terminal.

    Args:
        sequence: Rendered, non-empty OSC 52 sequence.
        tty: True to write to /dev/tty.
    """
    from osc52.terminal_io import TerminalError, open_tty, write_sequence

    try:
        if tty:
            with open_tty() as stream:
                write_sequence(sequence, stream)
        else:
            write_sequence(sequence, sys.stdout)
    except (TerminalError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
