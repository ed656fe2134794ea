"""CLI application entry point for filemanipulator.

This module is the **sole error boundary** for the entire application.
It catches :class:`~filemanipulator.exceptions.FileManipulatorError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering a
one-line message on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing and editing are delegated to
  the core layer, file access to the infra layer.
* stdout carries edited lines and the help block only; every diagnostic
  goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from filemanipulator.cli import exit_codes
from filemanipulator.cli.console import console
from filemanipulator.core.commands import CommandPlan
from filemanipulator.core.parser import parse_commands
from filemanipulator.exceptions import CommandParseError, FileManipulatorError, UsageError
from filemanipulator.utils.logging import configure_logging
from filemanipulator.version import __version__

HELP_TEXT = """\
  FileManipulator modifies line fields in the file
  <file_path>     - path to the file for manipulation
  [N:u]           - change every line's field N to lower case letters
  [N:U]           - change every line's field N to upper case letters
  [N:RAB]         - replace a character A to B in every line's field N

  Note: if N does not represent a valid field, the command is not applied
  Note: runs of consecutive tabs count as a single field separator
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Everything after the file path is collected verbatim as command
    arguments, so they are never mistaken for options.
    """
    parser = argparse.ArgumentParser(
        prog="filemanipulator",
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Write debug logging to stderr.",
    )
    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="Tab-separated text file to edit.",
    )
    parser.add_argument(
        "commands",
        nargs=argparse.REMAINDER,
        metavar="CMD",
        help="Field commands: N:u, N:U or N:RAB.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_plan(args: argparse.Namespace) -> CommandPlan:
    """Validate the invocation and parse its command arguments.

    Raises
    ------
    UsageError
        If the file path or every command is missing.
    CommandParseError
        If any command argument is malformed.
    """
    if args.file_path is None or not args.commands:
        raise UsageError("A file path and at least one command are required.")
    return parse_commands(args.commands)


def _handle_edit(path: Path, plan: CommandPlan) -> int:
    """Run *plan* over *path* and stream changed lines to stdout."""
    from filemanipulator.core.edit_service import EditService
    from filemanipulator.infra.file_source import FileLineSource

    service = EditService(FileLineSource())

    try:
        sys.stdout.flush()
        sink = sys.stdout.buffer
        service.run(path, plan, sink)
        sink.flush()
    except BrokenPipeError:
        _silence_stdout()
        return exit_codes.BROKEN_PIPE
    return exit_codes.SUCCESS


def _silence_stdout() -> None:
    """Point stdout at the null device so the exit-time flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the filemanipulator CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        plan = _build_plan(args)
    except UsageError:
        parser.print_help()
        return exit_codes.GENERAL_ERROR
    except CommandParseError as exc:
        console.print_plain(f"Warning: {exc}", style="yellow")
        parser.print_help()
        return exit_codes.GENERAL_ERROR

    return _handle_edit(Path(args.file_path), plan)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FileManipulatorError as exc:
        console.print_plain(f"Error: {exc}", style="bold red")
        if exc.hint:
            console.print_plain(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print_plain("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print_plain(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
