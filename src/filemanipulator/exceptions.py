"""Custom exception hierarchy for filemanipulator.

Every user-visible error condition maps to a subclass of
:class:`FileManipulatorError`.  Raw ``OSError`` instances raised while
reading input must never escape the infrastructure layer — they are
caught there and re-raised as :class:`InputReadError`.

Hierarchy
---------
FileManipulatorError
├── CommandParseError
├── UsageError
└── InputReadError
"""

from __future__ import annotations


class FileManipulatorError(Exception):
    """Base exception for all filemanipulator errors.

    The CLI error boundary renders these as a one-line message without
    leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command arguments -----------------------------------------------------

class CommandParseError(FileManipulatorError):
    """Raised when a command argument does not match ``N:u``, ``N:U`` or ``N:RAB``."""

    def __init__(self, argument: str, *, hint: str | None = None) -> None:
        super().__init__(f"unable to parse argument [{argument}]", hint=hint)
        self.argument: str = argument
        """The offending argument, exactly as received."""


class UsageError(FileManipulatorError):
    """Raised when the invocation lacks a file path or any command."""


# --- Input -----------------------------------------------------------------

class InputReadError(FileManipulatorError):
    """Raised when the input file cannot be opened or read."""
