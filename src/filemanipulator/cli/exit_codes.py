"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""All input lines were processed."""

GENERAL_ERROR: int = 1
"""Bad command argument, missing file path or commands, or unreadable input."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

BROKEN_PIPE: int = 141
"""Downstream reader closed stdout early.  128 + SIGPIPE=13."""
