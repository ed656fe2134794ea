"""Result models for filemanipulator.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Single line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LineResult:
    """Outcome of running a command plan over one input line."""

    fields: tuple[bytes, ...]
    """Fields after all commands were applied, in input order."""

    changed: bool
    """``True`` when at least one command matched at least one field."""

    def render(self) -> bytes:
        """Join the fields with a single tab and terminate with a newline."""
        return b"\t".join(self.fields) + b"\n"


# ---------------------------------------------------------------------------
# Whole run
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EditSummary:
    """Counters reported after a file has been processed."""

    lines_read: int
    lines_emitted: int

    @property
    def lines_suppressed(self) -> int:
        """Lines read that produced no output because no command matched."""
        return self.lines_read - self.lines_emitted
