"""Core edit service — drives a command plan over an input file.

This service pulls lines from a :class:`~filemanipulator.core.protocols.LineSource`
injected at construction time and writes every changed line to a binary
sink supplied by the caller.

Guarantees
----------
* No filesystem access of its own — reading is delegated to the source.
* Only :class:`~filemanipulator.exceptions.FileManipulatorError`
  subclasses escape.
* Lines are processed one at a time; nothing is buffered across lines.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from filemanipulator.core.commands import CommandPlan
from filemanipulator.core.models import EditSummary
from filemanipulator.core.processor import LINE_TERMINATOR, transform_line
from filemanipulator.core.protocols import LineSource
from filemanipulator.exceptions import FileManipulatorError, InputReadError
from filemanipulator.utils.logging import get_logger

logger = get_logger(__name__)


class EditService:
    """Stateless service that applies a plan to every line of a file.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`LineSource` protocol.
    """

    def __init__(self, source: LineSource) -> None:
        self._source: LineSource = source

    def run(self, path: Path, plan: CommandPlan, sink: BinaryIO) -> EditSummary:
        """Process *path* with *plan*, writing changed lines to *sink*.

        Raises
        ------
        InputReadError
            If the source cannot open or read *path*.
        """
        lines_read = 0
        lines_emitted = 0

        for raw in self._read(path):
            lines_read += 1
            output = transform_line(raw.removesuffix(LINE_TERMINATOR), plan)
            if output is not None:
                sink.write(output)
                lines_emitted += 1

        summary = EditSummary(lines_read=lines_read, lines_emitted=lines_emitted)
        logger.debug(
            "edit finished",
            path=str(path),
            lines_read=summary.lines_read,
            lines_emitted=summary.lines_emitted,
            lines_suppressed=summary.lines_suppressed,
        )
        return summary

    # ------------------------------------------------------------------
    # Source delegation (safe boundary)
    # ------------------------------------------------------------------

    def _read(self, path: Path) -> Iterator[bytes]:
        """Iterate the source and ensure only our exceptions escape."""
        try:
            yield from self._source.iter_lines(path)
        except FileManipulatorError:
            # Already one of ours — let it propagate unchanged.
            raise
        except OSError as exc:
            raise InputReadError(f"Failed while reading {path}: {exc}") from exc
