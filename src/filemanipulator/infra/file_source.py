"""Filesystem implementation of :class:`~filemanipulator.core.protocols.LineSource`.

Files are opened in binary mode: no decoding, no newline translation and
no byte-order-mark handling.  Lines are split on ``\\n`` only.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from filemanipulator.exceptions import InputReadError


class FileLineSource:
    """Concrete :class:`LineSource` that reads a local file.

    Usage::

        source = FileLineSource()
        for raw in source.iter_lines(Path("data.tsv")):
            ...

    The file handle lives inside the generator's ``with`` block, so it is
    closed on exhaustion, on error, and when the generator is closed.
    """

    def iter_lines(self, path: Path) -> Iterator[bytes]:
        """Yield each raw line of *path*, trailing ``\\n`` included.

        Raises
        ------
        InputReadError
            When *path* is missing, unreadable, a directory, or a read
            fails partway through.
        """
        try:
            handle = open(path, "rb")
        except FileNotFoundError as exc:
            raise InputReadError(
                f"Input file not found: {path}",
                hint="Check the path and try again.",
            ) from exc
        except PermissionError as exc:
            raise InputReadError(
                f"Permission denied: {path}",
                hint="Make sure the file is readable by the current user.",
            ) from exc
        except OSError as exc:
            raise InputReadError(f"Unable to open {path}: {exc}") from exc

        with handle:
            try:
                yield from handle
            except OSError as exc:
                raise InputReadError(f"Failed while reading {path}: {exc}") from exc
