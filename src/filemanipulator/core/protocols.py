"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol


class LineSource(Protocol):
    """Contract for input backends.

    Any object that implements :meth:`iter_lines` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def iter_lines(self, path: Path) -> Iterator[bytes]:
        """Yield the raw lines of *path*, each with its trailing ``\\n``.

        The final line may lack a terminator.  Implementations must
        release any underlying handle when iteration ends, fails, or
        the iterator is closed early.

        Raises
        ------
        InputReadError
            When the input cannot be opened or a read fails midway.
        """
        ...  # pragma: no cover
