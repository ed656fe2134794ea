"""Infrastructure layer — operating-system integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~filemanipulator.exceptions.FileManipulatorError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from filemanipulator.infra.file_source import FileLineSource

__all__: list[str] = ["FileLineSource"]
