"""Core / service layer — command model, parsing and line processing.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O; input arrives through :class:`LineSource`.
* No imports from ``cli`` or ``infra``.
"""

from filemanipulator.core.commands import (
    Command,
    CommandPlan,
    LowerCase,
    Replace,
    UpperCase,
    apply_command,
)
from filemanipulator.core.edit_service import EditService
from filemanipulator.core.models import EditSummary, LineResult
from filemanipulator.core.parser import parse_command, parse_commands
from filemanipulator.core.processor import process_line, split_fields, transform_line
from filemanipulator.core.protocols import LineSource

__all__: list[str] = [
    "Command",
    "CommandPlan",
    "EditService",
    "EditSummary",
    "LineResult",
    "LineSource",
    "LowerCase",
    "Replace",
    "UpperCase",
    "apply_command",
    "parse_command",
    "parse_commands",
    "process_line",
    "split_fields",
    "transform_line",
]
