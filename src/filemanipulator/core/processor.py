"""Per-line transformation engine.

Every function in this module is a **pure** transformation — no I/O,
no shared state, fully deterministic.

Pipeline for one line:

1. **Split** — on ``\\t``, discarding empty fields.  A run of tabs acts as
   a single separator, so ``a\\t\\tb`` has two fields, not three.
2. **Apply** — for each field, every command in plan order.
3. **Join** — with a single ``\\t``; emitted only if something matched.
"""

from __future__ import annotations

from filemanipulator.core.commands import CommandPlan, apply_command
from filemanipulator.core.models import LineResult

FIELD_DELIMITER: bytes = b"\t"
LINE_TERMINATOR: bytes = b"\n"


def split_fields(line: bytes) -> list[bytes]:
    """Split *line* on tabs, dropping the empty pieces between delimiters."""
    return [field for field in line.split(FIELD_DELIMITER) if field]


def process_line(line: bytes, plan: CommandPlan) -> LineResult:
    """Apply *plan* to every field of *line* (newline already stripped).

    ``changed`` is set as soon as any command returns a replacement for
    any field, whether or not the replacement differs from the original.
    Commands whose field index is past the end of the line never match.
    """
    fields = split_fields(line)
    changed = False

    for index, value in enumerate(fields):
        for command in plan:
            replacement = apply_command(command, index, value)
            if replacement is not None:
                value = replacement
                changed = True
        fields[index] = value

    return LineResult(fields=tuple(fields), changed=changed)


def transform_line(line: bytes, plan: CommandPlan) -> bytes | None:
    """Return the rendered output for *line*, or ``None`` if it is suppressed."""
    result = process_line(line, plan)
    if not result.changed:
        return None
    return result.render()
