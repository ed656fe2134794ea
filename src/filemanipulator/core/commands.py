"""Field command model.

A command is one of three **frozen** dataclass variants.  The set is
closed: :func:`apply_command` is the single dispatch point and must be
extended together with :data:`Command` whenever a variant is added.

Applying a command never mutates anything.  ``None`` means "this command
does not target this field"; any ``bytes`` result, even one equal to the
input, counts as a replacement.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass


def _check_field(field: int) -> None:
    if field < 0:
        raise ValueError(f"field index must be non-negative, got {field}")


def _check_single_byte(name: str, value: bytes) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be exactly one byte, got {value!r}")


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LowerCase:
    """Map ASCII ``A``-``Z`` to lowercase in field :attr:`field`."""

    field: int

    def __post_init__(self) -> None:
        _check_field(self.field)

    def __str__(self) -> str:
        return f"{self.field}:u"


@dataclass(frozen=True, slots=True)
class UpperCase:
    """Map ASCII ``a``-``z`` to uppercase in field :attr:`field`."""

    field: int

    def __post_init__(self) -> None:
        _check_field(self.field)

    def __str__(self) -> str:
        return f"{self.field}:U"


@dataclass(frozen=True, slots=True)
class Replace:
    """Replace every byte :attr:`old` with :attr:`new` in field :attr:`field`."""

    field: int
    old: bytes
    """Single byte to look for."""

    new: bytes
    """Single byte written in its place."""

    def __post_init__(self) -> None:
        _check_field(self.field)
        _check_single_byte("old", self.old)
        _check_single_byte("new", self.new)

    def __str__(self) -> str:
        return f"{self.field}:R{os.fsdecode(self.old + self.new)}"


Command = LowerCase | UpperCase | Replace


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def apply_command(command: Command, index: int, value: bytes) -> bytes | None:
    """Apply *command* to the field at *index* holding *value*.

    Returns the replacement field, or ``None`` when the command targets a
    different field.  Case mappings touch ASCII letters only; every other
    byte is copied through unchanged.
    """
    if index != command.field:
        return None

    match command:
        case LowerCase():
            return value.lower()
        case UpperCase():
            return value.upper()
        case Replace(old=old, new=new):
            return value.replace(old, new)

    raise TypeError(f"Unsupported command type: {type(command).__name__}")


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandPlan:
    """Immutable, ordered sequence of commands.

    Commands run in the order given; later commands see the output of
    earlier ones on the same field.  Duplicate field indices are allowed.
    """

    commands: tuple[Command, ...]

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return len(self.commands) > 0

    def __str__(self) -> str:
        return " ".join(str(command) for command in self.commands)
