"""Command-argument parsing.

Turns ``N:SPEC`` strings into :mod:`~filemanipulator.core.commands`
descriptors.  Arguments are examined as the raw bytes the operating system
delivered, so ``R`` must be followed by exactly two *bytes*.

Accepted forms
--------------
* ``N:u``   — :class:`LowerCase`
* ``N:U``   — :class:`UpperCase`
* ``N:RAB`` — :class:`Replace` of byte ``A`` with byte ``B``

``N`` is one or more ASCII digits.  The argument is split on its first
colon only, so ``0:R:;`` replaces ``:`` with ``;``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

from filemanipulator.core.commands import (
    Command,
    CommandPlan,
    LowerCase,
    Replace,
    UpperCase,
)
from filemanipulator.exceptions import CommandParseError
from filemanipulator.utils.logging import get_logger

logger = get_logger(__name__)

_SEPARATOR = b":"
_REPLACE_TAG = b"R"


def _parse_field(raw: bytes) -> int | None:
    """Return the field index encoded in *raw*, or ``None`` if malformed."""
    # bytes.isdigit() is ASCII-only, which rules out signs and whitespace.
    if not raw or not raw.isdigit():
        return None
    return int(raw)


def parse_command(argument: str) -> Command:
    """Parse a single ``N:SPEC`` argument.

    Raises
    ------
    CommandParseError
        If the argument has no colon, a non-numeric field part, or an
        operation that matches none of the accepted forms.
    """
    raw = os.fsencode(argument)
    field_part, separator, operation = raw.partition(_SEPARATOR)

    field = _parse_field(field_part)
    if not separator or field is None:
        raise CommandParseError(argument)

    if operation == b"u":
        return LowerCase(field)
    if operation == b"U":
        return UpperCase(field)
    if len(operation) == 3 and operation.startswith(_REPLACE_TAG):
        return Replace(field, operation[1:2], operation[2:3])

    raise CommandParseError(argument)


def parse_commands(arguments: Iterable[str]) -> CommandPlan:
    """Parse every argument into a :class:`CommandPlan`, preserving order.

    The first malformed argument aborts parsing; no partial plan is
    ever returned.
    """
    plan = CommandPlan(commands=tuple(parse_command(arg) for arg in arguments))
    logger.debug("command plan parsed", commands=str(plan), count=len(plan))
    return plan
