"""Parsing of a single input line into a :class:`Command`.

Matching is by *prefix* of the trimmed line, so ``SETX a b`` is a SET and
``hello`` asks for help. Anything that matches no keyword parses to
``CommandKind.UNKNOWN``, which the processor treats as a silent no-op.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .errors import ArityError

__all__ = ["CommandKind", "Command", "parse_line", "HELP_LINES"]

_HELP_PREFIX = "h"
_USAGE_WIDTH = 17


class CommandKind(enum.Enum):
    """Command variants: (keyword, usage, description, arity)."""

    SET = ("SET", "SET <key> <value>", "store the value for key", 2)
    GET = ("GET", "GET <key>", "return the current value for key", 1)
    DELETE = ("DELETE", "DELETE <key>", "remove the entry for key", 1)
    COUNT = ("COUNT", "COUNT <value>", "return the number of keys that have the given value", 1)
    BEGIN = ("BEGIN", "BEGIN", "start a new transaction", 0)
    COMMIT = ("COMMIT", "COMMIT", "complete the current transaction", 0)
    ROLLBACK = ("ROLLBACK", "ROLLBACK", "revert to state prior to BEGIN call", 0)
    HELP = (_HELP_PREFIX, "h", "print this list of commands", 0)
    UNKNOWN = ("", "", "", 0)

    def __init__(self, keyword: str, usage: str, description: str, arity: int):
        self.keyword = keyword
        self.usage = usage
        self.description = description
        self.arity = arity


# Order matters only for keywords sharing a prefix; none of the current ones do.
_MATCH_ORDER = (
    CommandKind.SET,
    CommandKind.GET,
    CommandKind.DELETE,
    CommandKind.COUNT,
    CommandKind.BEGIN,
    CommandKind.ROLLBACK,
    CommandKind.COMMIT,
)

HELP_LINES: tuple[str, ...] = tuple(
    f"{kind.usage:<{_USAGE_WIDTH}} - {kind.description}"
    for kind in (
        CommandKind.SET,
        CommandKind.GET,
        CommandKind.DELETE,
        CommandKind.COUNT,
        CommandKind.BEGIN,
        CommandKind.COMMIT,
        CommandKind.ROLLBACK,
    )
)


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    args: list[str] = field(default_factory=list)


def _match(text: str) -> CommandKind:
    if text.startswith(_HELP_PREFIX):
        return CommandKind.HELP
    for kind in _MATCH_ORDER:
        if text.startswith(kind.keyword):
            return kind
    return CommandKind.UNKNOWN


def parse_line(line: str) -> Command:
    """Parse *line* and validate its arity.

    Raises
    ------
    ArityError
        If the command needs more arguments than were given. Extra arguments
        are ignored.
    """
    text = line.rstrip("\r\n").strip()
    kind = _match(text)
    if kind in (CommandKind.UNKNOWN, CommandKind.HELP):
        return Command(kind)
    args = text.split()[1:]
    if len(args) < kind.arity:
        raise ArityError(kind)
    return Command(kind, args[: kind.arity])
