"""Dispatch of parsed commands onto the current level of a TransactionStack."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .commands import HELP_LINES, Command, CommandKind, parse_line
from .errors import KeyNotSetError, StoreError
from .stack import TransactionStack

__all__ = ["CommandProcessor", "RESULT_PREFIX"]

logger = logging.getLogger(__name__)

RESULT_PREFIX = "=> "


class CommandProcessor:
    """Executes command lines against a :class:`TransactionStack`.

    Parameters
    ----------
    stack: TransactionStack | None
        Stack to operate on; a fresh empty one is created when omitted.
    strict_delete: bool
        When set, DELETE checks key presence instead of treating an empty
        value as "not set".
    """

    def __init__(self, stack: Optional[TransactionStack] = None, *, strict_delete: bool = False):
        self.stack = stack if stack is not None else TransactionStack()
        self.strict_delete = strict_delete
        self._handlers: dict[CommandKind, Callable[[list[str]], Optional[str]]] = {
            CommandKind.SET: self._set,
            CommandKind.GET: self._get,
            CommandKind.DELETE: self._delete,
            CommandKind.COUNT: self._count,
            CommandKind.BEGIN: self._begin,
            CommandKind.COMMIT: self._commit,
            CommandKind.ROLLBACK: self._rollback,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def execute(self, line: str) -> list[str]:
        """Handle one input line and return the output lines it produces."""
        try:
            command = parse_line(line)
            if command.kind is CommandKind.HELP:
                return list(HELP_LINES)
            result = self.dispatch(command)
        except StoreError as exc:
            logger.debug("command %r failed: %s", line, exc.message)
            return [RESULT_PREFIX + exc.message]
        return [] if result is None else [RESULT_PREFIX + result]

    def dispatch(self, command: Command) -> Optional[str]:
        """Run a parsed command; returns result text or None if silent."""
        handler = self._handlers.get(command.kind)
        if handler is None:
            return None
        return handler(command.args)

    # ------------------------------------------------------------------
    # Operations on the current level
    # ------------------------------------------------------------------
    def _set(self, args: list[str]) -> None:
        key, value = args
        self.stack.current()[key] = value

    def _get(self, args: list[str]) -> str:
        return self.stack.current().get(args[0], "")

    def _delete(self, args: list[str]) -> None:
        key = args[0]
        level = self.stack.current()
        if self.strict_delete:
            missing = key not in level
        else:
            # Empty value counts as unset.
            missing = level.get(key, "") == ""
        if missing:
            raise KeyNotSetError(key)
        del level[key]

    def _count(self, args: list[str]) -> str:
        value = args[0]
        return str(sum(1 for v in self.stack.current().values() if v == value))

    def _begin(self, args: list[str]) -> None:
        self.stack.begin()

    def _commit(self, args: list[str]) -> None:
        self.stack.commit()

    def _rollback(self, args: list[str]) -> None:
        self.stack.rollback()
