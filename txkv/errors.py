"""Error taxonomy of the store.

Every error is *recoverable*: the processor renders it as a single ``=>`` line
and keeps reading commands. None of them is raised after the stack has been
mutated, so a failed command never leaves a half-applied change behind.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .commands import CommandKind

__all__ = [
    "StoreError",
    "ArityError",
    "KeyNotSetError",
    "NoTransactionError",
]


class StoreError(Exception):
    """Base class for all errors reported back to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ArityError(StoreError):
    """Too few arguments for a command."""

    def __init__(self, kind: "CommandKind"):
        super().__init__(f"Too few arguments - {kind.usage}")
        self.kind = kind


class KeyNotSetError(StoreError):
    """DELETE target is absent (or holds the empty string)."""

    def __init__(self, key: str):
        super().__init__("key not set")
        self.key = key


class NoTransactionError(StoreError):
    """COMMIT/ROLLBACK issued with no open transaction."""

    def __init__(self):
        super().__init__("no transaction")
