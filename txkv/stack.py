"""Layered transaction state.

The stack holds one *level* per open transaction on top of the base level:

    ┌──────────────────────────┐
    │ level N  (current)       │  ← SET / GET / DELETE / COUNT
    ├──────────────────────────┤
    │ …                        │
    ├──────────────────────────┤
    │ level 0  (committed)     │
    └──────────────────────────┘

BEGIN pushes a full copy of the top level, so every transaction works on its
own snapshot. COMMIT does *not* merge key-wise: the child snapshot replaces
its parent wholesale. A key deleted inside the transaction is simply missing
from the child copy, and a key-wise union would let the parent's stale entry
survive; replacement is what makes deletes stick.
"""
from __future__ import annotations

import logging

from .errors import NoTransactionError

__all__ = ["TransactionStack", "Level"]

logger = logging.getLogger(__name__)

Level = dict[str, str]


class TransactionStack:
    """Stack of key-value snapshots; level 0 is always present."""

    def __init__(self) -> None:
        self._levels: list[Level] = [{}]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def depth(self) -> int:
        """Number of currently open transactions."""
        return len(self._levels) - 1

    def __len__(self) -> int:
        return len(self._levels)

    def current(self) -> Level:
        """Mutable reference to the topmost level."""
        return self._levels[-1]

    # ------------------------------------------------------------------
    # Transaction control 🔁
    # ------------------------------------------------------------------
    def begin(self) -> None:
        # Values are immutable str, a shallow dict copy is a value copy.
        self._levels.append(dict(self._levels[-1]))
        logger.debug("begin: depth=%d", self.depth)

    def commit(self) -> None:
        """Replace the parent level with the current one and pop it."""
        if self.depth == 0:
            raise NoTransactionError()
        top = self._levels.pop()
        self._levels[-1] = top
        logger.debug("commit: depth=%d keys=%d", self.depth, len(top))

    def rollback(self) -> None:
        """Discard the current level with all its writes and deletes."""
        if self.depth == 0:
            raise NoTransactionError()
        self._levels.pop()
        logger.debug("rollback: depth=%d", self.depth)
