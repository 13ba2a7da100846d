"""txkv: an interactive in-memory key-value store with nested transactions.

The package exposes the transaction core via `txkv.TransactionStack` and the
line-oriented command layer via `txkv.CommandProcessor`. Process startup and
the read loop live in `txkv.cli`.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "TransactionStack",
    "CommandProcessor",
    "Command",
    "CommandKind",
    "parse_line",
    "StoreError",
    "ArityError",
    "KeyNotSetError",
    "NoTransactionError",
]

from .commands import Command, CommandKind, parse_line
from .errors import ArityError, KeyNotSetError, NoTransactionError, StoreError
from .processor import CommandProcessor
from .stack import TransactionStack
