"""Unit tests for the TransactionStack."""
import pytest

from txkv import NoTransactionError, TransactionStack


@pytest.fixture
def stack():
    """Create an empty stack."""
    return TransactionStack()


def test_starts_with_base_level(stack):
    """A fresh stack has only the empty base level."""
    assert stack.depth == 0
    assert len(stack) == 1
    assert stack.current() == {}


def test_begin_copies_parent(stack):
    """BEGIN snapshots the top level; writes do not leak either way."""
    stack.current()["k"] = "v1"
    stack.begin()
    assert stack.depth == 1
    assert stack.current() == {"k": "v1"}

    stack.current()["k"] = "v2"
    stack.current()["new"] = "x"
    assert stack._levels[0] == {"k": "v1"}


def test_rollback_discards(stack):
    """ROLLBACK drops every write made in the transaction."""
    stack.current()["k"] = "v1"
    stack.begin()
    stack.current()["k"] = "v2"
    stack.rollback()
    assert stack.depth == 0
    assert stack.current() == {"k": "v1"}


def test_commit_replaces_parent(stack):
    """COMMIT overwrites the parent so deletes propagate."""
    stack.current().update({"a": "1", "b": "2"})
    stack.begin()
    del stack.current()["a"]
    stack.current()["c"] = "3"
    stack.commit()
    assert stack.depth == 0
    assert stack.current() == {"b": "2", "c": "3"}


def test_nested(stack):
    """Inner rollback reverts to the outer snapshot, outer commit keeps it."""
    stack.begin()
    stack.current()["k"] = "v1"
    stack.begin()
    stack.current()["k"] = "v3"
    stack.rollback()
    assert stack.current() == {"k": "v1"}
    stack.commit()
    assert stack.depth == 0
    assert stack.current() == {"k": "v1"}


def test_commit_merges_one_level_only(stack):
    """COMMIT resolves just the innermost transaction."""
    stack.begin()
    stack.begin()
    stack.current()["k"] = "v"
    stack.commit()
    assert stack.depth == 1
    assert stack._levels[0] == {}
    assert stack.current() == {"k": "v"}


def test_no_transaction(stack):
    """COMMIT/ROLLBACK at depth 0 fail and keep the base level."""
    stack.current()["k"] = "v"
    with pytest.raises(NoTransactionError, match="no transaction"):
        stack.commit()
    with pytest.raises(NoTransactionError, match="no transaction"):
        stack.rollback()
    assert len(stack) == 1
    assert stack.current() == {"k": "v"}


def test_deep_nesting(stack):
    """Nesting is unbounded."""
    for i in range(200):
        stack.begin()
        stack.current()[f"k{i}"] = str(i)
    assert stack.depth == 200
    for _ in range(200):
        stack.commit()
    assert len(stack.current()) == 200
