from __future__ import annotations

"""
Unit tests for the TreeStore wrapper.

Verifies:
1. The edit API delegates to the engine in dispatch order.
2. Subscribers receive each new snapshot and can unsubscribe.
3. Lookups read the current snapshot.
"""

from unittest.mock import MagicMock

from dirviz.core.parsing.facade import parse_directory_structure
from dirviz.core.state.engine import TreeStore
from dirviz.domain.tree_models import TreeState


def _store(id_factory) -> TreeStore:
    outcome = parse_directory_structure("root/\n├── a/\n│   └── b.txt\n└── c.txt", id_factory)
    store = TreeStore()
    store.set_tree(outcome.forest)
    return store


def test_initial_state_is_empty():
    assert TreeStore().state == TreeState()


def test_edit_api_sequence(id_factory):
    store = _store(id_factory)

    store.select_node("node-3")
    store.toggle_expand("node-2")
    store.rename_node("node-3", "renamed.txt")

    assert store.get_node_by_id("node-2").expanded is False
    assert store.get_node_by_id("node-3").name == "renamed.txt"
    assert store.state.selected_id == "node-3"

    store.delete_node("node-2")
    assert store.get_node_by_id("node-3") is None
    assert store.state.selected_id == "node-3"


def test_delete_selected_node_clears_selection(id_factory):
    store = _store(id_factory)
    store.select_node("node-2")
    store.delete_node("node-2")

    assert store.get_node_by_id("node-2") is None
    assert store.state.selected_id is None


def test_set_tree_replaces_previous_forest(id_factory):
    store = _store(id_factory)
    store.select_node("node-1")
    other = parse_directory_structure("- x", id_factory)
    store.set_tree(other.forest)

    assert [n.name for n in store.state.forest] == ["x"]
    assert store.state.selected_id is None


def test_subscribers_receive_new_snapshots(id_factory):
    store = _store(id_factory)
    listener = MagicMock()
    unsubscribe = store.subscribe(listener)

    snapshot = store.toggle_expand("node-2")
    listener.assert_called_once_with(snapshot)

    # No-op transitions do not notify
    store.toggle_expand("node-4")
    assert listener.call_count == 1

    unsubscribe()
    store.toggle_expand("node-2")
    assert listener.call_count == 1


def test_old_snapshots_are_not_mutated(id_factory):
    store = _store(id_factory)
    before = store.state
    store.rename_node("node-4", "changed.txt")
    assert store.get_node_by_id("node-4").name == "changed.txt"
    assert before.forest[0].children[1].name == "c.txt"
