from __future__ import annotations

"""
Tree State Engine.

Pure state machine over immutable forests. `apply` derives the next
snapshot from the previous one and an action; untouched subtrees are
shared between snapshots and a miss returns the very same forest object.
`TreeStore` wraps the machine with the edit API consumed by collaborators
(renderers, keyboard handlers) and notifies subscribers synchronously.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Type

from dirviz.core.analysis.tree_queries import find_node
from dirviz.core.state.actions import (
    Action,
    Delete,
    Rename,
    ReplaceForest,
    Select,
    ToggleExpand,
)
from dirviz.domain.tree_models import Forest, TreeNode, TreeState

logger = logging.getLogger(__name__)

NodeTransform = Callable[[TreeNode], TreeNode]
Subscriber = Callable[[TreeState], None]

# -----------------------------------------------------------------------------
# RECURSIVE FOREST TRANSFORMS
# -----------------------------------------------------------------------------

def map_node(forest: Forest, node_id: str, transform: NodeTransform) -> Forest:
    """
    Rebuild the forest with `transform` applied to the node matching `node_id`.

    Siblings and unrelated subtrees are reused as-is. When nothing matches,
    the input forest object itself is returned.
    """
    changed = False
    rebuilt = []
    for node in forest:
        if node.id == node_id:
            updated = transform(node)
        elif node.children:
            children = map_node(node.children, node_id, transform)
            updated = node if children is node.children else node.with_changes(children=children)
        else:
            updated = node
        changed = changed or updated is not node
        rebuilt.append(updated)
    return tuple(rebuilt) if changed else forest


def prune_node(forest: Forest, node_id: str) -> Forest:
    """Remove the node matching `node_id` together with its subtree."""
    changed = False
    rebuilt = []
    for node in forest:
        if node.id == node_id:
            changed = True
            continue
        if node.children:
            children = prune_node(node.children, node_id)
            if children is not node.children:
                node = node.with_changes(children=children)
                changed = True
        rebuilt.append(node)
    return tuple(rebuilt) if changed else forest


def _toggle(node: TreeNode) -> TreeNode:
    if not node.is_folder:
        return node
    return node.with_changes(expanded=not node.expanded)

# -----------------------------------------------------------------------------
# ACTION HANDLERS
# -----------------------------------------------------------------------------

def _replace_forest(state: TreeState, action: ReplaceForest) -> TreeState:
    return TreeState(forest=tuple(action.forest), selected_id=None)


def _toggle_expand(state: TreeState, action: ToggleExpand) -> TreeState:
    forest = map_node(state.forest, action.node_id, _toggle)
    if forest is state.forest:
        logger.debug(f"Toggle ignored: no folder with id '{action.node_id}'.")
        return state
    return replace(state, forest=forest)


def _rename(state: TreeState, action: Rename) -> TreeState:
    forest = map_node(state.forest, action.node_id, lambda node: node.with_changes(name=action.name))
    if forest is state.forest:
        logger.debug(f"Rename ignored: no node with id '{action.node_id}'.")
        return state
    return replace(state, forest=forest)


def _delete(state: TreeState, action: Delete) -> TreeState:
    forest = prune_node(state.forest, action.node_id)
    selected = None if state.selected_id == action.node_id else state.selected_id
    if forest is state.forest:
        logger.debug(f"Delete ignored: no node with id '{action.node_id}'.")
        if selected == state.selected_id:
            return state
    return TreeState(forest=forest, selected_id=selected)


def _select(state: TreeState, action: Select) -> TreeState:
    return replace(state, selected_id=action.node_id)


_HANDLERS: Dict[Type, Callable[[TreeState, Action], TreeState]] = {
    ReplaceForest: _replace_forest,
    ToggleExpand: _toggle_expand,
    Rename: _rename,
    Delete: _delete,
    Select: _select,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def apply(state: TreeState, action: Action) -> TreeState:
    """
    Compute the snapshot that follows `state` once `action` is applied.

    Edits on unknown ids are no-ops, never errors.

    Args:
        state: Current snapshot.
        action: Edit to apply.

    Returns:
        TreeState: The next snapshot.

    Raises:
        TypeError: If `action` is not one of the supported action types.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unsupported tree action: {type(action).__name__}")
    return handler(state, action)


class TreeStore:
    """
    Holder of the current snapshot and the edit API built on `apply`.

    Actions are applied strictly in call order, each against the snapshot
    produced by the previous one. Subscribers receive every new snapshot.
    """

    def __init__(self, initial: Optional[TreeState] = None):
        self._state = initial or TreeState()
        self._subscribers: List[Subscriber] = []

    @property
    def state(self) -> TreeState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a snapshot listener.

        Returns:
            Callable[[], None]: Function that removes the listener again.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def dispatch(self, action: Action) -> TreeState:
        previous = self._state
        self._state = apply(previous, action)
        if self._state is not previous:
            for callback in list(self._subscribers):
                callback(self._state)
        return self._state

    # --- Edit API ---

    def set_tree(self, forest: Forest) -> TreeState:
        return self.dispatch(ReplaceForest(tuple(forest)))

    def toggle_expand(self, node_id: str) -> TreeState:
        return self.dispatch(ToggleExpand(node_id))

    def rename_node(self, node_id: str, name: str) -> TreeState:
        return self.dispatch(Rename(node_id, name))

    def delete_node(self, node_id: str) -> TreeState:
        return self.dispatch(Delete(node_id))

    def select_node(self, node_id: Optional[str]) -> TreeState:
        return self.dispatch(Select(node_id))

    def get_node_by_id(self, node_id: str) -> Optional[TreeNode]:
        return find_node(self._state.forest, node_id)
