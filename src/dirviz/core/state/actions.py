from __future__ import annotations

"""
Tree State Actions.

Tagged union of the edits the tree store accepts. Each action is an
immutable value; the engine dispatches on its type.
"""

from dataclasses import dataclass
from typing import Optional, Union

from dirviz.domain.tree_models import Forest


@dataclass(frozen=True)
class ReplaceForest:
    """Install a freshly parsed forest, dropping any selection."""
    forest: Forest


@dataclass(frozen=True)
class ToggleExpand:
    """Flip the expanded flag of a folder."""
    node_id: str


@dataclass(frozen=True)
class Rename:
    """Set the display name of a node of either kind."""
    node_id: str
    name: str


@dataclass(frozen=True)
class Delete:
    """Remove a node and its whole subtree."""
    node_id: str


@dataclass(frozen=True)
class Select:
    """Set (or clear, with None) the selected node."""
    node_id: Optional[str]


Action = Union[ReplaceForest, ToggleExpand, Rename, Delete, Select]
