from __future__ import annotations

from .actions import Action, Delete, Rename, ReplaceForest, Select, ToggleExpand
from .engine import TreeStore, apply

__all__ = [
    "Action",
    "Delete",
    "Rename",
    "ReplaceForest",
    "Select",
    "ToggleExpand",
    "TreeStore",
    "apply",
]
