from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable node type shared by both parsers and the state
engine, the result type returned by the parse facade, and the snapshot
type owned by the tree store.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Kind of an entry in the directory tree."""
    FILE = "file"
    FOLDER = "folder"


class InputFormat(str, Enum):
    """Grammar detected for a sanitized input text."""
    MARKDOWN = "markdown"
    ASCII = "ascii"
    UNKNOWN = "unknown"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeNode:
    """
    Represents a single entry (file or folder) in a parsed forest.

    Attributes:
        id: Opaque identifier assigned at creation, never reused.
        name: Display string without the trailing folder marker.
        kind: File or folder; fixed at creation.
        depth: Zero for top-level entries, parent depth + 1 otherwise.
        children: Ordered child nodes for folders, None for files.
        expanded: Folder expansion flag; meaningless for files.
    """
    id: str
    name: str
    kind: NodeKind
    depth: int = 0
    children: Optional[Tuple["TreeNode", ...]] = None
    expanded: bool = True

    @classmethod
    def file(cls, node_id: str, name: str, depth: int = 0) -> "TreeNode":
        return cls(id=node_id, name=name, kind=NodeKind.FILE, depth=depth)

    @classmethod
    def folder(
            cls,
            node_id: str,
            name: str,
            depth: int = 0,
            children: Tuple["TreeNode", ...] = (),
            expanded: bool = True,
    ) -> "TreeNode":
        return cls(
            id=node_id,
            name=name,
            kind=NodeKind.FOLDER,
            depth=depth,
            children=tuple(children),
            expanded=expanded,
        )

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def with_changes(self, **changes: Any) -> "TreeNode":
        """Return a copy of the node with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the node and its subtree into JSON-compatible primitives.

        Returns:
            Dict[str, Any]: Nested mapping; files carry no 'children' key.
        """
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.kind.value,
            "depth": self.depth,
        }
        if self.is_folder:
            data["isExpanded"] = self.expanded
            data["children"] = [child.to_dict() for child in self.children or ()]
        return data


Forest = Tuple[TreeNode, ...]

# -----------------------------------------------------------------------------
# PARSE RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Parsed:
    """Successful parse carrying the resulting forest."""
    forest: Forest

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """Failed parse carrying a human-readable reason."""
    reason: str

    @property
    def ok(self) -> bool:
        return False


ParseOutcome = Union[Parsed, Rejected]

# -----------------------------------------------------------------------------
# STATE SNAPSHOT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeState:
    """
    Immutable snapshot of the edited forest.

    Attributes:
        forest: Root-level nodes in source order.
        selected_id: Identifier of the selected node, if any.
    """
    forest: Forest = field(default_factory=tuple)
    selected_id: Optional[str] = None
