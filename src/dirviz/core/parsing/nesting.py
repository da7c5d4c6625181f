from __future__ import annotations

"""
Stack-Based Nesting Resolution.

Shared machinery of both grammars. Lines are turned into mutable drafts
while the stack of open folders is live; once every line is consumed the
drafts are frozen into immutable TreeNode values and depths are
normalized against the final structure.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from dirviz.domain.constants import FOLDER_SUFFIX
from dirviz.domain.exceptions import ParseFault
from dirviz.domain.tree_models import Forest, NodeKind, TreeNode

# -----------------------------------------------------------------------------
# DRAFT NODES
# -----------------------------------------------------------------------------

@dataclass
class NodeDraft:
    """
    Mutable node under construction.

    Attributes:
        id: Identifier assigned when the line was read.
        name: Name with the folder marker already stripped.
        kind: File or folder.
        children: Drafts attached so far (folders only).
    """
    id: str
    name: str
    kind: NodeKind
    children: List["NodeDraft"] = field(default_factory=list)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    def freeze(self, depth: int) -> TreeNode:
        """Convert the draft subtree into immutable nodes rooted at `depth`."""
        if not self.is_folder:
            return TreeNode.file(self.id, self.name, depth)
        children = tuple(child.freeze(depth + 1) for child in self.children)
        return TreeNode.folder(self.id, self.name, depth, children)


def split_name(raw_name: str) -> Tuple[str, NodeKind]:
    """
    Split a trimmed entry name into its display name and kind.

    A trailing '/' marks a folder and is removed from the stored name.
    """
    if raw_name.endswith(FOLDER_SUFFIX):
        return raw_name[: -len(FOLDER_SUFFIX)], NodeKind.FOLDER
    return raw_name, NodeKind.FILE

# -----------------------------------------------------------------------------
# STACK OPERATIONS
# -----------------------------------------------------------------------------

class Frame(NamedTuple):
    """An open folder and the nesting key (indent width or level) it was read at."""
    node: NodeDraft
    key: int


Stack = Tuple[Frame, ...]


def resolve_parent(stack: Stack, key: int) -> Tuple[Optional[NodeDraft], Stack]:
    """
    Find the parent of an entry read at `key`.

    Pops every frame whose key is greater than or equal to `key`; the frame
    left on top (if any) is the parent.

    Args:
        stack: Currently open folders, innermost last.
        key: Nesting key of the incoming entry.

    Returns:
        Tuple[Optional[NodeDraft], Stack]: The parent draft (None for a
        root-level entry) and the trimmed stack.
    """
    depth = len(stack)
    while depth and stack[depth - 1].key >= key:
        depth -= 1
    trimmed = stack[:depth]
    return (trimmed[-1].node if trimmed else None), trimmed


def place(roots: List[NodeDraft], stack: Stack, draft: NodeDraft, key: int) -> Stack:
    """
    Attach a draft under its resolved parent and return the updated stack.

    Folders are pushed so later entries can nest under them.

    Raises:
        ParseFault: If the resolved parent is not a folder.
    """
    parent, stack = resolve_parent(stack, key)
    if parent is None:
        roots.append(draft)
    elif parent.is_folder:
        parent.children.append(draft)
    else:
        raise ParseFault(f"cannot nest '{draft.name}' under file '{parent.name}'")

    if draft.is_folder:
        stack = stack + (Frame(draft, key),)
    return stack

# -----------------------------------------------------------------------------
# NORMALIZATION
# -----------------------------------------------------------------------------

def freeze_forest(roots: List[NodeDraft]) -> Forest:
    """
    Freeze drafts into an immutable forest.

    Depths come from the final structure alone: every root sits at 0 and
    every child at its parent's depth + 1, whatever indentation or
    connector level the line was read at.
    """
    return tuple(root.freeze(0) for root in roots)
