from __future__ import annotations

"""
Tree Renderer.

Converts forests back into text, either as an indented Markdown list or as
a box-drawing ASCII tree. Output of either style parses back into the same
shape (names, kinds and order).
"""

from typing import Iterable, List, Sequence

from dirviz.domain.constants import (
    BLANK_CONTINUATION,
    BRANCH_CONNECTOR,
    BULLET_MARKER,
    CORNER_CONNECTOR,
    FOLDER_SUFFIX,
    VERTICAL_CONTINUATION,
)
from dirviz.domain.tree_models import Forest, TreeNode

STYLES = ("markdown", "ascii")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_tree(forest: Sequence[TreeNode], style: str = "markdown", indent: str = "  ") -> str:
    """
    Render a forest as text.

    Args:
        forest: Root-level nodes.
        style: 'markdown' or 'ascii'.
        indent: Per-level indentation for the Markdown style.

    Returns:
        str: Rendered lines joined by newlines; empty for an empty forest.

    Raises:
        ValueError: If `style` is not supported.
    """
    if style not in STYLES:
        raise ValueError(f"Unsupported output style '{style}'. Expected one of: {', '.join(STYLES)}.")
    if not forest:
        return ""

    lines: List[str] = []
    if style == "ascii":
        render_ascii(forest, lines)
    else:
        render_markdown(forest, lines, indent=indent)
    return "\n".join(lines)


def format_visible_tree(forest: Sequence[TreeNode], style: str = "markdown", indent: str = "  ") -> str:
    """Render only what is visible: collapsed folders appear without children."""
    return format_tree(visible_forest(forest), style=style, indent=indent)


def visible_forest(forest: Iterable[TreeNode]) -> Forest:
    """Return a copy of the forest with the children of collapsed folders hidden."""
    return tuple(_visible(node) for node in forest)


def _visible(node: TreeNode) -> TreeNode:
    if not node.is_folder:
        return node
    if not node.expanded:
        return node.with_changes(children=())
    return node.with_changes(children=tuple(_visible(child) for child in node.children or ()))

# -----------------------------------------------------------------------------
# RENDERERS
# -----------------------------------------------------------------------------

def render_markdown(
        nodes: Iterable[TreeNode],
        lines: List[str],
        indent: str = "  ",
        current_indent: str = "",
) -> None:
    """
    Recursively append '- name' lines, one indentation step per level.

    Args:
        nodes: Nodes at the current level.
        lines: Accumulator list for output strings.
        indent: Indentation added per nesting level.
        current_indent: Indentation prefix of the current level.
    """
    for node in nodes:
        lines.append(f"{current_indent}{BULLET_MARKER} {_label(node)}")
        if node.children:
            render_markdown(node.children, lines, indent=indent, current_indent=current_indent + indent)


def render_ascii(forest: Sequence[TreeNode], lines: List[str]) -> None:
    """
    Append the box-drawing rendition of a forest.

    A single root is printed bare ('name/') with its children hanging off
    connectors; several roots are each printed with a connector.
    """
    if len(forest) == 1:
        root = forest[0]
        lines.append(_label(root))
        render_ascii_branch(root.children or (), lines, prefix="")
        return
    render_ascii_branch(forest, lines, prefix="")


def render_ascii_branch(nodes: Sequence[TreeNode], lines: List[str], prefix: str = "") -> None:
    """
    Recursively transform sibling nodes into connector lines.

    Args:
        nodes: Siblings to render.
        lines: Accumulator list for output strings.
        prefix: Continuation blocks inherited from the ancestors.
    """
    total = len(nodes)
    for i, node in enumerate(nodes):
        is_last = i == total - 1
        connector = CORNER_CONNECTOR if is_last else BRANCH_CONNECTOR
        lines.append(f"{prefix}{connector} {_label(node)}")

        if node.children:
            child_prefix = prefix + (BLANK_CONTINUATION if is_last else VERTICAL_CONTINUATION)
            render_ascii_branch(node.children, lines, prefix=child_prefix)


def _label(node: TreeNode) -> str:
    return f"{node.name}{FOLDER_SUFFIX}" if node.is_folder else node.name

