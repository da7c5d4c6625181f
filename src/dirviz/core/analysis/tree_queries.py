from __future__ import annotations

"""
Forest Queries.

Read-only traversal helpers over immutable forests: id lookup, pre-order
iteration and structural invariant checks.
"""

from typing import Iterable, Iterator, List, Optional

from dirviz.domain.tree_models import TreeNode


def iter_nodes(forest: Iterable[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of the forest in pre-order (source order)."""
    for node in forest:
        yield node
        if node.children:
            yield from iter_nodes(node.children)


def find_node(forest: Iterable[TreeNode], node_id: str) -> Optional[TreeNode]:
    """Return the first node whose id equals `node_id`, depth-first."""
    for node in iter_nodes(forest):
        if node.id == node_id:
            return node
    return None


def collect_ids(forest: Iterable[TreeNode]) -> List[str]:
    return [node.id for node in iter_nodes(forest)]


def count_nodes(forest: Iterable[TreeNode]) -> int:
    return sum(1 for _ in iter_nodes(forest))


def validate_forest(forest: Iterable[TreeNode]) -> List[str]:
    """
    Check the structural invariants of a forest.

    Verifies pairwise-distinct ids, that files carry no children, that
    folders carry a children tuple, and that depths start at 0 and grow by
    exactly one per level.

    Args:
        forest: Root-level nodes.

    Returns:
        List[str]: Human-readable violations; empty when the forest is valid.
    """
    problems: List[str] = []
    seen = set()

    def _visit(node: TreeNode, expected_depth: int) -> None:
        if node.id in seen:
            problems.append(f"duplicate id '{node.id}'")
        seen.add(node.id)

        if node.depth != expected_depth:
            problems.append(
                f"node '{node.name}' has depth {node.depth}, expected {expected_depth}"
            )

        if not node.is_folder:
            if node.children is not None:
                problems.append(f"file '{node.name}' carries children")
            return

        if node.children is None:
            problems.append(f"folder '{node.name}' has no children sequence")
            return
        for child in node.children:
            _visit(child, expected_depth + 1)

    for root in forest:
        _visit(root, 0)
    return problems
