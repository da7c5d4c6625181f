from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies:
1. Markdown and ASCII rendering of single-root and multi-root forests.
2. Visibility filtering of collapsed folders.
3. Parsing rendered output reproduces the same shape.
"""

import pytest

from dirviz.core.analysis.tree_renderer import format_tree, format_visible_tree, visible_forest
from dirviz.core.parsing.facade import parse_directory_structure
from dirviz.core.state.actions import ToggleExpand
from dirviz.core.state.engine import apply
from dirviz.domain.tree_models import TreeNode, TreeState


@pytest.fixture
def project() -> tuple:
    index = TreeNode.file("3", "index.ts", 2)
    src = TreeNode.folder("2", "src", 1, (index,))
    pkg = TreeNode.file("4", "package.json", 1)
    return (TreeNode.folder("1", "project", 0, (src, pkg)),)


def test_markdown_rendering(project):
    assert format_tree(project, style="markdown") == (
        "- project/\n"
        "  - src/\n"
        "    - index.ts\n"
        "  - package.json"
    )


def test_markdown_custom_indent(project):
    text = format_tree(project, style="markdown", indent="    ")
    assert text.splitlines()[2] == "        - index.ts"


def test_ascii_single_root(project):
    assert format_tree(project, style="ascii") == (
        "project/\n"
        "├── src/\n"
        "│   └── index.ts\n"
        "└── package.json"
    )


def test_ascii_multiple_roots():
    forest = (
        TreeNode.folder("1", "a", 0, (TreeNode.file("2", "x", 1),)),
        TreeNode.file("3", "b", 0),
    )
    assert format_tree(forest, style="ascii") == "├── a/\n│   └── x\n└── b"


def test_empty_forest_renders_empty_string():
    assert format_tree((), style="ascii") == ""


def test_unknown_style_raises(project):
    with pytest.raises(ValueError):
        format_tree(project, style="yaml")


def test_visible_tree_hides_collapsed_children(project):
    state = apply(TreeState(forest=project), ToggleExpand("2"))
    assert format_visible_tree(state.forest, style="markdown") == (
        "- project/\n"
        "  - src/\n"
        "  - package.json"
    )
    # Hidden children are only hidden in the rendering copy
    assert visible_forest(state.forest)[0].children[0].children == ()
    assert len(state.forest[0].children[0].children) == 1


@pytest.mark.parametrize("style", ["markdown", "ascii"])
def test_rendered_output_parses_back_to_same_shape(style, ascii_sample, id_factory):
    original = parse_directory_structure(ascii_sample, id_factory).forest
    reparsed = parse_directory_structure(format_tree(original, style=style), id_factory).forest

    def shape(nodes):
        return [(n.name, n.kind, n.depth, shape(n.children or ())) for n in nodes]

    assert shape(reparsed) == shape(original)
