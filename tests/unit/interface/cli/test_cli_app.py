from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Verifies:
1. Exit codes for success, rejection and missing input.
2. Rendering options (style, JSON, collapse, visible-only).
3. Configuration dump and merge precedence.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from dirviz.interface.cli.app import _merge_config, build_state, main
from dirviz.domain.tree_models import Rejected, TreeState


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from attaching queue handlers to the test process."""
    with patch("dirviz.interface.cli.app.configure_logging"):
        yield


@pytest.fixture
def tree_file(tmp_path: Path, markdown_sample: str) -> Path:
    path = tmp_path / "tree.md"
    path.write_text(markdown_sample, encoding="utf-8")
    return path


def test_ascii_output(tree_file, capsys):
    assert main(["-i", str(tree_file), "--use-defaults", "--style", "ascii"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[:3] == ["project/", "├── src/", "│   ├── index.ts"]


def test_json_output(tree_file, capsys):
    assert main(["-i", str(tree_file), "--use-defaults", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "project"
    assert data[0]["children"][0]["children"][0]["depth"] == 2


def test_collapse_and_visible_only(tree_file, capsys):
    code = main([
        "-i", str(tree_file), "--use-defaults",
        "--style", "markdown", "--collapse", "src", "--visible-only",
    ])
    assert code == 0
    assert "index.ts" not in capsys.readouterr().out


def test_collapse_hides_contents_without_visible_only(tmp_path, capsys):
    path = tmp_path / "nested.md"
    path.write_text("- a/\n  - b/\n    - c.txt\n", encoding="utf-8")

    assert main(["-i", str(path), "--use-defaults", "--collapse", "b"]) == 0
    out = capsys.readouterr().out
    assert "b/" in out
    assert "c.txt" not in out


def test_json_output_uses_is_expanded_key(tree_file, capsys):
    assert main(["-i", str(tree_file), "--use-defaults", "--json", "--collapse", "src"]) == 0
    root = json.loads(capsys.readouterr().out)[0]
    assert root["isExpanded"] is True
    assert root["children"][0]["isExpanded"] is False
    assert "expanded" not in root


def test_detect_only(tree_file, capsys):
    assert main(["-i", str(tree_file), "--use-defaults", "--detect"]) == 0
    assert capsys.readouterr().out.strip() == "markdown"


def test_rejection_exit_code(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    assert main(["-i", str(path), "--use-defaults"]) == 1
    assert "Input contains only comments" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "absent.txt"), "--use-defaults"]) == 2
    assert "ERROR:" in capsys.readouterr().err


def test_dump_config(capsys):
    assert main(["--use-defaults", "--dump-config", "--style", "markdown"]) == 0
    conf = json.loads(capsys.readouterr().out)
    assert conf["output_style"] == "markdown"


def test_reads_stdin(monkeypatch, capsys):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("- a/\n  - b.txt\n"))
    assert main(["--use-defaults", "--style", "markdown"]) == 0
    assert capsys.readouterr().out.strip() == "- a/\n  - b.txt"


def test_unexpected_failure_exit_code(tree_file, capsys):
    with patch("dirviz.interface.cli.app.build_state", side_effect=RuntimeError("kaboom")):
        assert main(["-i", str(tree_file), "--use-defaults"]) == 1
    assert "kaboom" in capsys.readouterr().err


def test_build_state_collapses_named_folders(markdown_sample):
    state = build_state(markdown_sample, ["src"])
    assert isinstance(state, TreeState)
    src = state.forest[0].children[0]
    assert src.name == "src" and src.expanded is False
    assert state.forest[0].expanded is True


def test_build_state_passes_rejection_through():
    assert isinstance(build_state("", []), Rejected)


def test_merge_config_ignores_none_and_unknown():
    merged = _merge_config({"a": 1, "b": 2}, {"a": None, "b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3}
