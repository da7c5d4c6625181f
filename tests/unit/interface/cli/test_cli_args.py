from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Indentation width conversion.
3. Collection of repeated --collapse targets.
"""

import pytest

from dirviz.interface.cli.args import args_to_overrides, build_parser, collapse_targets


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping():
    args = parse_args(["--style", "markdown", "--visible-only", "--json", "--debug"])
    overrides = args_to_overrides(args)

    assert overrides["output_style"] == "markdown"
    assert overrides["visible_only"] is True
    assert overrides["json_output"] is True
    assert overrides["log_level"] == "DEBUG"


def test_cli_defaults_map_to_none():
    """Unset options stay None so the merge keeps configured values."""
    overrides = args_to_overrides(parse_args([]))
    assert overrides["output_style"] is None
    assert overrides["indent"] is None
    assert overrides["log_file"] is None
    assert "visible_only" not in overrides


def test_cli_indent_width():
    assert args_to_overrides(parse_args(["--indent", "4"]))["indent"] == "    "
    assert args_to_overrides(parse_args(["--indent", "0"]))["indent"] == ""


def test_cli_rejects_unknown_style():
    with pytest.raises(SystemExit):
        parse_args(["--style", "yaml"])


def test_cli_collapse_targets():
    args = parse_args(["--collapse", "node_modules/", "--collapse", " dist ", "--collapse", " "])
    assert collapse_targets(args) == ["node_modules", "dist"]


def test_cli_input_and_config_paths():
    args = parse_args(["-i", "tree.txt", "--config", "conf.json", "--log-file", "out.log"])
    assert args.input_path == "tree.txt"
    assert args.config_path == "conf.json"
    assert args_to_overrides(args)["log_file"] == "out.log"
