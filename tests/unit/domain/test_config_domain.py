from __future__ import annotations

"""
Unit tests for Configuration Domain.

Verifies:
1. Default configuration keys.
2. Loading overrides from a JSON file.
3. Fallback to defaults for missing, corrupt or malformed files.
"""

import json
from pathlib import Path
from unittest.mock import patch

from dirviz.domain.config import get_default_config, load_config


def test_default_config_keys():
    conf = get_default_config()
    assert conf["output_style"] == "ascii"
    assert conf["indent"] == "  "
    assert conf["visible_only"] is False
    assert conf["json_output"] is False
    assert conf["log_level"] == "INFO"


def test_load_config_merges_known_keys(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"output_style": "markdown", "unknown": 1}), encoding="utf-8")

    conf = load_config(str(path))
    assert conf["output_style"] == "markdown"
    assert "unknown" not in conf
    assert conf["indent"] == "  "


def test_load_config_missing_file_uses_defaults(tmp_path: Path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_corrupt_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_non_object_uses_defaults(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_default_location(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"visible_only": True}), encoding="utf-8")
    with patch("dirviz.domain.config.get_default_config_path", return_value=str(path)):
        assert load_config()["visible_only"] is True
