from __future__ import annotations

"""
Configuration Domain Management.

Provides the default CLI configuration and loads user overrides from a
JSON file. Only presentation preferences live here; parsed forests are
never persisted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dirviz.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"


def get_default_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Rendering
        "output_style": "ascii",
        "indent": "  ",
        "visible_only": False,

        # Output Format
        "json_output": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration overrides from disk merged over the defaults.

    Missing or unreadable files fall back to defaults; unknown keys are
    dropped.

    Args:
        path: JSON file to read. Defaults to '<user data dir>/config.json'.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        if path:
            logger.warning(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load config from '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{config_path}' does not hold an object. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config
