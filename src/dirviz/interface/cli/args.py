from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from dirviz.core.analysis.tree_renderer import STYLES
from dirviz.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirviz CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirviz",
        description=i18n.t("app.description"),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )

    # --- Rendering ---
    p.add_argument(
        "--style",
        dest="output_style",
        choices=STYLES,
        default=None,
        help=i18n.t("cli.args.style"),
    )
    p.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        help=i18n.t("cli.args.indent"),
    )
    p.add_argument(
        "--visible-only",
        action="store_true",
        help=i18n.t("cli.args.visible_only"),
    )
    p.add_argument(
        "--collapse",
        dest="collapse",
        action="append",
        default=[],
        metavar="NAME",
        help=i18n.t("cli.args.collapse"),
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )
    p.add_argument(
        "--detect",
        action="store_true",
        help=i18n.t("cli.args.detect"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Keys whose flag was not given map to None and are ignored by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "output_style": args.output_style,
        "indent": _indent_from_width(args.indent_width),
        "log_file": args.log_file,
    }

    if args.visible_only:
        overrides["visible_only"] = True
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _indent_from_width(width: Optional[int]) -> Optional[str]:
    """Convert a numeric width into an indentation string; invalid widths yield ''."""
    if width is None:
        return None
    return " " * width if width > 0 else ""


def collapse_targets(args: argparse.Namespace) -> List[str]:
    """Folder names requested through repeated --collapse flags."""
    return [name.strip().rstrip("/") for name in args.collapse if name and name.strip()]
