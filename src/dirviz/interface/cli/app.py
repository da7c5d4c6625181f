from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, JSON file, CLI overrides), input loading, parsing, tree edits
requested by flags, and output rendering.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from dirviz.core.analysis.tree_queries import count_nodes, iter_nodes
from dirviz.core.analysis.tree_renderer import format_tree, format_visible_tree
from dirviz.core.parsing.facade import detect_format, parse_directory_structure
from dirviz.core.state.engine import TreeStore
from dirviz.core.validator import validate_config
from dirviz.domain.config import get_default_config, load_config
from dirviz.domain.tree_models import Rejected, TreeState
from dirviz.infra.fs import input_exists, read_text_input
from dirviz.infra.logging import LoggingConfig, configure_logging, get_logger
from dirviz.interface.cli import args as cli_args
from dirviz.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 rejection or failure,
             2 missing input file, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.from_settings(clean_conf))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Input loading
    if not input_exists(args.input_path):
        msg = i18n.t("cli.errors.path_not_exist", path=args.input_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    try:
        raw_text = read_text_input(args.input_path)
    except KeyboardInterrupt:
        return _interrupted()
    except OSError as e:
        msg = i18n.t("cli.errors.read_fail", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if args.detect:
        print(detect_format(raw_text).value)
        return 0

    # 5. Parse and edit phase
    collapse = cli_args.collapse_targets(args)
    if collapse:
        # --collapse implies --visible-only
        clean_conf = {**clean_conf, "visible_only": True}

    try:
        state = build_state(raw_text, collapse)
    except KeyboardInterrupt:
        return _interrupted()
    except Exception as e:
        msg = i18n.t("cli.errors.unexpected", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if isinstance(state, Rejected):
        print(f"ERROR: {i18n.t('cli.errors.rejected', reason=state.reason)}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    print(render_state(state, clean_conf))
    logger.debug(i18n.t(
        "cli.status.summary", nodes=count_nodes(state.forest), roots=len(state.forest)
    ))
    return 0

# -----------------------------------------------------------------------------
# PARSE + EDIT
# -----------------------------------------------------------------------------

def build_state(raw_text: str, collapse: List[str]) -> TreeState | Rejected:
    """
    Parse the input and apply the edits requested on the command line.

    Args:
        raw_text: Directory structure as typed by the user.
        collapse: Folder names whose folders get collapsed.

    Returns:
        TreeState | Rejected: The final snapshot, or the parse rejection.
    """
    outcome = parse_directory_structure(raw_text)
    if isinstance(outcome, Rejected):
        return outcome

    store = TreeStore()
    store.set_tree(outcome.forest)

    targets = set(collapse)
    if targets:
        for node in list(iter_nodes(store.state.forest)):
            if node.is_folder and node.name in targets and node.expanded:
                store.toggle_expand(node.id)
    return store.state


def render_state(state: TreeState, conf: Dict[str, Any]) -> str:
    """Render a snapshot according to the output configuration."""
    if conf["json_output"]:
        return json.dumps([node.to_dict() for node in state.forest], ensure_ascii=False, indent=2)

    formatter = format_visible_tree if conf["visible_only"] else format_tree
    return formatter(state.forest, style=conf["output_style"], indent=conf["indent"])

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides for known keys into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _interrupted() -> int:
    msg = i18n.t("cli.status.interrupted")
    logger.warning(msg)
    print(msg, file=sys.stderr)
    return 130

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
