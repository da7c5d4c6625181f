from __future__ import annotations

"""
Parse Facade.

Single entry point for turning raw user text into a forest: validates the
input, sanitizes it, detects the grammar and dispatches to the matching
parser. Every failure is reported as a Rejected outcome, never raised.
"""

import logging
from typing import Callable, Dict

from dirviz.core.analysis.tree_queries import collect_ids
from dirviz.core.parsing.ascii_parser import parse_ascii
from dirviz.core.parsing.detector import detect
from dirviz.core.parsing.ids import IdFactory, random_id
from dirviz.core.parsing.markdown_parser import parse_markdown
from dirviz.core.parsing.sanitizer import sanitize
from dirviz.domain.constants import MSG_EMPTY_INPUT, MSG_ONLY_COMMENTS, MSG_UNKNOWN_FORMAT
from dirviz.domain.tree_models import InputFormat, ParseOutcome, Parsed, Rejected

logger = logging.getLogger(__name__)

GrammarParser = Callable[[str, IdFactory], ParseOutcome]

_PARSERS: Dict[InputFormat, GrammarParser] = {
    InputFormat.MARKDOWN: parse_markdown,
    InputFormat.ASCII: parse_ascii,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_directory_structure(raw: str, id_factory: IdFactory = random_id) -> ParseOutcome:
    """
    Parse a Markdown list or ASCII tree into a forest.

    Pipeline: emptiness check, sanitization, format detection and
    grammar-specific parsing.

    Args:
        raw: Text exactly as provided by the user.
        id_factory: Source of node identifiers.

    Returns:
        ParseOutcome: Parsed forest or Rejected with the failure reason.
    """
    if not raw or not raw.strip():
        return _reject(MSG_EMPTY_INPUT)

    sanitized = sanitize(raw)
    if not sanitized.strip():
        return _reject(MSG_ONLY_COMMENTS)

    fmt = detect(sanitized)
    parser = _PARSERS.get(fmt)
    if parser is None:
        return _reject(MSG_UNKNOWN_FORMAT)

    outcome = parser(sanitized, id_factory)
    if isinstance(outcome, Parsed):
        ids = collect_ids(outcome.forest)
        if len(ids) != len(set(ids)):
            logger.warning("Parsed forest contains duplicate node ids; check the id factory.")
        logger.debug(f"Parsed {len(ids)} node(s) from {fmt.value} input.")
    else:
        logger.info(f"Parse rejected: {outcome.reason}")
    return outcome


def detect_format(raw: str) -> InputFormat:
    """Sanitize raw input and report the grammar it would be parsed with."""
    return detect(sanitize(raw or ""))


def _reject(reason: str) -> Rejected:
    logger.info(f"Parse rejected: {reason}")
    return Rejected(reason)
