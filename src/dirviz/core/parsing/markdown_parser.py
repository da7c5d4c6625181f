from __future__ import annotations

"""
Markdown List Parser.

Converts indented bullet lines ('- name' or '- folder/') into a forest.
Nesting is resolved by comparing raw indentation widths against the stack
of open folders, so indentation that is inconsistent but monotonic still
nests correctly. Bare lines without a bullet are accepted with the same
rules to tolerate minor format drift.
"""

import logging
import re
from typing import Final, List, Optional, Tuple

from dirviz.core.parsing.ids import IdFactory, random_id
from dirviz.core.parsing.nesting import (
    NodeDraft,
    Stack,
    freeze_forest,
    place,
    split_name,
)
from dirviz.domain.constants import (
    MSG_MARKDOWN_FAULT,
    MSG_NO_STRUCTURE,
)
from dirviz.domain.tree_models import ParseOutcome, Parsed, Rejected

logger = logging.getLogger(__name__)

_BULLET_LINE: Final[re.Pattern] = re.compile(r"^(\s*)-\s*(.*)$")
_PLAIN_LINE: Final[re.Pattern] = re.compile(r"^(\s*)(.*)$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_markdown(sanitized: str, id_factory: IdFactory = random_id) -> ParseOutcome:
    """
    Parse a Markdown-style bullet list into a forest.

    Args:
        sanitized: Input text, usually the sanitizer's output.
        id_factory: Source of node identifiers.

    Returns:
        ParseOutcome: Parsed forest, or Rejected when no entry survived or
                      tree construction failed unexpectedly.
    """
    try:
        roots: List[NodeDraft] = []
        stack: Stack = ()
        skipped = 0

        for line in sanitized.split("\n"):
            if not line.strip():
                continue

            entry = read_line(line)
            if entry is None:
                skipped += 1
                logger.debug(f"Markdown: skipping line without a name: {line!r}")
                continue

            width, raw_name = entry
            name, kind = split_name(raw_name)
            if not name:
                skipped += 1
                logger.debug(f"Markdown: skipping line with an empty name: {line!r}")
                continue

            draft = NodeDraft(id=id_factory(), name=name, kind=kind)
            stack = place(roots, stack, draft, width)

        if not roots:
            return Rejected(MSG_NO_STRUCTURE)

        forest = freeze_forest(roots)
        logger.debug(f"Markdown: parsed {len(forest)} root(s), skipped {skipped} line(s).")
        return Parsed(forest)

    except Exception as e:
        logger.error(f"Markdown parsing aborted: {e}", exc_info=True)
        return Rejected(MSG_MARKDOWN_FAULT.format(error=e))

# -----------------------------------------------------------------------------
# LINE TOKENIZATION
# -----------------------------------------------------------------------------

def read_line(line: str) -> Optional[Tuple[int, str]]:
    """
    Split a line into its indentation width and trimmed entry name.

    Lines starting with the bullet marker drop it; other lines fall back to
    the bare text.

    Returns:
        Optional[Tuple[int, str]]: (leading whitespace width, name) or None
                                   when the line carries no name.
    """
    match = _BULLET_LINE.match(line) or _PLAIN_LINE.match(line)
    if match is None:
        return None
    name = match.group(2).strip()
    if not name:
        return None
    return len(match.group(1)), name
