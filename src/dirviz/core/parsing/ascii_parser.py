from __future__ import annotations

"""
ASCII Box-Drawing Tree Parser.

Converts lines prefixed with box-drawing tokens ('│   ', '    ', '├── ',
'└── ') into a forest. Every continuation block consumed before the
connector adds one nesting level; the connector ends the prefix. A bare
'name/' on the very first line establishes an implicit root that every
later entry nests under.
"""

import logging
from typing import List, NamedTuple

from dirviz.core.parsing.ids import IdFactory, random_id
from dirviz.core.parsing.nesting import (
    Frame,
    NodeDraft,
    Stack,
    freeze_forest,
    place,
    split_name,
)
from dirviz.domain.constants import (
    ASCII_CONNECTORS,
    ASCII_PREFIX_TOKENS,
    FOLDER_SUFFIX,
    IMPLICIT_ROOT_LEVEL,
    MSG_ASCII_FAULT,
    MSG_NO_STRUCTURE,
)
from dirviz.domain.tree_models import NodeKind, ParseOutcome, Parsed, Rejected

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# LINE TOKENIZATION
# -----------------------------------------------------------------------------

class PrefixScan(NamedTuple):
    """Result of consuming the box-drawing prefix of one line."""
    level: int
    name: str
    has_connector: bool
    has_tokens: bool


def scan_prefix(line: str) -> PrefixScan:
    """
    Consume continuation blocks and at most one connector from `line`.

    Args:
        line: A raw input line.

    Returns:
        PrefixScan: Continuation count, trimmed remainder, and whether a
                    connector or any prefix token was consumed.
    """
    pos = 0
    level = 0
    has_tokens = False

    while pos < len(line):
        token = next((t for t in ASCII_PREFIX_TOKENS if line.startswith(t, pos)), None)
        if token is None:
            break
        has_tokens = True
        pos += len(token)
        if token in ASCII_CONNECTORS:
            return PrefixScan(level, line[pos:].strip(), True, True)
        level += 1

    return PrefixScan(level, line[pos:].strip(), False, has_tokens)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_ascii(sanitized: str, id_factory: IdFactory = random_id) -> ParseOutcome:
    """
    Parse a box-drawing tree into a forest.

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

        for index, line in enumerate(sanitized.split("\n")):
            if not line.strip():
                continue

            scan = scan_prefix(line)
            if not scan.name:
                skipped += 1
                logger.debug(f"ASCII: skipping line without a name: {line!r}")
                continue

            # Bare 'name/' heading the input becomes the implicit root
            if index == 0 and not scan.has_tokens and scan.name.endswith(FOLDER_SUFFIX):
                name, _ = split_name(scan.name)
                if name:
                    root = NodeDraft(id=id_factory(), name=name, kind=NodeKind.FOLDER)
                    roots.append(root)
                    stack = (Frame(root, IMPLICIT_ROOT_LEVEL),)
                    continue

            name, kind = split_name(scan.name)
            if not name:
                skipped += 1
                logger.debug(f"ASCII: skipping line with an empty name: {line!r}")
                continue

            draft = NodeDraft(id=id_factory(), name=name, kind=kind)
            stack = place(roots, stack, draft, scan.level)

        if not roots:
            return Rejected(MSG_NO_STRUCTURE)

        forest = freeze_forest(roots)
        logger.debug(f"ASCII: parsed {len(forest)} root(s), skipped {skipped} line(s).")
        return Parsed(forest)

    except Exception as e:
        logger.error(f"ASCII parsing aborted: {e}", exc_info=True)
        return Rejected(MSG_ASCII_FAULT.format(error=e))
