from __future__ import annotations

"""
Input Sanitization Service.

Strips comments and decorative lines from raw directory-structure text
before format detection. A line survives only if, after comment removal,
it still carries at least one character that can belong to a path name.
"""

import logging
import re
from typing import Final, Iterator, Optional

from dirviz.domain.constants import COMMENT_MARKER

logger = logging.getLogger(__name__)

# Word characters (alphanumerics and underscore), periods, hyphens and slashes
_NAME_CONTENT: Final[re.Pattern] = re.compile(r"[\w.\-/]")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sanitize(raw: str) -> str:
    """
    Remove comment lines, inline comments and content-free lines.

    Args:
        raw: Raw user input.

    Returns:
        str: Surviving lines joined by newlines; empty when nothing survives.
    """
    if not raw:
        return ""
    kept = list(sanitize_stream(iter(raw.splitlines())))
    logger.debug(f"Sanitizer kept {len(kept)} line(s) of input.")
    return "\n".join(kept)


def sanitize_stream(lines: Iterator[str]) -> Iterator[str]:
    """
    Process a stream of lines, yielding only the meaningful ones.

    Args:
        lines: Iterator yielding raw lines (without line terminators).

    Yields:
        str: Lines with comments removed and at least one name character.
    """
    for line in lines:
        stripped = strip_comment(line)
        if stripped is None:
            continue
        if has_name_content(stripped):
            yield stripped

# -----------------------------------------------------------------------------
# LINE HELPERS
# -----------------------------------------------------------------------------

def strip_comment(line: str) -> Optional[str]:
    """
    Drop a whole-line comment or cut an inline comment suffix.

    Returns:
        Optional[str]: None for a full comment line, otherwise the prefix
                       preceding the first comment marker.
    """
    if line.strip().startswith(COMMENT_MARKER):
        return None
    marker_at = line.find(COMMENT_MARKER)
    if marker_at != -1:
        return line[:marker_at]
    return line


def has_name_content(line: str) -> bool:
    """Check that a line is not pure decoration (connectors or whitespace)."""
    trimmed = line.strip()
    if not trimmed:
        return False
    return bool(_NAME_CONTENT.search(trimmed))
