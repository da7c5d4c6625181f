from __future__ import annotations

"""
Input Format Detector.

Classifies sanitized input through an ordered rule list: the first rule
whose predicate matches decides the grammar. New grammars are added by
inserting a rule, never by reordering the existing ones.
"""

import logging
from typing import Callable, Final, List, Tuple

from dirviz.domain.constants import BOX_DRAWING_GLYPHS, BULLET_MARKER
from dirviz.domain.tree_models import InputFormat

logger = logging.getLogger(__name__)

DetectionRule = Tuple[str, Callable[[str], bool], InputFormat]

# -----------------------------------------------------------------------------
# PREDICATES
# -----------------------------------------------------------------------------

def _content_lines(text: str) -> List[str]:
    return [line for line in text.strip().split("\n") if line.strip()]


def has_box_drawing(text: str) -> bool:
    """True if any connector glyph appears anywhere in the text."""
    return any(glyph in text for glyph in BOX_DRAWING_GLYPHS)


def has_bullet_line(text: str) -> bool:
    """True if a content line starts with the bullet marker once trimmed."""
    return any(line.strip().startswith(BULLET_MARKER) for line in _content_lines(text))


def has_content(text: str) -> bool:
    """True if the text holds at least one non-blank line."""
    return bool(_content_lines(text))

# -----------------------------------------------------------------------------
# RULES
# -----------------------------------------------------------------------------

DETECTION_RULES: Final[Tuple[DetectionRule, ...]] = (
    ("box-drawing glyph", has_box_drawing, InputFormat.ASCII),
    ("bullet line", has_bullet_line, InputFormat.MARKDOWN),
    # Bare lines are read as an implicit single-item list
    ("plain content", has_content, InputFormat.MARKDOWN),
)


def detect(sanitized: str, rules: Tuple[DetectionRule, ...] = DETECTION_RULES) -> InputFormat:
    """
    Classify sanitized input as Markdown, ASCII or Unknown.

    Args:
        sanitized: Output of the sanitizer.
        rules: Ordered (label, predicate, format) triples.

    Returns:
        InputFormat: Format of the first matching rule, UNKNOWN otherwise.
    """
    for label, predicate, fmt in rules:
        if predicate(sanitized):
            logger.debug(f"Format detected as '{fmt.value}' (rule: {label}).")
            return fmt
    return InputFormat.UNKNOWN
