from __future__ import annotations

"""
Domain Constants.

Centralizes the glyph vocabulary of both input grammars, the comment marker
honoured by the sanitizer, and the user-facing rejection messages returned
by the parse facade.
"""

from typing import Final, Tuple

# -----------------------------------------------------------------------------
# GRAMMAR VOCABULARY
# -----------------------------------------------------------------------------

COMMENT_MARKER: Final[str] = "#"
BULLET_MARKER: Final[str] = "-"
FOLDER_SUFFIX: Final[str] = "/"

# Box-drawing glyphs that route an input to the ASCII grammar
BOX_DRAWING_GLYPHS: Final[Tuple[str, ...]] = ("├", "└", "│", "─")

BRANCH_CONNECTOR: Final[str] = "├──"
CORNER_CONNECTOR: Final[str] = "└──"
VERTICAL_CONTINUATION: Final[str] = "│   "
BLANK_CONTINUATION: Final[str] = "    "

# Scan order matters: connectors end the prefix, continuations only nest
ASCII_PREFIX_TOKENS: Final[Tuple[str, ...]] = (
    BRANCH_CONNECTOR,
    CORNER_CONNECTOR,
    VERTICAL_CONTINUATION,
    BLANK_CONTINUATION,
)
ASCII_CONNECTORS: Final[Tuple[str, ...]] = (BRANCH_CONNECTOR, CORNER_CONNECTOR)

# Level recorded for an implicit ASCII root; lower than any real level
IMPLICIT_ROOT_LEVEL: Final[int] = -1

# -----------------------------------------------------------------------------
# REJECTION MESSAGES
# -----------------------------------------------------------------------------

MSG_EMPTY_INPUT: Final[str] = "Input is empty. Please provide a directory structure."
MSG_ONLY_COMMENTS: Final[str] = (
    "Input contains only comments or whitespace. "
    "Please provide a valid directory structure."
)
MSG_UNKNOWN_FORMAT: Final[str] = (
    "Unable to detect input format. "
    "Please use markdown (- folder/) or ASCII (├── folder/) format."
)
MSG_NO_STRUCTURE: Final[str] = "No valid directory structure found in input"
MSG_MARKDOWN_FAULT: Final[str] = "Failed to parse markdown format: {error}"
MSG_ASCII_FAULT: Final[str] = "Failed to parse ASCII format: {error}"
