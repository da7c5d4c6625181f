from __future__ import annotations

"""
Unit tests for the Input Sanitizer.

Verifies:
1. Removal of full-line and inline comments.
2. Removal of blank and decoration-only lines.
3. Preservation of meaningful lines and their indentation.
"""

from dirviz.core.parsing.sanitizer import has_name_content, sanitize, strip_comment


# -----------------------------------------------------------------------------
# Comment Handling
# -----------------------------------------------------------------------------
def test_sanitize_drops_full_line_comments():
    """Lines whose trimmed form starts with '#' disappear entirely."""
    raw = "# header\n- src/\n   # indented comment\n  - main.py"
    assert sanitize(raw) == "- src/\n  - main.py"


def test_sanitize_cuts_inline_comments():
    """Everything from the first '#' onward is removed."""
    assert sanitize("- app.py  # entry point") == "- app.py  "


def test_strip_comment_distinguishes_full_and_inline():
    assert strip_comment("  # note") is None
    assert strip_comment("├── a.txt # x") == "├── a.txt "
    assert strip_comment("plain") == "plain"


# -----------------------------------------------------------------------------
# Decoration Handling
# -----------------------------------------------------------------------------
def test_sanitize_drops_blank_and_connector_only_lines():
    """Lines made only of whitespace or box-drawing glyphs are decoration."""
    raw = "project/\n\n│\n│   \n├── src/\n   \n└── a.md"
    assert sanitize(raw) == "project/\n├── src/\n└── a.md"


def test_has_name_content_accepts_path_characters():
    """Hyphens, periods, slashes and underscores count as content."""
    for line in ("-", ".", "/", "_", "a", "7"):
        assert has_name_content(line), line
    for line in ("", "   ", "│", "├──", "***"):
        assert not has_name_content(line), line


def test_sanitize_empty_and_comment_only_input():
    """Worst case is an empty string, never an error."""
    assert sanitize("") == ""
    assert sanitize("# only\n   # comments\n\n") == ""


def test_sanitize_preserves_leading_indentation():
    """Indentation carries nesting and must survive sanitization."""
    assert sanitize("- a/\n    - b") == "- a/\n    - b"
