from __future__ import annotations

from .ascii_parser import parse_ascii
from .detector import detect
from .facade import detect_format, parse_directory_structure
from .ids import CounterIdGenerator, random_id
from .markdown_parser import parse_markdown
from .sanitizer import sanitize

__all__ = [
    "CounterIdGenerator",
    "detect",
    "detect_format",
    "parse_ascii",
    "parse_directory_structure",
    "parse_markdown",
    "random_id",
    "sanitize",
]
