from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A deterministic id factory so parsed forests are reproducible.
3. Sample inputs in both supported grammars.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirviz.core.parsing.ids import CounterIdGenerator  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def id_factory() -> CounterIdGenerator:
    """Deterministic id source yielding 'node-1', 'node-2', ..."""
    return CounterIdGenerator()


@pytest.fixture
def markdown_sample() -> str:
    """A small project written as a Markdown bullet list."""
    return (
        "- project/\n"
        "  - src/\n"
        "    - index.ts\n"
        "    - utils.ts\n"
        "  - package.json  # manifest\n"
        "  - README.md\n"
    )


@pytest.fixture
def ascii_sample() -> str:
    """The same project written as a box-drawing tree."""
    return (
        "project/\n"
        "├── src/\n"
        "│   ├── index.ts\n"
        "│   └── utils.ts\n"
        "├── package.json\n"
        "└── README.md\n"
    )
