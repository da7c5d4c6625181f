from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides user data directory resolution and text input loading for the
CLI. The parsing and state layers never touch the filesystem; only the
interface layer calls into this module.
"""

import os
import sys
from typing import Optional, TextIO

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "Dirviz"
UNIX_APP_DIR_NAME = ".dirviz"
STDIN_MARKER = "-"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = False) -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/Dirviz
    - Linux/Mac: ~/.dirviz

    Args:
        create: Create the directory hierarchy when missing.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)

# -----------------------------------------------------------------------------
# INPUT API
# -----------------------------------------------------------------------------

def read_text_input(path: Optional[str], stdin: Optional[TextIO] = None) -> str:
    """
    Load the directory-structure text from a file or standard input.

    Args:
        path: File path, or None / '-' for standard input.
        stdin: Stream used instead of sys.stdin (mainly for tests).

    Returns:
        str: The full text content.

    Raises:
        FileNotFoundError: If `path` does not exist.
        OSError: On other read failures.
    """
    if not path or path == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def input_exists(path: Optional[str]) -> bool:
    """True for standard input or an existing regular file."""
    if not path or path == STDIN_MARKER:
        return True
    return os.path.isfile(path)
