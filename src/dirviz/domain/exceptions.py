from __future__ import annotations

"""Dirviz exceptions."""


class DirvizError(Exception):
    """Base exception for dirviz errors."""

    pass


class ParseFault(DirvizError):
    """
    Raised by parser internals when tree construction hits an impossible state.

    Never escapes a parser entry point: it is converted into a rejected
    outcome at the grammar boundary.
    """

    pass
