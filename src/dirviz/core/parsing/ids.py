from __future__ import annotations

"""
Node Identifier Generators.

Parsers receive their identifier source as a plain zero-argument callable
so that production code can use collision-resistant random ids while tests
swap in a deterministic counter.
"""

import itertools
import secrets
import string
import time
from typing import Callable

IdFactory = Callable[[], str]

_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_RANDOM_SUFFIX_LEN = 9


def random_id() -> str:
    """
    Generate a node id shaped as 'node-<epoch millis>-<9 base36 chars>'.

    Returns:
        str: A fresh identifier.
    """
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(_RANDOM_SUFFIX_LEN))
    return f"node-{millis}-{suffix}"


class CounterIdGenerator:
    """
    Deterministic id source producing '<prefix>-1', '<prefix>-2', ...

    Each instance keeps its own counter, so two generators never interfere.
    """

    def __init__(self, prefix: str = "node", start: int = 1):
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
