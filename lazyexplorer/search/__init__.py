"""Search package exports.

Name-based subtree search used by the explorer's search command.
"""

from __future__ import annotations

from .tree import PSEUDO_ENTRIES, iter_search, name_matches, search

__all__ = [
    "PSEUDO_ENTRIES",
    "iter_search",
    "name_matches",
    "search",
]
