"""Rack feasibility check for a single word."""

from __future__ import annotations

from collections import Counter

from ..core.constants import WILDCARD


def blanks_needed(word: str, rack: str) -> int:
    """Return how many wildcards ``rack`` must spend to spell ``word``.

    Blanks are a single shared pool: the deficit of every letter is summed,
    and any blank may cover any letter.
    """

    required = Counter(word.upper())
    available = Counter(rack.upper())
    available.pop(WILDCARD, None)
    return sum(max(0, count - available[letter]) for letter, count in required.items())


def can_form(word: str, rack: str) -> bool:
    """Return ``True`` when ``word`` can be assembled from ``rack``.

    Comparison is case-insensitive and ``?`` in the rack is a blank tile.
    """

    return blanks_needed(word, rack) <= rack.count(WILDCARD)


__all__ = ["blanks_needed", "can_form"]
