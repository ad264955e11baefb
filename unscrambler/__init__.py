"""Word unscrambler for Scrabble-style racks.

This package exposes the public API surface via:

- ``unscrambler.engine.ranking.unscramble``: ranks every formable word.
- ``unscrambler.engine.matcher.can_form``: checks a single word against a rack.
- ``unscrambler.data.dictionary.DictionaryStore``: the immutable vocabulary.
- ``unscrambler.data.dictionary.load_dictionary``: builds a store from word list assets.
"""

from .core.models import MatchResult, RankedResults, WordRecord
from .data.dictionary import DictionaryConfig, DictionaryStore, load_dictionary
from .engine.matcher import can_form
from .engine.ranking import unscramble

__all__ = [
    "DictionaryConfig",
    "DictionaryStore",
    "MatchResult",
    "RankedResults",
    "WordRecord",
    "can_form",
    "load_dictionary",
    "unscramble",
]

__version__ = "0.1.0"
