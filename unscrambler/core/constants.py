"""Shared constants and enumerations for the word unscrambler."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

WILDCARD = "?"
"""Rack symbol for a blank tile that may stand in for any single letter."""

SAMPLE_WORDS_FILE = "sample-words.txt"


class DictionaryName(str, Enum):
    """Word lists the supplier knows how to locate."""

    CSW = "CSW"
    NWL = "NWL"
    SAMPLE = "Sample"

    @property
    def word_list_file(self) -> str:
        if self is DictionaryName.SAMPLE:
            return SAMPLE_WORDS_FILE
        return f"{self.value}.txt"

    @property
    def records_file(self) -> str:
        if self is DictionaryName.SAMPLE:
            return "sample-words.csv"
        return f"{self.value}.csv"


OFFICIAL_DICTIONARIES: Tuple[DictionaryName, ...] = (DictionaryName.CSW, DictionaryName.NWL)
