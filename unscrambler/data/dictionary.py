"""Dictionary store and the loader that builds it from word list assets."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..core.constants import OFFICIAL_DICTIONARIES, DictionaryName
from ..core.exceptions import DictionaryLoadError
from ..core.models import WordRecord
from ..utils.logger import get_logger
from .normalization import clean_word
from .preprocess import read_record_file, read_word_list


LOGGER = get_logger(__name__)

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent / "assets"


@dataclass
class DictionaryConfig:
    """Configuration for locating and loading a dictionary."""

    name: DictionaryName | str = DictionaryName.CSW
    assets_dir: Path | str = DEFAULT_ASSETS_DIR
    records_path: Path | str | None = None
    fallback_to_sample: bool = True
    strict: bool = False
    min_length: int = 1

    def resolved_name(self) -> DictionaryName:
        if isinstance(self.name, DictionaryName):
            return self.name
        for candidate in DictionaryName:
            if candidate.value.lower() == str(self.name).strip().lower():
                return candidate
        raise DictionaryLoadError(f"Unknown dictionary: {self.name}")


class DictionaryStore:
    """Immutable vocabulary plus an optional per-word metadata lookup.

    ``words`` keeps the order in which words were supplied. ``records`` may
    cover only part of the vocabulary; a word without a record is valid.
    """

    __slots__ = ("_words", "_word_set", "_records", "name")

    def __init__(
        self,
        words: Tuple[str, ...],
        records: Mapping[str, WordRecord],
        name: str = "",
    ) -> None:
        self._words = words
        self._word_set = frozenset(words)
        self._records = MappingProxyType(dict(records))
        self.name = name

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        records: Optional[Mapping[str, WordRecord]] = None,
        name: str = "",
        min_length: int = 1,
    ) -> "DictionaryStore":
        """Canonicalize and deduplicate ``words``, keeping the first occurrence."""

        seen: Dict[str, None] = {}
        for raw in words:
            word = clean_word(raw)
            if len(word) < max(min_length, 1) or word in seen:
                continue
            seen[word] = None

        cleaned: Dict[str, WordRecord] = {}
        for key, record in (records or {}).items():
            word = clean_word(key)
            if word and word not in cleaned:
                cleaned[word] = record
        return cls(tuple(seen), cleaned, name=name)

    @classmethod
    def empty(cls, name: str = "") -> "DictionaryStore":
        return cls((), {}, name=name)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def records(self) -> Mapping[str, WordRecord]:
        return self._records

    def get(self, word: str) -> Optional[WordRecord]:
        return self._records.get(clean_word(word))

    def contains(self, word: str) -> bool:
        return clean_word(word) in self._word_set

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"DictionaryStore(name={self.name!r}, words={len(self._words)}, records={len(self._records)})"


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------
def load_dictionary(config: Optional[DictionaryConfig] = None) -> DictionaryStore:
    """Build a store for ``config.name``, degrading to the sample word list.

    The preferred list is ``<assets_dir>/<NAME>.txt``. When it is missing or
    unreadable the bundled sample list is used instead; when that fails too
    an empty store is returned, or :class:`DictionaryLoadError` is raised in
    strict mode.
    """

    config = config or DictionaryConfig()
    name = config.resolved_name()
    assets_dir = Path(config.assets_dir)

    words_path = assets_dir / name.word_list_file
    try:
        words = _read_words(words_path)
        loaded_name = name
    except DictionaryLoadError as exc:
        if not config.fallback_to_sample or name is DictionaryName.SAMPLE:
            return _load_failed(config, name, str(exc))
        LOGGER.warning("%s dictionary unavailable, using sample dictionary: %s", name.value, exc)
        loaded_name = DictionaryName.SAMPLE
        words_path = assets_dir / loaded_name.word_list_file
        try:
            words = _read_words(words_path)
        except DictionaryLoadError as sample_exc:
            return _load_failed(config, name, str(sample_exc))

    records = _load_records(config, assets_dir, loaded_name)
    store = DictionaryStore.from_words(
        words,
        records,
        name=loaded_name.value,
        min_length=config.min_length,
    )
    LOGGER.info(
        "Loaded %s dictionary: %d words, %d records from %s",
        store.name,
        len(store),
        len(store.records),
        words_path,
    )
    return store


def _read_words(path: Path) -> List[str]:
    try:
        return read_word_list(path)
    except FileNotFoundError as exc:
        raise DictionaryLoadError(f"Missing word list: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Unreadable word list {path}: {exc}") from exc


def _read_records(path: Path) -> Dict[str, WordRecord]:
    try:
        return read_record_file(path)
    except FileNotFoundError as exc:
        raise DictionaryLoadError(f"Missing record file: {path}") from exc
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise DictionaryLoadError(f"Unreadable record file {path}: {exc}") from exc


def _load_records(
    config: DictionaryConfig,
    assets_dir: Path,
    name: DictionaryName,
) -> Dict[str, WordRecord]:
    if config.records_path is not None:
        return _read_records(Path(config.records_path))

    path = assets_dir / name.records_file
    if not path.exists():
        LOGGER.debug("No record file for %s at %s", name.value, path)
        return {}
    try:
        return _read_records(path)
    except DictionaryLoadError as exc:
        if config.strict:
            raise
        LOGGER.error("Ignoring word metadata: %s", exc)
        return {}


def _load_failed(config: DictionaryConfig, name: DictionaryName, message: str) -> DictionaryStore:
    if config.strict:
        raise DictionaryLoadError(message)
    LOGGER.error("Failed to load dictionary: %s", message)
    return DictionaryStore.empty(name=name.value)


def available_dictionaries(assets_dir: Path | str = DEFAULT_ASSETS_DIR) -> List[str]:
    """Return the official dictionaries present under ``assets_dir``."""

    root = Path(assets_dir)
    names = [name.value for name in OFFICIAL_DICTIONARIES if (root / name.word_list_file).is_file()]
    if not names:
        names.append(DictionaryName.SAMPLE.value)
    return names


__all__ = [
    "DEFAULT_ASSETS_DIR",
    "DictionaryConfig",
    "DictionaryStore",
    "available_dictionaries",
    "load_dictionary",
]
