"""In-process cache of loaded dictionary stores.

Loading a full tournament word list takes far longer than a query, so
stores are built once and shared. A reload builds a new store and swaps it
in; queries already holding the previous store keep using it untouched.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from ..utils.logger import get_logger
from .dictionary import DictionaryConfig, DictionaryStore, load_dictionary


LOGGER = get_logger(__name__)

CacheKey = Tuple[str, str, str, int]


class StoreCache:
    """Serve one immutable :class:`DictionaryStore` per dictionary source."""

    def __init__(self, loader: Callable[[DictionaryConfig], DictionaryStore] = load_dictionary) -> None:
        self._loader = loader
        self._stores: Dict[CacheKey, DictionaryStore] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def get(self, config: Optional[DictionaryConfig] = None) -> DictionaryStore:
        """Return the cached store for ``config``, loading it on first use."""

        config = config or DictionaryConfig()
        key = self._key(config)
        store = self._stores.get(key)
        if store is not None:
            LOGGER.debug("Store cache hit: %s", key[0])
            return store
        with self._lock:
            store = self._stores.get(key)
            if store is None:
                LOGGER.debug("Store cache miss: %s", key[0])
                store = self._loader(config)
                self._stores[key] = store
        return store

    def reload(self, config: Optional[DictionaryConfig] = None) -> DictionaryStore:
        """Load a fresh store for ``config`` and swap it in."""

        config = config or DictionaryConfig()
        key = self._key(config)
        store = self._loader(config)
        with self._lock:
            self._stores[key] = store
        LOGGER.info("Store cache reloaded: %s (%d words)", key[0], len(store))
        return store

    def clear(self) -> None:
        with self._lock:
            self._stores.clear()

    def __len__(self) -> int:
        return len(self._stores)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _key(config: DictionaryConfig) -> CacheKey:
        records = str(Path(config.records_path).resolve()) if config.records_path else ""
        return (
            config.resolved_name().value,
            str(Path(config.assets_dir).resolve()),
            records,
            config.min_length,
        )


__all__ = ["StoreCache"]
