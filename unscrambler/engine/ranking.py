"""Filter a dictionary store by rack and rank the formable words."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..core.models import MatchResult, RankedResults
from ..data.dictionary import DictionaryStore
from ..data.normalization import normalize_rack
from ..utils.logger import get_logger
from .matcher import can_form


LOGGER = get_logger(__name__)


def rank_key(result: MatchResult) -> Tuple[int, str]:
    """Longer words first, then alphabetical."""

    return (-result.length, result.word)


def iter_matches(rack: str, store: DictionaryStore) -> Iterator[MatchResult]:
    """Yield formable words lazily, in vocabulary order.

    The generator holds no state beyond its position, so calling it again
    restarts the scan from the beginning.
    """

    letters = normalize_rack(rack)
    if not letters:
        return
    rack_length = len(letters)
    records = store.records
    for word in store.words:
        if len(word) > rack_length:
            continue
        if can_form(word, letters):
            yield MatchResult(word=word, length=len(word), record=records.get(word))


def rank_matches(matches: Iterable[MatchResult]) -> List[MatchResult]:
    return sorted(matches, key=rank_key)


def group_by_length(results: Sequence[MatchResult]) -> Dict[int, Tuple[MatchResult, ...]]:
    """Partition ranked results by length, keeping their order within each group."""

    grouped: Dict[int, List[MatchResult]] = {}
    for result in results:
        grouped.setdefault(result.length, []).append(result)
    return {length: tuple(members) for length, members in grouped.items()}


def unscramble(rack: str, store: DictionaryStore) -> RankedResults:
    """Return every word in ``store`` that can be built from ``rack``.

    An empty rack or an empty store yields an empty :class:`RankedResults`.
    """

    ranked = rank_matches(iter_matches(rack, store))
    results = RankedResults(tuple(ranked), group_by_length(ranked))
    LOGGER.debug(
        "Rack %r matched %d of %d words in %s",
        rack,
        len(results),
        len(store),
        store.name or "store",
    )
    return results


__all__ = ["group_by_length", "iter_matches", "rank_key", "rank_matches", "unscramble"]
