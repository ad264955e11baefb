"""Data models shared by the dictionary store and the ranking engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class WordRecord:
    """Metadata attached to a single dictionary word."""

    word: str
    definition: Optional[str] = None
    front_hooks: FrozenSet[str] = frozenset()
    back_hooks: FrozenSet[str] = frozenset()

    def hooked_words(self) -> List[str]:
        """Return the words formed by adding each hook letter."""

        front = [f"{hook}{self.word}" for hook in sorted(self.front_hooks)]
        back = [f"{self.word}{hook}" for hook in sorted(self.back_hooks)]
        return front + back


@dataclass(frozen=True)
class MatchResult:
    """A formable word.

    Metadata is read through ``record`` rather than copied, so a result
    always reflects the store it was produced from.
    """

    word: str
    length: int
    record: Optional[WordRecord] = field(default=None, compare=False)

    @property
    def definition(self) -> Optional[str]:
        return self.record.definition if self.record else None

    @property
    def front_hooks(self) -> FrozenSet[str]:
        return self.record.front_hooks if self.record else frozenset()

    @property
    def back_hooks(self) -> FrozenSet[str]:
        return self.record.back_hooks if self.record else frozenset()

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "length": self.length,
            "definition": self.definition,
            "front_hooks": "".join(sorted(self.front_hooks)),
            "back_hooks": "".join(sorted(self.back_hooks)),
            "hooked_words": self.record.hooked_words() if self.record else [],
        }


class RankedResults:
    """Matches ordered by length (descending) then alphabetically, grouped by length.

    Instances are built once per query and never mutated afterwards.
    """

    __slots__ = ("_results", "_groups", "_lengths")

    def __init__(
        self,
        results: Tuple[MatchResult, ...] = (),
        groups: Optional[Mapping[int, Tuple[MatchResult, ...]]] = None,
    ) -> None:
        self._results = tuple(results)
        self._groups = MappingProxyType(dict(groups or {}))
        self._lengths = tuple(sorted(self._groups, reverse=True))

    @property
    def results(self) -> Tuple[MatchResult, ...]:
        return self._results

    @property
    def groups(self) -> Mapping[int, Tuple[MatchResult, ...]]:
        return self._groups

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._lengths

    def group(self, length: int) -> Tuple[MatchResult, ...]:
        return self._groups.get(length, ())

    def iter_groups(self) -> Iterator[Tuple[int, Tuple[MatchResult, ...]]]:
        for length in self._lengths:
            yield length, self._groups[length]

    def words(self) -> List[str]:
        return [result.word for result in self._results]

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "count": len(self._results),
            "lengths": list(self._lengths),
            "groups": [
                {"length": length, "words": [result.to_jsonable() for result in members]}
                for length, members in self.iter_groups()
            ],
        }

    def __iter__(self) -> Iterator[MatchResult]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __bool__(self) -> bool:
        return bool(self._results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankedResults):
            return NotImplemented
        return self._results == other._results and dict(self._groups) == dict(other._groups)

    def __repr__(self) -> str:
        return f"RankedResults(count={len(self._results)}, lengths={list(self._lengths)})"
