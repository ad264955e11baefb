"""Word list and record file parsing."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core.models import WordRecord
from .normalization import clean_hooks, clean_word

FIELDNAMES = ("word", "definition", "front_hooks", "back_hooks")


def _parse_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _is_header(row: List[str]) -> bool:
    return tuple(cell.strip().lower() for cell in row) == FIELDNAMES


def parse_word_list(lines: Iterable[str]) -> List[str]:
    """Return cleaned words, one per line. Blank lines and # comments are skipped."""

    words: List[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        word = clean_word(stripped)
        if word:
            words.append(word)
    return words


def parse_record_file(lines: Iterable[str]) -> Dict[str, WordRecord]:
    """Parse ``word,definition,front_hooks,back_hooks`` rows into records.

    Fields may be quoted with doubled-quote escaping. A leading header row
    is skipped. When a word appears twice, the first row wins.
    """

    records: Dict[str, WordRecord] = {}
    reader = csv.reader(lines)
    for index, row in enumerate(reader):
        if not row or (index == 0 and _is_header(row)):
            continue
        padded = list(row) + [""] * (len(FIELDNAMES) - len(row))
        word = clean_word(padded[0])
        if not word or word in records:
            continue
        records[word] = WordRecord(
            word=word,
            definition=_parse_text(padded[1]),
            front_hooks=clean_hooks(padded[2]),
            back_hooks=clean_hooks(padded[3]),
        )
    return records


def read_word_list(path: Path | str) -> List[str]:
    """Load a plain word list from disk."""

    location = Path(path)
    if not location.exists():
        raise FileNotFoundError(f"Missing word list: {location}")
    with location.open("r", encoding="utf-8") as handle:
        return parse_word_list(handle)


def read_record_file(path: Path | str) -> Dict[str, WordRecord]:
    """Load word metadata records from disk."""

    location = Path(path)
    if not location.exists():
        raise FileNotFoundError(f"Missing record file: {location}")
    with location.open("r", encoding="utf-8", newline="") as handle:
        return parse_record_file(handle)


def write_record_file(records: Iterable[WordRecord], destination: Path | str) -> None:
    """Persist records in the format read by :func:`read_record_file`."""

    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(FIELDNAMES)
        for record in records:
            writer.writerow(
                [
                    record.word,
                    record.definition or "",
                    "".join(sorted(record.front_hooks)),
                    "".join(sorted(record.back_hooks)),
                ]
            )


__all__ = [
    "FIELDNAMES",
    "parse_record_file",
    "parse_word_list",
    "read_record_file",
    "read_word_list",
    "write_record_file",
]


def _cli() -> None:
    parser = argparse.ArgumentParser(description="Check a word list and optional record file")
    parser.add_argument("words", type=Path, help="Plain word list, one word per line")
    parser.add_argument("--records", type=Path, default=None, help="Optional CSV of word metadata")
    args = parser.parse_args()

    words = read_word_list(args.words)
    unique = len(set(words))
    print(f"Parsed {len(words):,} words ({unique:,} unique) from {args.words}")
    if args.records:
        records = read_record_file(args.records)
        covered = sum(1 for word in set(words) if word in records)
        print(f"Parsed {len(records):,} records, covering {covered:,} listed words")


if __name__ == "__main__":  # pragma: no cover - convenience CLI
    _cli()
