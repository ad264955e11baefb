"""CLI entrypoint for the word unscrambler."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from unscrambler.core.constants import DictionaryName
from unscrambler.core.exceptions import UnscramblerError
from unscrambler.data.dictionary import DEFAULT_ASSETS_DIR, DictionaryConfig, available_dictionaries
from unscrambler.data.store_cache import StoreCache
from unscrambler.engine.ranking import unscramble
from unscrambler.utils.logger import configure_logging
from unscrambler.utils.pretty import format_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every word that can be built from a rack of letter tiles",
    )
    parser.add_argument(
        "letters",
        nargs="*",
        help="Rack letters; use ? for blank tiles (quote it in the shell)",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        choices=[name.value for name in DictionaryName],
        default=DictionaryName.CSW.value,
        help="Word list to search (falls back to the sample list when missing)",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        default=DEFAULT_ASSETS_DIR,
        help="Directory holding CSW.txt / NWL.txt / sample-words.txt",
    )
    parser.add_argument(
        "--records",
        type=Path,
        default=None,
        help="CSV of word,definition,front_hooks,back_hooks rows",
    )
    parser.add_argument(
        "--definitions",
        action="store_true",
        help="Show hooks and definitions next to each word",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=1,
        help="Ignore dictionary words shorter than this",
    )
    parser.add_argument(
        "--list-dictionaries",
        action="store_true",
        help="Print the dictionaries available in --assets-dir and exit",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--output", type=Path, help="Optional path to write the output to")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.list_dictionaries:
        print("\n".join(available_dictionaries(args.assets_dir)))
        return 0

    rack = "".join(args.letters).strip()
    if not rack:
        parser.error("enter letters to unscramble (use ? for blanks)")
    if args.min_length < 1:
        parser.error("--min-length must be at least 1")

    config = DictionaryConfig(
        name=args.dictionary,
        assets_dir=args.assets_dir,
        records_path=args.records,
        min_length=args.min_length,
    )
    try:
        store = StoreCache().get(config)
    except UnscramblerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    results = unscramble(rack, store)

    if args.json:
        payload: Dict[str, Any] = {
            "rack": rack,
            "dictionary": store.name,
            **results.to_jsonable(),
        }
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        output_text = format_results(results, store.name, definitions=args.definitions)

    if args.output:
        args.output.write_text(output_text + "\n", encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
