"""Plain-text rendering of ranked results."""

from __future__ import annotations

from typing import List

from ..core.models import MatchResult, RankedResults


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def section_title(length: int, count: int) -> str:
    return f"{length} Letters ({plural(count, 'word')})"


def summary_line(results: RankedResults, dictionary_name: str) -> str:
    return f"Found {plural(len(results), 'word')} using {dictionary_name} dictionary"


def format_result(result: MatchResult, *, definitions: bool = False) -> str:
    if not definitions:
        return f"  {result.word}"
    front = "".join(sorted(result.front_hooks))
    back = "".join(sorted(result.back_hooks))
    line = f"  {front:>6} {result.word} {back:<6}".rstrip()
    if result.definition:
        line = f"{line}  {result.definition}"
    return line


def format_results(
    results: RankedResults,
    dictionary_name: str,
    *,
    definitions: bool = False,
) -> str:
    """Render one section per length, longest words first."""

    if not results:
        return f"No words found in the {dictionary_name} dictionary"
    lines: List[str] = [summary_line(results, dictionary_name)]
    for length, members in results.iter_groups():
        lines.append("")
        lines.append(section_title(length, len(members)))
        lines.extend(format_result(result, definitions=definitions) for result in members)
    return "\n".join(lines)
