"""Shared helpers for word and rack normalization."""

from __future__ import annotations

import re

ANNOTATION_RE = re.compile(r"[\s#*$+^!@%&~=]")
RACK_RE = re.compile(r"[^A-Z?]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with whitespace and annotation markers removed.

    Word lists mark entries with trailing symbols such as ``#`` or ``*``.
    Anything left that is not an ASCII letter makes the entry malformed,
    and ``""`` is returned so callers drop it.
    """

    if not text:
        return ""
    stripped = ANNOTATION_RE.sub("", text)
    if not (stripped.isascii() and stripped.isalpha()):
        return ""
    return stripped.upper()


def normalize_rack(text: str) -> str:
    """Return the rack as uppercase letters and ``?`` wildcards only."""

    if not text:
        return ""
    return RACK_RE.sub("", text.upper())


def clean_hooks(text: str) -> frozenset:
    """Return the set of hook letters listed in ``text``."""

    return frozenset(clean_word(text))


__all__ = ["clean_hooks", "clean_word", "normalize_rack"]
