"""Name transformations used by registries.

All helpers are pure functions of their input. Patterns use ASCII word
semantics so derived constants and slugs only ever contain ``[A-Za-z0-9_]``.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

_RE_SEPARATORS = re.compile(r"[-\s]+")
_RE_LEADING_DIGITS = re.compile(r"^[0-9_]+")
_RE_NON_WORD = re.compile(r"\W+", re.ASCII)

_RE_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_RE_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_RE_ID_SUFFIX = re.compile(r"_id$")
_RE_WORD_START = re.compile(r"\b(?<!\w['`()])([a-z])")


@lru_cache(maxsize=256)
def constant_name(name: Any) -> str:
    """Derive an upper-case constant identifier from an entry name.

    ``"new-hire"`` becomes ``NEW_HIRE``; ``"3d printer"`` becomes ``D_PRINTER``.
    May return an empty string when nothing survives the cleanup.
    """
    text = str(name).upper().strip()
    text = _RE_SEPARATORS.sub("_", text)
    text = _RE_LEADING_DIGITS.sub("", text, count=1)
    return _RE_NON_WORD.sub("", text)


@lru_cache(maxsize=256)
def slugify(name: Any) -> str:
    """Lower-case ``name`` and drop every non-word character."""
    return _RE_NON_WORD.sub("", str(name).lower())


def underscore(text: str) -> str:
    text = _RE_ACRONYM_BOUNDARY.sub(r"\1_\2", text)
    text = _RE_CAMEL_BOUNDARY.sub(r"\1_\2", text)
    return text.replace("-", "_").lower()


def humanize(text: str) -> str:
    text = _RE_ID_SUFFIX.sub("", text)
    text = text.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def titleize(text: Any) -> str:
    """Render an identifier-like string as a capitalized display label.

    ``"asset_type"`` -> ``"Asset Type"``, ``"videoGenre"`` -> ``"Video Genre"``.
    """
    humanized = humanize(underscore(str(text)))
    return _RE_WORD_START.sub(lambda m: m.group(1).upper(), humanized)


__all__ = [
    "constant_name",
    "slugify",
    "underscore",
    "humanize",
    "titleize",
]
