from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

_BULLET_CHARS = "•◦▪▫●○■□◆◇▶►-–—*·"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_CHARS)}]|(?:\d+[\.\)]))\s+")
_LIST_SPLIT_RE = re.compile(r"[\n,;]")
# Entries (roles, degrees, certificates, duties) contain commas of their own.
_ENTRY_SPLIT_RE = re.compile(r"\n")
_ITEM_TEXT_KEYS = ("name", "title", "text", "value", "skill")


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def pick(mapping: Mapping[str, Any], *keys: str) -> Any:
    """Return the value of the first key present with a non-null value."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


def as_mapping(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    return {}


def clean_text(value: Any) -> str | None:
    """Coerce an extracted scalar to text.

    ``None`` and unusable values stay ``None``; a provided empty string stays ``""``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return normalize_line(value)
    if isinstance(value, (int, float)):
        return str(value)
    return None


def as_sequence(value: Any, *, entries: bool = False) -> tuple[Any, ...]:
    """Coerce a list-like value to a tuple, splitting strings into items.

    Short items (skills, requirements) split on newlines, commas and semicolons;
    with ``entries=True`` only line breaks separate items.
    """
    if isinstance(value, (list, tuple)):
        return tuple(value)
    if isinstance(value, str):
        splitter = _ENTRY_SPLIT_RE if entries else _LIST_SPLIT_RE
        return tuple(strip_bullet_prefix(part) for part in splitter.split(value))
    return ()


def _item_text(item: Any) -> str | None:
    if isinstance(item, Mapping):
        return clean_text(pick(item, *_ITEM_TEXT_KEYS))
    return clean_text(item)


def text_items(value: Any, *, entries: bool = False) -> tuple[str, ...]:
    items: list[str] = []
    for item in as_sequence(value, entries=entries):
        text = _item_text(item)
        if text:
            items.append(text)
    return tuple(items)


def unique_items(items: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        key = item.casefold()
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return tuple(out)
