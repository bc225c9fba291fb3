"""Declarative building blocks for the field completeness catalogs.

A catalog is a tuple of checks. Each check carries the static metadata of the
``MissingField`` it emits plus a presence predicate. ``FieldCheck`` tests the
document once; ``EntryCheck`` tests every element of a sequence field and
emits one finding per failing element.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable

from app.core.config.scoring import get_scoring_value
from app.schemas.normalized import Category, Importance

CATALOG_VERSION = "2024.1"


@dataclass(frozen=True)
class FieldCheck:
    field: str
    category: Category
    importance: Importance
    penalty: int
    minutes: int
    reason: str
    action: str
    present: Callable[[Any], bool]
    example: str | None = None
    templates: tuple[str, ...] = ()
    check_id: str | None = None

    @property
    def id(self) -> str:
        return self.check_id or self.field


@dataclass(frozen=True)
class EntryCheck:
    sequence: str
    field: str
    category: Category
    importance: Importance
    penalty: int
    minutes: int
    reason: str
    action: str
    present: Callable[[Any], bool]
    example: str | None = None
    templates: tuple[str, ...] = ()

    @property
    def id(self) -> str:
        return f"{self.sequence}[].{self.field}"

    def entries(self, document: Any) -> Sequence[Any]:
        return getattr(document, self.sequence)

    def path(self, index: int) -> str:
        return f"{self.sequence}[{index}].{self.field}"


Check = FieldCheck | EntryCheck


def has_text(value: str | None) -> bool:
    return bool(value and value.strip())


def has_items(value: Sequence[Any]) -> bool:
    return len(value) > 0


def threshold(name: str, default: int) -> int:
    return int(get_scoring_value(f"missing_data.thresholds.{name}", default))


def format_minutes(minutes: int) -> str:
    if minutes == 1:
        return "1 minute"
    return f"{minutes} minutes"
