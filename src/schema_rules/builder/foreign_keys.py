"""Foreign key annotation by ``<singular>_id`` naming convention."""

from __future__ import annotations

from collections.abc import Callable
import re

from schema_rules.common import Rule

FOREIGN_KEY_SUFFIX = "_id"

_IRREGULAR_PLURALS = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "mouse": "mice",
    "goose": "geese",
    "foot": "feet",
    "tooth": "teeth",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "criterion": "criteria",
    "analysis": "analyses",
}

_UNCOUNTABLE = frozenset(
    {
        "audio",
        "data",
        "equipment",
        "feedback",
        "fish",
        "information",
        "media",
        "metadata",
        "news",
        "series",
        "sheep",
        "species",
        "staff",
    }
)

_ES_SUFFIX_PATTERN = re.compile(r"(s|sh|ch|x|z)$")
_Y_SUFFIX_PATTERN = re.compile(r"[^aeiou]y$")


def pluralize(word: str) -> str:
    """English plural of a snake_case word; only the last segment is inflected."""
    if not word:
        return word

    head, separator, last = word.rpartition("_")
    lowered = last.lower()

    if lowered in _UNCOUNTABLE:
        plural = last
    elif lowered in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lowered]
    elif _Y_SUFFIX_PATTERN.search(lowered):
        plural = last[:-1] + "ies"
    elif _ES_SUFFIX_PATTERN.search(lowered):
        plural = last + "es"
    else:
        plural = last + "s"

    return f"{head}{separator}{plural}"


def referenced_table(column_name: str) -> str | None:
    """``user_id`` -> ``users``; None for names without the suffix."""
    if not column_name.endswith(FOREIGN_KEY_SUFFIX):
        return None
    stem = column_name[: -len(FOREIGN_KEY_SUFFIX)]
    if not stem:
        return None
    return pluralize(stem)


class ForeignKeyAnnotator:
    """Appends ``exists:<table>,id`` when the conventionally named table exists."""

    def __init__(self, table_exists: Callable[[str], bool]) -> None:
        self._table_exists = table_exists

    def annotate(self, column_name: str, rules: list[Rule]) -> list[Rule]:
        table = referenced_table(column_name)
        if table is None or not self._table_exists(table):
            return rules
        return [*rules, Rule.of("exists", table, "id")]
