"""Shared data models for schema rule generation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from schema_rules.common.exceptions import SchemaLookupError
from schema_rules.parser import (
    base_type_name,
    declared_length,
    enum_values,
    geometry_subtype,
    is_unsigned,
)

Context = Literal["store", "update"]

# Keywords whose argument is a single opaque value rather than a comma list.
_OPAQUE_ARGUMENT_KEYWORDS = frozenset({"regex", "date_format"})

_TRUE_FLAGS = frozenset({"true", "yes", "y", "1"})
_FALSE_FLAGS = frozenset({"false", "no", "n", "0", ""})


def parse_flag(value: object, field_name: str) -> bool:
    """Reads a metadata flag from a bool, 0/1, or a yes/no style string."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_FLAGS:
            return True
        if lowered in _FALSE_FLAGS:
            return False
    raise SchemaLookupError(f"Invalid {field_name} flag: {value!r}")


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    raw_type: str
    type_name: str
    nullable: bool

    @classmethod
    def from_details(cls, details: Mapping[str, Any]) -> ColumnDescriptor:
        """Builds a descriptor from an introspection record (name/type/type_name/nullable)."""
        raw_type = str(details.get("type") or details.get("type_name") or "")
        type_name = str(details.get("type_name") or base_type_name(raw_type))
        return cls(
            name=str(details["name"]),
            raw_type=raw_type,
            type_name=type_name.strip().lower(),
            nullable=parse_flag(details.get("nullable", False), "nullable"),
        )

    @property
    def length(self) -> int | None:
        return declared_length(self.type_name, self.raw_type)

    @property
    def unsigned(self) -> bool:
        return is_unsigned(self.raw_type)

    @property
    def enum_values(self) -> tuple[str, ...] | None:
        return enum_values(self.raw_type)

    @property
    def geometry_type(self) -> str | None:
        return geometry_subtype(self.raw_type)


@dataclass(frozen=True)
class IndexInfo:
    columns: tuple[str, ...]
    unique: bool = False
    primary: bool = False
    name: str | None = None

    @classmethod
    def from_details(cls, details: Mapping[str, Any]) -> IndexInfo:
        primary = parse_flag(details.get("primary", False), "primary")
        return cls(
            columns=tuple(str(item) for item in details.get("columns", [])),
            unique=parse_flag(details.get("unique", False), "unique") or primary,
            primary=primary,
            name=details.get("name"),
        )


@dataclass(frozen=True)
class Rule:
    """A single validation constraint, e.g. ``required`` or ``max:255``."""

    keyword: str
    argument: str | None = None

    @classmethod
    def parse(cls, text: str) -> Rule:
        keyword, separator, argument = text.strip().partition(":")
        return cls(keyword=keyword, argument=argument if separator else None)

    @classmethod
    def of(cls, keyword: str, *params: object) -> Rule:
        if not params:
            return cls(keyword=keyword)
        return cls(keyword=keyword, argument=",".join(str(item) for item in params))

    @property
    def params(self) -> tuple[str, ...]:
        if self.argument is None:
            return ()
        if self.keyword in _OPAQUE_ARGUMENT_KEYWORDS:
            return (self.argument,)
        return tuple(self.argument.split(","))

    def __str__(self) -> str:
        if self.argument is None:
            return self.keyword
        return f"{self.keyword}:{self.argument}"


REQUIRED = Rule("required")
NULLABLE = Rule("nullable")


class RuleSet(Mapping[str, tuple[Rule, ...]]):
    """Column name -> ordered, de-duplicated rules for one context."""

    def __init__(self, context: Context, rules: Mapping[str, tuple[Rule, ...]] | None = None) -> None:
        self.context = context
        self._rules: dict[str, tuple[Rule, ...]] = dict(rules or {})

    def __getitem__(self, column: str) -> tuple[Rule, ...]:
        return self._rules[column]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(context={self.context!r}, rules={self.as_strings()!r})"

    def rules_for(self, column: str) -> tuple[Rule, ...]:
        return self._rules.get(column, ())

    def as_strings(self) -> dict[str, list[str]]:
        return {column: [str(rule) for rule in rules] for column, rules in self._rules.items()}


@dataclass(frozen=True)
class RuleSetPair:
    table: str
    store: RuleSet
    update: RuleSet
    warnings: tuple[str, ...] = ()

    def as_strings(self) -> dict[str, dict[str, list[str]]]:
        return {"store": self.store.as_strings(), "update": self.update.as_strings()}


@dataclass(frozen=True)
class GenerateOutcome:
    table: str
    rule_sets: RuleSetPair
    output_files: tuple[Path, ...] = ()
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def column_count(self) -> int:
        return len(set(self.rule_sets.store) | set(self.rule_sets.update))
