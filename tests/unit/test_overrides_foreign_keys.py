"""Override resolver and foreign key annotation tests."""

from __future__ import annotations

import pytest

from schema_rules.builder import (
    ForeignKeyAnnotator,
    OverrideResolver,
    parse_override,
    pluralize,
    referenced_table,
)
from schema_rules.common import OverrideFormatError, Rule


def test_parse_override_from_pipe_string() -> None:
    rules = parse_override("required| string |max:50||")
    assert [str(rule) for rule in rules] == ["required", "string", "max:50"]


def test_parse_override_from_list() -> None:
    rules = parse_override(["nullable", Rule("email"), "regex:/^a|b$/"])
    assert [str(rule) for rule in rules] == ["nullable", "email", "regex:/^a|b$/"]


def test_parse_override_rejects_other_values() -> None:
    with pytest.raises(OverrideFormatError):
        parse_override(42)
    with pytest.raises(OverrideFormatError):
        parse_override({"rule": "required"})


def test_override_resolver_filters_ignored_unknown_and_malformed_entries() -> None:
    resolver = OverrideResolver(
        {
            "posts": {
                "title": "required|string|max:100",
                "secret": "required",
                "ghost": "required",
                "status": 7,
            }
        }
    )

    resolved = resolver.resolve("posts", ["title", "secret", "status"], ignore_columns={"secret"})

    assert list(resolved.rules) == ["title"]
    assert [str(rule) for rule in resolved.rules_for("title")] == [
        "required",
        "string",
        "max:100",
    ]
    assert "status" not in resolved
    assert len(resolved.warnings) == 2
    assert any("posts.ghost" in item for item in resolved.warnings)
    assert any("posts.status" in item for item in resolved.warnings)


def test_override_resolver_without_table_entries() -> None:
    resolved = OverrideResolver({"users": {"email": "email"}}).resolve("posts", ["title"])
    assert resolved.rules == {}
    assert resolved.warnings == ()


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("user", "users"),
        ("category", "categories"),
        ("status", "statuses"),
        ("box", "boxes"),
        ("branch", "branches"),
        ("day", "days"),
        ("person", "people"),
        ("child", "children"),
        ("order_item", "order_items"),
        ("media", "media"),
    ],
)
def test_pluralize(word: str, expected: str) -> None:
    assert pluralize(word) == expected


def test_referenced_table_requires_suffix() -> None:
    assert referenced_table("user_id") == "users"
    assert referenced_table("parent_category_id") == "parent_categories"
    assert referenced_table("identity") is None
    assert referenced_table("_id") is None


def test_foreign_key_annotator_appends_exists_rule() -> None:
    annotator = ForeignKeyAnnotator(lambda table: table == "users")

    annotated = annotator.annotate("user_id", [Rule("required"), Rule("integer")])
    assert [str(rule) for rule in annotated] == ["required", "integer", "exists:users,id"]

    untouched = [Rule("nullable")]
    assert annotator.annotate("team_id", untouched) == untouched
    assert annotator.annotate("title", untouched) == untouched
