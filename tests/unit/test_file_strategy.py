"""File/blob strategy tests."""

from __future__ import annotations

import pytest

from schema_rules.common import ColumnDescriptor
from schema_rules.rules import FileRuleConfig
from schema_rules.strategies import BlobRuleStrategy, FileSizeState

DEFAULT_MIMES = "mimes:jpeg,png,jpg,gif,svg"


def _column(name: str, raw_type: str, nullable: bool = False) -> ColumnDescriptor:
    return ColumnDescriptor.from_details({"name": name, "type": raw_type, "nullable": nullable})


def _rules(strategy: BlobRuleStrategy, column: ColumnDescriptor, is_update: bool = False) -> list[str]:
    return [str(rule) for rule in strategy.generate("posts", column, is_update)]


def test_applies_to_binary_types_and_image_names() -> None:
    strategy = BlobRuleStrategy()
    assert strategy.can_apply(_column("payload", "longblob"))
    assert strategy.can_apply(_column("raw", "varbinary(16)"))
    assert strategy.can_apply(_column("avatar", "varchar(255)"))
    assert strategy.can_apply(_column("header_banner", "varchar(255)"))
    assert not strategy.can_apply(_column("title", "varchar(255)"))


def test_non_image_blob_size_derives_from_capacity() -> None:
    strategy = BlobRuleStrategy()
    assert _rules(strategy, _column("payload", "mediumblob")) == [
        "required",
        "file",
        DEFAULT_MIMES,
        "max:16383",
    ]
    assert _rules(strategy, _column("archive", "longblob", nullable=True)) == [
        "nullable",
        "file",
        DEFAULT_MIMES,
        "max:4194303",
    ]


def test_update_context_is_always_nullable() -> None:
    strategy = BlobRuleStrategy()
    assert _rules(strategy, _column("image", "blob"), is_update=True) == [
        "nullable",
        "image",
        DEFAULT_MIMES,
        "max:2048",
    ]


def test_image_detection_sets_run_wide_max_size() -> None:
    state = FileSizeState()
    strategy = BlobRuleStrategy(FileRuleConfig(), state)

    assert _rules(strategy, _column("photo", "blob")) == [
        "required",
        "image",
        DEFAULT_MIMES,
        "max:2048",
    ]
    assert state.max_size_kb == 2048
    assert _rules(strategy, _column("attachment", "longblob")) == [
        "required",
        "file",
        DEFAULT_MIMES,
        "max:2048",
    ]


def test_configured_max_size_is_used() -> None:
    strategy = BlobRuleStrategy(FileRuleConfig().set_max_size_kb(512))
    assert _rules(strategy, _column("attachment", "blob")) == [
        "required",
        "file",
        DEFAULT_MIMES,
        "max:512",
    ]


def test_configured_mimes_replace_and_merge() -> None:
    replaced = FileRuleConfig().set_allowed_mime_types(["pdf", "docx"])
    merged = FileRuleConfig().set_allowed_mime_types(["webp", "png"], mode="merge")

    assert _rules(BlobRuleStrategy(replaced), _column("document", "blob"))[2] == "mimes:pdf,docx"
    assert (
        _rules(BlobRuleStrategy(merged), _column("document", "blob"))[2]
        == "mimes:jpeg,png,jpg,gif,svg,webp"
    )


def test_added_image_column_name_is_recognized() -> None:
    config = FileRuleConfig().add_recognized_image_column_name("Poster")
    strategy = BlobRuleStrategy(config)

    assert strategy.can_apply(_column("poster", "varchar(255)"))
    assert _rules(strategy, _column("poster", "varchar(255)", nullable=True)) == [
        "nullable",
        "image",
        DEFAULT_MIMES,
        "max:2048",
    ]


def test_file_rule_config_setters_return_new_values() -> None:
    config = FileRuleConfig()
    updated = config.set_max_size_kb(100)

    assert config.max_size_kb == 0
    assert updated.max_size_kb == 100
    assert config.add_recognized_image_column_name("image") is config

    with pytest.raises(ValueError):
        config.set_max_size_kb(-1)
    with pytest.raises(ValueError):
        config.set_allowed_mime_types(["pdf"], mode="append")  # type: ignore[arg-type]
