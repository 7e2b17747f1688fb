"""Type expression parser tests."""

from __future__ import annotations

from schema_rules.parser import (
    GENERIC_GEOMETRY_PATTERN,
    GEOMETRY_PATTERNS,
    base_type_name,
    blob_capacity,
    declared_length,
    enum_values,
    geometry_pattern,
    geometry_subtype,
    integer_range,
    is_tinyint_boolean,
    is_unsigned,
)


def test_base_type_name_strips_width_and_modifiers() -> None:
    assert base_type_name("VARCHAR(255)") == "varchar"
    assert base_type_name("tinyint(1) unsigned") == "tinyint"
    assert base_type_name("bigint unsigned") == "bigint"
    assert base_type_name("") == ""


def test_declared_length_reads_parenthesized_width() -> None:
    assert declared_length("varchar", "varchar(255)") == 255
    assert declared_length("char", "char(2)") == 2


def test_declared_length_uses_text_capacities() -> None:
    assert declared_length("tinytext", "tinytext") == 255
    assert declared_length("text", "text") == 65535
    assert declared_length("mediumtext", "mediumtext") == 16777215
    assert declared_length("longtext", "longtext") == 4294967295


def test_declared_length_is_absent_without_width() -> None:
    assert declared_length("varchar", "varchar") is None
    assert declared_length("varchar", "varchar(max)") is None
    assert declared_length("json", "json") is None


def test_unsigned_and_tinyint_boolean_detection() -> None:
    assert is_unsigned("int(10) UNSIGNED")
    assert not is_unsigned("int(11)")
    assert is_tinyint_boolean("tinyint", "tinyint(1)")
    assert not is_tinyint_boolean("tinyint", "tinyint(4)")
    assert not is_tinyint_boolean("smallint", "smallint(1)")


def test_integer_range_by_signedness() -> None:
    assert integer_range("tinyint", "tinyint") == (-128, 127)
    assert integer_range("bigint", "bigint") == (-9223372036854775808, 9223372036854775807)
    assert integer_range("smallint", "smallint unsigned") == (0, 65535)
    assert integer_range("bigint", "bigint unsigned") == (0, 18446744073709551615)
    assert integer_range("serial", "serial unsigned") is None


def test_enum_values_extracts_members() -> None:
    assert enum_values("enum('draft','published','archived')") == (
        "draft",
        "published",
        "archived",
    )
    assert enum_values("ENUM('a', 'b')") == ("a", "b")


def test_enum_values_without_list_is_none() -> None:
    assert enum_values("enum") is None
    assert enum_values("varchar(10)") is None


def test_geometry_subtype_and_pattern() -> None:
    assert geometry_subtype("POINT") == "point"
    assert geometry_subtype("polygon(4326)") == "polygon"
    assert geometry_subtype("") is None
    assert geometry_pattern("point") == GEOMETRY_PATTERNS["point"]
    assert geometry_pattern("geometry") == GENERIC_GEOMETRY_PATTERN
    assert geometry_pattern("") == GENERIC_GEOMETRY_PATTERN


def test_blob_capacity_table() -> None:
    assert blob_capacity("tinyblob") == 255
    assert blob_capacity("varbinary") == 65535
    assert blob_capacity("longblob") == 4294967295
    assert blob_capacity("varchar") is None
