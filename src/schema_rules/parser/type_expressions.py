"""Parsers for raw column type expressions.

Every parser here is total: a type expression that does not match the
expected shape yields ``None`` (or an empty value) instead of raising, so a
malformed ``enum(...)`` or geometry declaration only drops the sub-rule that
depends on it.
"""

from __future__ import annotations

import re

_PAREN_PATTERN = re.compile(r"\((.*?)\)")
_ENUM_PATTERN = re.compile(r"enum\s*\((.*?)\)", re.IGNORECASE)
_BASE_TYPE_PATTERN = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)")

TEXT_LENGTHS: dict[str, int] = {
    "tinytext": 255,
    "text": 65535,
    "mediumtext": 16777215,
    "longtext": 4294967295,
}

SIGNED_INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "tinyint": (-128, 127),
    "smallint": (-32768, 32767),
    "mediumint": (-8388608, 8388607),
    "int": (-2147483648, 2147483647),
    "integer": (-2147483648, 2147483647),
    "serial": (-2147483648, 2147483647),
    "bigint": (-9223372036854775808, 9223372036854775807),
}

UNSIGNED_INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "tinyint": (0, 255),
    "smallint": (0, 65535),
    "mediumint": (0, 16777215),
    "int": (0, 4294967295),
    "integer": (0, 4294967295),
    "bigint": (0, 18446744073709551615),
}

BLOB_BYTE_CAPACITY: dict[str, int] = {
    "tinyblob": 255,
    "blob": 65535,
    "binary": 65535,
    "varbinary": 65535,
    "mediumblob": 16777215,
    "longblob": 4294967295,
}

# WKT shapes, rendered in the validator's ``regex:/.../flags`` notation.
GEOMETRY_PATTERNS: dict[str, str] = {
    "point": r"/^POINT\s?\(\s?-?\d+(\.\d+)?\s+-?\d+(\.\d+)?\s?\)$/i",
    "linestring": r"/^LINESTRING\s?\((\s?-?\d+(\.\d+)?\s+-?\d+(\.\d+)?\s?,?)+\)$/i",
    "polygon": r"/^POLYGON\s?\(\(.+\)\)$/i",
    "multipoint": r"/^MULTIPOINT\s?\((.+)\)$/i",
    "multilinestring": r"/^MULTILINESTRING\s?\(\(.+\)\)$/i",
    "multipolygon": r"/^MULTIPOLYGON\s?\(\(\(.+\)\)\)$/i",
    "geometrycollection": r"/^GEOMETRYCOLLECTION\s?\((.+)\)$/i",
}

GENERIC_GEOMETRY_PATTERN = (
    r"/^(POINT|LINESTRING|POLYGON|MULTIPOINT|MULTILINESTRING|MULTIPOLYGON|GEOMETRYCOLLECTION)"
    r"\s?\(.*\)$/i"
)


def base_type_name(raw_type: str) -> str:
    """Returns the lower-cased leading type keyword, e.g. ``varchar`` for ``VARCHAR(255)``."""
    matched = _BASE_TYPE_PATTERN.match(raw_type)
    if matched is None:
        return ""
    return matched.group(1).lower()


def declared_length(type_name: str, raw_type: str) -> int | None:
    """Returns the maximum character length of a string column.

    ``varchar``/``char`` read the parenthesized width of ``raw_type``; the text
    family uses fixed capacities. Anything else, or a non-numeric width, is
    ``None``.
    """
    normalized = type_name.lower()
    if normalized.startswith("varchar") or normalized.startswith("char"):
        matched = _PAREN_PATTERN.search(raw_type)
        if matched is None:
            return None
        width = matched.group(1).strip()
        if not width.isdigit():
            return None
        return int(width)
    return TEXT_LENGTHS.get(normalized)


def is_unsigned(raw_type: str) -> bool:
    return "unsigned" in raw_type.lower()


def is_tinyint_boolean(type_name: str, raw_type: str) -> bool:
    """``tinyint(1)`` is the conventional MySQL spelling of a boolean."""
    return type_name == "tinyint" and "(1)" in raw_type


def integer_range(type_name: str, raw_type: str) -> tuple[int, int] | None:
    ranges = UNSIGNED_INTEGER_RANGES if is_unsigned(raw_type) else SIGNED_INTEGER_RANGES
    return ranges.get(type_name.lower())


def enum_values(raw_type: str) -> tuple[str, ...] | None:
    """Extracts the literal members of ``enum('a','b')``.

    Returns ``None`` when no parenthesized member list is present.
    """
    matched = _ENUM_PATTERN.search(raw_type)
    if matched is None:
        return None
    return tuple(item.strip() for item in matched.group(1).replace("'", "").split(","))


def geometry_subtype(raw_type: str) -> str | None:
    """Returns the spatial type keyword preceding any parenthesis, lower-cased."""
    prefix = raw_type.split("(", 1)[0].strip()
    if not prefix:
        return None
    return prefix.split()[0].lower()


def geometry_pattern(raw_type: str) -> str:
    subtype = geometry_subtype(raw_type)
    if subtype is None:
        return GENERIC_GEOMETRY_PATTERN
    return GEOMETRY_PATTERNS.get(subtype, GENERIC_GEOMETRY_PATTERN)


def blob_capacity(type_name: str) -> int | None:
    return BLOB_BYTE_CAPACITY.get(type_name.lower())
