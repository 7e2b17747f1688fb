"""Type expression parsers."""

from .type_expressions import (
    BLOB_BYTE_CAPACITY,
    GENERIC_GEOMETRY_PATTERN,
    GEOMETRY_PATTERNS,
    SIGNED_INTEGER_RANGES,
    TEXT_LENGTHS,
    UNSIGNED_INTEGER_RANGES,
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

__all__ = [
    "BLOB_BYTE_CAPACITY",
    "GENERIC_GEOMETRY_PATTERN",
    "GEOMETRY_PATTERNS",
    "SIGNED_INTEGER_RANGES",
    "TEXT_LENGTHS",
    "UNSIGNED_INTEGER_RANGES",
    "base_type_name",
    "blob_capacity",
    "declared_length",
    "enum_values",
    "geometry_pattern",
    "geometry_subtype",
    "integer_range",
    "is_tinyint_boolean",
    "is_unsigned",
]
