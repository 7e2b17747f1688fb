"""Schema introspection layer."""

from .adapter import (
    CachedSchemaIntrospector,
    SchemaIntrospector,
    SnapshotSchemaIntrospector,
    SqliteSchemaIntrospector,
    get_schema_introspector,
)
from .snapshot import load_schema_snapshot

__all__ = [
    "CachedSchemaIntrospector",
    "SchemaIntrospector",
    "SnapshotSchemaIntrospector",
    "SqliteSchemaIntrospector",
    "get_schema_introspector",
    "load_schema_snapshot",
]
