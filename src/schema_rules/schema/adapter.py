"""Schema introspector contracts and default implementations."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import closing
import logging
from pathlib import Path
import sqlite3
from typing import Any, Protocol

from schema_rules.common import ColumnDescriptor, IndexInfo, SchemaLookupError, UserInputError
from schema_rules.parser import base_type_name
from schema_rules.schema.snapshot import load_schema_snapshot

logger = logging.getLogger(__name__)

_SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}
_SNAPSHOT_SUFFIXES = {".yaml", ".yml", ".json"}


class SchemaIntrospector(Protocol):
    """Read-only access to table metadata."""

    def list_columns(self, table: str) -> list[str]:
        ...

    def get_column_details(self, table: str) -> list[ColumnDescriptor]:
        ...

    def get_indexes(self, table: str) -> list[IndexInfo]:
        ...

    def table_exists(self, table: str) -> bool:
        ...


class SnapshotSchemaIntrospector:
    """Serves metadata from an in-memory ``{table: {columns, indexes}}`` mapping."""

    def __init__(self, tables: Mapping[str, Mapping[str, Any]]) -> None:
        self._tables = {str(name): raw for name, raw in tables.items()}

    @classmethod
    def from_file(cls, path: Path) -> SnapshotSchemaIntrospector:
        return cls(load_schema_snapshot(path))

    def list_columns(self, table: str) -> list[str]:
        return [column.name for column in self.get_column_details(table)]

    def get_column_details(self, table: str) -> list[ColumnDescriptor]:
        raw = self._require_table(table)
        return [ColumnDescriptor.from_details(item) for item in raw.get("columns", [])]

    def get_indexes(self, table: str) -> list[IndexInfo]:
        raw = self._require_table(table)
        return [IndexInfo.from_details(item) for item in raw.get("indexes", [])]

    def table_exists(self, table: str) -> bool:
        return table in self._tables

    def _require_table(self, table: str) -> Mapping[str, Any]:
        raw = self._tables.get(table)
        if raw is None:
            raise SchemaLookupError(f"Table not found in schema snapshot: {table}")
        return raw


class SqliteSchemaIntrospector:
    """Reads metadata from a SQLite database through PRAGMA queries."""

    def __init__(self, db_path: Path) -> None:
        if not db_path.exists():
            raise UserInputError(f"DB file not found: {db_path}")
        self._db_path = db_path

    def list_columns(self, table: str) -> list[str]:
        return [column.name for column in self.get_column_details(table)]

    def get_column_details(self, table: str) -> list[ColumnDescriptor]:
        rows = self._table_info(table)
        return [
            ColumnDescriptor(
                name=str(row["name"]),
                raw_type=str(row["type"] or ""),
                type_name=base_type_name(str(row["type"] or "")),
                nullable=not row["notnull"] and not row["pk"],
            )
            for row in rows
        ]

    def get_indexes(self, table: str) -> list[IndexInfo]:
        rows = self._table_info(table)
        indexes: list[IndexInfo] = []

        for index_row in self._query(f"PRAGMA index_list({_quote(table)})"):
            index_name = str(index_row["name"])
            columns = tuple(
                str(info["name"])
                for info in self._query(f"PRAGMA index_info({_quote(index_name)})")
                if info["name"] is not None
            )
            indexes.append(
                IndexInfo(
                    columns=columns,
                    unique=bool(index_row["unique"]),
                    primary=index_row["origin"] == "pk",
                    name=index_name,
                )
            )

        # INTEGER PRIMARY KEY aliases the rowid and has no entry in index_list.
        if not any(index.primary for index in indexes):
            pk_rows = sorted((row for row in rows if row["pk"]), key=lambda row: row["pk"])
            if pk_rows:
                indexes.insert(
                    0,
                    IndexInfo(
                        columns=tuple(str(row["name"]) for row in pk_rows),
                        unique=True,
                        primary=True,
                        name="PRIMARY",
                    ),
                )
        return indexes

    def table_exists(self, table: str) -> bool:
        rows = self._query(
            "SELECT 1 FROM sqlite_master WHERE type IN ('table', 'view') AND name = ?",
            (table,),
        )
        return bool(rows)

    def _table_info(self, table: str) -> list[sqlite3.Row]:
        rows = self._query(f"PRAGMA table_info({_quote(table)})")
        if not rows:
            raise SchemaLookupError(f"Table not found in database: {table}")
        return rows

    def _query(self, sql: str, params: tuple[object, ...] = ()) -> list[sqlite3.Row]:
        try:
            with closing(sqlite3.connect(str(self._db_path))) as conn:
                conn.row_factory = sqlite3.Row
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise SchemaLookupError(f"Schema query failed on {self._db_path}: {exc}") from exc


class CachedSchemaIntrospector:
    """Memoizes lookups for the duration of one generation run."""

    def __init__(self, inner: SchemaIntrospector) -> None:
        self._inner = inner
        self._names: dict[str, list[str]] = {}
        self._columns: dict[str, list[ColumnDescriptor]] = {}
        self._indexes: dict[str, list[IndexInfo]] = {}
        self._exists: dict[str, bool] = {}

    def list_columns(self, table: str) -> list[str]:
        if table not in self._names:
            self._names[table] = list(self._inner.list_columns(table))
        return self._names[table]

    def get_column_details(self, table: str) -> list[ColumnDescriptor]:
        if table not in self._columns:
            self._columns[table] = list(self._inner.get_column_details(table))
        return self._columns[table]

    def get_indexes(self, table: str) -> list[IndexInfo]:
        if table not in self._indexes:
            self._indexes[table] = list(self._inner.get_indexes(table))
        return self._indexes[table]

    def table_exists(self, table: str) -> bool:
        if table not in self._exists:
            self._exists[table] = self._inner.table_exists(table)
        return self._exists[table]


def get_schema_introspector(schema_path: Path) -> SchemaIntrospector:
    """Picks an introspector by file suffix."""
    suffix = schema_path.suffix.lower()
    if suffix in _SQLITE_SUFFIXES:
        logger.debug("using sqlite introspector: %s", schema_path)
        return SqliteSchemaIntrospector(schema_path)
    if suffix in _SNAPSHOT_SUFFIXES:
        logger.debug("using snapshot introspector: %s", schema_path)
        return SnapshotSchemaIntrospector.from_file(schema_path)
    raise UserInputError(f"Unsupported schema source: {schema_path}")


def _quote(identifier: str) -> str:
    escaped = identifier.replace('"', '""')
    return f'"{escaped}"'
