"""Binary/file column strategy."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.common.models import NULLABLE, REQUIRED
from schema_rules.parser import BLOB_BYTE_CAPACITY, blob_capacity
from schema_rules.rules import IMAGE_DEFAULT_MAX_SIZE_KB, FileRuleConfig

from .base import FileSizeState, RuleStrategy

BINARY_TYPES = frozenset(BLOB_BYTE_CAPACITY)


class BlobRuleStrategy(RuleStrategy):
    """Emits upload rules (``file``/``image``, ``mimes``, ``max``) for binary or image-named columns.

    Files are optional on update: the update context always yields
    ``nullable`` whatever the column declares.
    """

    name = "file"

    def __init__(
        self,
        file_rules: FileRuleConfig | None = None,
        size_state: FileSizeState | None = None,
    ) -> None:
        self._file_rules = file_rules or FileRuleConfig()
        self._size_state = size_state or FileSizeState(max_size_kb=self._file_rules.max_size_kb)

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in BINARY_TYPES or self._file_rules.is_image_column(column.name)

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        rules: list[Rule] = []

        if is_update or column.nullable:
            rules.append(NULLABLE)
        else:
            rules.append(REQUIRED)

        if self._file_rules.is_image_column(column.name):
            rules.append(Rule("image"))
            self._size_state.max_size_kb = IMAGE_DEFAULT_MAX_SIZE_KB
        else:
            rules.append(Rule("file"))

        if self._file_rules.mimes:
            rules.append(Rule.of("mimes", *self._file_rules.mimes))

        if self._size_state.max_size_kb > 0:
            rules.append(Rule.of("max", self._size_state.max_size_kb))
        else:
            capacity = blob_capacity(column.type_name)
            if capacity:
                rules.append(Rule.of("max", capacity // 1024))
        return rules
