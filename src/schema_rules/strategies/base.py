"""Rule strategy contract and shared helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.common.models import NULLABLE, REQUIRED


@dataclass
class FileSizeState:
    """Max file size (KB) shared by the file strategy within one generation run.

    Detecting an image column sets the image default, and every later file
    column of the same run observes it.
    """

    max_size_kb: int = 0


class RuleStrategy(ABC):
    """Classifies one family of column types and emits its rules."""

    name: str = ""

    @abstractmethod
    def can_apply(self, column: ColumnDescriptor) -> bool:
        ...

    @abstractmethod
    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def nullability(column: ColumnDescriptor) -> Rule:
    return NULLABLE if column.nullable else REQUIRED
