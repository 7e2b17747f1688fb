"""Column rule strategies."""

from .base import FileSizeState, RuleStrategy, nullability
from .choice import EnumRuleStrategy, JsonRuleStrategy
from .file import BlobRuleStrategy
from .numeric import BooleanRuleStrategy, FloatRuleStrategy, IntegerRuleStrategy
from .registry import default_strategies
from .spatial import GeometryRuleStrategy
from .temporal import DateRuleStrategy, DateTimeRuleStrategy, TimestampRuleStrategy
from .text import StringRuleStrategy
from .unique import UniqueRuleStrategy

__all__ = [
    "BlobRuleStrategy",
    "BooleanRuleStrategy",
    "DateRuleStrategy",
    "DateTimeRuleStrategy",
    "EnumRuleStrategy",
    "FileSizeState",
    "FloatRuleStrategy",
    "GeometryRuleStrategy",
    "IntegerRuleStrategy",
    "JsonRuleStrategy",
    "RuleStrategy",
    "StringRuleStrategy",
    "TimestampRuleStrategy",
    "UniqueRuleStrategy",
    "default_strategies",
    "nullability",
]
