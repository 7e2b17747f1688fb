"""Shared models and exceptions."""

from .exceptions import OverrideFormatError, SchemaLookupError, UserInputError
from .models import (
    ColumnDescriptor,
    GenerateOutcome,
    IndexInfo,
    Rule,
    RuleSet,
    RuleSetPair,
)

__all__ = [
    "ColumnDescriptor",
    "GenerateOutcome",
    "IndexInfo",
    "OverrideFormatError",
    "Rule",
    "RuleSet",
    "RuleSetPair",
    "SchemaLookupError",
    "UserInputError",
]
