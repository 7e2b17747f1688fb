"""Custom exceptions for command exit mapping."""

from __future__ import annotations


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class SchemaLookupError(UserInputError):
    """Raised when table or column metadata cannot be resolved."""


class OverrideFormatError(ValueError):
    """Raised when a custom rule entry is neither a string nor a list."""
