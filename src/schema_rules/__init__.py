"""Validation rule generation from relational table schemas."""

__version__ = "0.1.0"
