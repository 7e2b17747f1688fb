"""Generator configuration module."""

from .loader import load_generator_config
from .models import (
    DEFAULT_IMAGE_COLUMN_NAMES,
    DEFAULT_MIMES,
    FILE_IMAGE_COLUMN_NAMES,
    IMAGE_DEFAULT_MAX_SIZE_KB,
    FileRuleConfig,
    GeneratorConfig,
)

__all__ = [
    "DEFAULT_IMAGE_COLUMN_NAMES",
    "DEFAULT_MIMES",
    "FILE_IMAGE_COLUMN_NAMES",
    "IMAGE_DEFAULT_MAX_SIZE_KB",
    "FileRuleConfig",
    "GeneratorConfig",
    "load_generator_config",
]
