"""Generator configuration models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Literal

MimesMode = Literal["replace", "merge"]

DEFAULT_MIMES: tuple[str, ...] = ("jpeg", "png", "jpg", "gif", "svg")

DEFAULT_IMAGE_COLUMN_NAMES: tuple[str, ...] = (
    "image",
    "photo",
    "avatar",
    "thumbnail",
    "picture",
    "logo",
    "icon",
    "cover",
    "background",
    "banner",
)

# Short list consulted alongside the configurable names when classifying file columns.
FILE_IMAGE_COLUMN_NAMES: tuple[str, ...] = ("image", "avatar", "photo", "picture")

IMAGE_DEFAULT_MAX_SIZE_KB = 2048


@dataclass(frozen=True)
class FileRuleConfig:
    """Settings for binary/file columns.

    Setters return a new instance; a configuration value is never mutated
    once a generation run has started.
    """

    max_size_kb: int = 0
    mimes: tuple[str, ...] = DEFAULT_MIMES
    image_column_names: tuple[str, ...] = DEFAULT_IMAGE_COLUMN_NAMES

    def set_max_size_kb(self, size: int) -> FileRuleConfig:
        if size < 0:
            raise ValueError(f"max size must not be negative: {size}")
        return replace(self, max_size_kb=int(size))

    def set_allowed_mime_types(
        self, mimes: Iterable[str], mode: MimesMode = "replace"
    ) -> FileRuleConfig:
        incoming = tuple(str(item).strip() for item in mimes if str(item).strip())
        if mode == "replace":
            return replace(self, mimes=incoming)
        if mode == "merge":
            merged = list(self.mimes)
            merged.extend(item for item in incoming if item not in merged)
            return replace(self, mimes=tuple(merged))
        raise ValueError(f"unsupported mimes mode: {mode}")

    def add_recognized_image_column_name(self, name: str) -> FileRuleConfig:
        token = name.strip().lower()
        if not token or token in self.image_column_names:
            return self
        return replace(self, image_column_names=self.image_column_names + (token,))

    def is_image_column(self, column_name: str) -> bool:
        """Substring match against both the configurable and the short image name lists."""
        lowered = column_name.lower()
        return any(
            token in lowered for token in self.image_column_names + FILE_IMAGE_COLUMN_NAMES
        )

    def matches_image_name(self, column_name: str) -> bool:
        """Substring match against the configurable image name list only."""
        lowered = column_name.lower()
        return any(token in lowered for token in self.image_column_names)


@dataclass(frozen=True)
class GeneratorConfig:
    """Generator settings (configs/generator/default.yaml)."""

    file_rules: FileRuleConfig = field(default_factory=FileRuleConfig)
    ignore_columns: tuple[str, ...] = ()
    custom_rules: Mapping[str, Mapping[str, object]] = field(default_factory=dict)

    def custom_rules_for(self, table: str) -> Mapping[str, object]:
        return self.custom_rules.get(table, {})

    def with_file_rules(self, file_rules: FileRuleConfig) -> GeneratorConfig:
        return replace(self, file_rules=file_rules)
