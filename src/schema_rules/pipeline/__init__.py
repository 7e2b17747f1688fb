"""Pipeline module."""

from .service import ColumnInspection, load_config, run_generate, run_inspect

__all__ = ["ColumnInspection", "load_config", "run_generate", "run_inspect"]
