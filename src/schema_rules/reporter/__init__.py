"""Reporter module."""

from .service import REPORT_FORMATS, render_rule_sets, write_rule_sets

__all__ = ["REPORT_FORMATS", "render_rule_sets", "write_rule_sets"]
