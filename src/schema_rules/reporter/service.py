"""Rule set rendering for JSON/YAML/Python outputs."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from schema_rules.common import RuleSet, RuleSetPair, UserInputError

REPORT_FORMATS = ("json", "yaml", "python")

_SUFFIXES = {"json": ".json", "yaml": ".yaml", "python": ".py"}

_PYTHON_HEADER = '''"""Validation rules generated from the `{table}` table."""

# Update rules may carry `unique:<table>,<column>,id`; the trailing `id` must be
# replaced with the id of the record being updated.
'''


def render_rule_sets(rule_sets: RuleSetPair, report_format: str) -> str:
    """Renders both contexts of a table into one document."""
    normalized_format = report_format.lower()
    payload = {"table": rule_sets.table, **rule_sets.as_strings()}

    if normalized_format == "json":
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    if normalized_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    if normalized_format == "python":
        return _render_python(rule_sets)
    raise UserInputError(f"Unsupported output format: {report_format}")


def write_rule_sets(
    rule_sets: RuleSetPair,
    output_dir: Path,
    report_format: str,
    name: str | None = None,
) -> Path:
    """Writes the rendered document to ``<output_dir>/<name><suffix>``."""
    content = render_rule_sets(rule_sets, report_format)

    output_dir.mkdir(parents=True, exist_ok=True)
    file_name = (name or f"{rule_sets.table}_rules") + _SUFFIXES[report_format.lower()]
    output_path = output_dir / file_name
    output_path.write_text(content, encoding="utf-8")
    return output_path


def _render_python(rule_sets: RuleSetPair) -> str:
    parts = [
        _PYTHON_HEADER.format(table=rule_sets.table),
        _python_mapping("STORE_RULES", rule_sets.store),
        _python_mapping("UPDATE_RULES", rule_sets.update),
    ]
    return "\n".join(parts)


def _python_mapping(variable: str, rule_set: RuleSet) -> str:
    if not rule_set:
        return f"{variable}: dict[str, list[str]] = {{}}\n"

    lines = [f"{variable}: dict[str, list[str]] = {{"]
    for column, rules in rule_set.as_strings().items():
        rendered = ", ".join(repr(rule) for rule in rules)
        lines.append(f"    {column!r}: [{rendered}],")
    lines.append("}")
    return "\n".join(lines) + "\n"
