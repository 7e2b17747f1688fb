from pathlib import Path
import sqlite3

from schema_rules.__main__ import main
from schema_rules.pipeline import run_generate


def test_pipeline_generate_smoke(tmp_path: Path) -> None:
    schema_path = Path(__file__).resolve().parents[2] / "fixtures" / "schema" / "blog.yaml"
    out_dir = tmp_path / "rules"

    code = main(
        [
            "generate",
            "--schema",
            str(schema_path),
            "--table",
            "users",
            "--out",
            str(out_dir),
            "--format",
            "yaml",
        ]
    )

    assert code == 0
    assert (out_dir / "users_rules.yaml").exists()


def test_pipeline_generate_from_sqlite(tmp_path: Path) -> None:
    db_path = tmp_path / "shop.db"
    with sqlite3.connect(str(db_path)) as conn:
        conn.executescript(
            """
            CREATE TABLE customers (id INTEGER PRIMARY KEY, name VARCHAR(80) NOT NULL);
            CREATE TABLE orders (
                id INTEGER PRIMARY KEY,
                customer_id INTEGER NOT NULL,
                total_amount DECIMAL(10,2) NOT NULL,
                quantity INTEGER NOT NULL,
                note TEXT,
                receipt BLOB,
                shipped_on DATE,
                created_at TIMESTAMP,
                updated_at TIMESTAMP
            );
            """
        )

    outcome = run_generate(
        schema_path=db_path,
        table="orders",
        output_path=tmp_path / "out",
        report_format="json",
    )

    store = outcome.rule_sets.store.as_strings()
    assert store["customer_id"][-1] == "exists:customers,id"
    assert store["total_amount"] == ["required", "numeric", "min:0"]
    assert store["quantity"] == ["required", "integer", "min:0"]
    assert store["note"] == ["nullable", "string", "max:65535"]
    assert store["receipt"] == ["nullable", "file", "mimes:jpeg,png,jpg,gif,svg", "max:63"]
    assert store["shipped_on"] == ["nullable", "date_format:Y-m-d"]
    assert outcome.output_files == (tmp_path / "out" / "orders_rules.json",)
    assert outcome.column_count == 6
