import json

from distle.edit_distance import build_table
from distle.feedback import feedback
from distle.report import format_table, write_json


def test_format_table_layout():
    text = format_table("ab", "ba", build_table("ab", "ba"))
    assert text.splitlines() == [
        "  ε b a",
        "ε 0 1 2",
        "a 1 1 1",
        "b 2 1 1",
    ]


def test_format_table_empty_strings():
    assert format_table("", "", build_table("", "")).splitlines() == ["  ε", "ε 0"]


def test_write_json(tmp_path):
    out = tmp_path / "fb.json"
    write_json(feedback("ab", "ba"), out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data == {"guess": "ab", "edit_distance": 1, "transforms": ["T"]}
