"""Tests for the tabular payload overview."""

from parsed_json.inspector import parse
from parsed_json.summary import KEY_TABLE_COLUMNS, json_type_name, key_table


def test_key_table_rows():
    doc = parse('{"name": "Alice", "tags": ["a", "b"], "meta": {"age": 30, "vip": null}}')

    df = key_table(doc)

    assert list(df.columns) == KEY_TABLE_COLUMNS
    assert list(df["Key"]) == ["name", "tags", "meta"]
    assert list(df["Type"]) == ["string", "array", "object"]
    assert list(df["Leaves"]) == [1, 2, 2]


def test_key_table_empty_for_non_object_root():
    df = key_table(parse("[1, 2]"))

    assert df.empty
    assert list(df.columns) == KEY_TABLE_COLUMNS


def test_json_type_names():
    assert json_type_name(True) == "boolean"
    assert json_type_name(1) == "integer"
    assert json_type_name(1.5) == "number"
    assert json_type_name(None) == "null"
