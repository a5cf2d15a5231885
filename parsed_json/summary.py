"""
Tabular overview of a parsed payload, for display.
"""

from __future__ import annotations

import pandas as pd

from parsed_json.inspector import JSONInspector, count_leaves

KEY_TABLE_COLUMNS = ["Key", "Type", "Leaves"]

# JSON names for the types json.loads produces.
_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def json_type_name(value) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def key_table(inspector: JSONInspector) -> pd.DataFrame:
    """
    One row per top-level key: the key, its JSON type and its leaf count.

    Returns an empty frame (same columns) when the root is not an object.
    """
    root = inspector.root
    if not isinstance(root, dict):
        return pd.DataFrame(columns=KEY_TABLE_COLUMNS)

    rows = [
        {"Key": key, "Type": json_type_name(value), "Leaves": count_leaves(value)}
        for key, value in root.items()
    ]
    return pd.DataFrame(rows, columns=KEY_TABLE_COLUMNS)
