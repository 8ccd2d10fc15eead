"""
Serialization helpers for report trees (Column, Row, Endpoint).

Provides JSON/YAML round-trip via an intermediate dict representation:

    {"type": "composite", "rows": [[<column>, ...], ...]}
    {"type": "leaf", "value": <value>}

Leaf values are passed through unchanged, so they must be
representable in the target format.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from treereport.model import Column, Composite, Endpoint, Leaf, Row


def column_to_dict(column: Column) -> Dict[str, Any]:
    if isinstance(column, Composite):
        return {
            "type": "composite",
            "rows": [[column_to_dict(child) for child in row.columns] for row in column.rows],
        }
    if isinstance(column, Leaf):
        return {"type": "leaf", "value": column.endpoint.value}
    raise TypeError(f"Unsupported Column type: {type(column)}")


def column_from_dict(d: Dict[str, Any]) -> Column:
    t = d.get("type")
    if t == "composite":
        rows = [Row(tuple(column_from_dict(child) for child in row)) for row in d.get("rows", [])]
        return Composite(rows)
    if t == "leaf":
        return Leaf(Endpoint(d.get("value")))
    raise TypeError(f"Unsupported column dict type: {t}")


def report_to_json(column: Column) -> str:
    return json.dumps(column_to_dict(column), sort_keys=True)


def report_from_json(s: str) -> Column:
    d = json.loads(s)
    return column_from_dict(d)


def report_to_yaml(column: Column) -> str:
    return yaml.safe_dump(column_to_dict(column))


def report_from_yaml(s: str) -> Column:
    d = yaml.safe_load(s)
    return column_from_dict(d)
