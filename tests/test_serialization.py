"""
Tests for serialization and deserialization of report trees.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `treereport.serialization`.
"""

import pytest
from treereport.examples import build_example_queries, build_example_run
from treereport.model import Composite, composite, leaf, row
from treereport.reporter import report
from treereport.serialization import (
    column_from_dict,
    column_to_dict,
    report_from_json,
    report_from_yaml,
    report_to_json,
    report_to_yaml,
)


def build_sample_report() -> Composite:
    return composite(
        row(leaf("Date"), leaf("2024-03-01")),
        row(leaf("Readings"), composite(row(leaf(12.5)), row(leaf(13)))),
        row(leaf("Empty"), Composite(())),
    )


def test_dict_shape():
    d = column_to_dict(composite(row(leaf("a"), composite(row(leaf(1))))))
    assert d == {
        "type": "composite",
        "rows": [[
            {"type": "leaf", "value": "a"},
            {"type": "composite", "rows": [[{"type": "leaf", "value": 1}]]},
        ]],
    }


def test_dict_roundtrip():
    tree = build_sample_report()
    assert column_from_dict(column_to_dict(tree)) == tree


def test_json_roundtrip():
    tree = build_sample_report()
    before = column_to_dict(tree)
    restored = report_from_json(report_to_json(tree))
    after = column_to_dict(restored)
    assert before == after


def test_yaml_roundtrip():
    tree = build_sample_report()
    before = column_to_dict(tree)
    restored = report_from_yaml(report_to_yaml(tree))
    after = column_to_dict(restored)
    assert before == after


def test_reported_tree_roundtrip():
    tree = report(build_example_run(), *build_example_queries())
    assert report_from_yaml(report_to_yaml(tree)) == tree


def test_unknown_dict_type():
    with pytest.raises(TypeError):
        column_from_dict({"type": "chart"})
