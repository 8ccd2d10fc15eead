"""
Tests for the report tree model.

These tests verify:
    - Leaf/Composite construction
    - Row non-emptiness
    - extract() dispatch
    - Immutability
"""

import dataclasses

import pytest
from treereport.errors import ConstructionError, FormatInvariantViolation
from treereport.model import (
    Column,
    Composite,
    Endpoint,
    Leaf,
    Row,
    composite,
    extract,
    leaf,
    row,
)


class TestEndpoint:
    """Test Endpoint payloads."""

    def test_text_is_str_of_value(self):
        """Rendered text is str(value)."""
        assert Endpoint(12.5).text == "12.5"
        assert Endpoint(None).text == "None"

    def test_value_is_kept_as_is(self):
        """The original object is carried, not its text."""
        value = object()
        assert Endpoint(value).value is value


class TestRow:
    """Test Row construction."""

    def test_row_with_columns(self):
        r = Row((leaf("a"), leaf("b")))
        assert len(r) == 2

    def test_row_accepts_list(self):
        """Columns are normalized to a tuple."""
        r = Row([leaf("a")])
        assert isinstance(r.columns, tuple)

    def test_empty_row_is_construction_error(self):
        """A Row with zero columns is a programming error."""
        with pytest.raises(ConstructionError):
            Row(())

    def test_row_rejects_non_columns(self):
        with pytest.raises(ConstructionError):
            Row(("not a column",))


class TestComposite:
    """Test Composite columns."""

    def test_empty_composite_is_legal(self):
        """Zero rows is what an unmatched iteration produces."""
        c = Composite(())
        assert c.rows == ()
        assert c.width == 0

    def test_width_is_widest_row(self):
        c = composite(row(leaf("a")), row(leaf("b"), leaf("c"), leaf("d")))
        assert c.width == 3

    def test_composite_rejects_non_rows(self):
        with pytest.raises(ConstructionError):
            Composite([leaf("a")])

    def test_structural_equality(self):
        """Trees with the same shape and values compare equal."""
        a = composite(row(leaf("x"), composite(row(leaf(1)))))
        b = composite(row(leaf("x"), composite(row(leaf(1)))))
        assert a == b

    def test_frozen(self):
        c = composite(row(leaf("x")))
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.rows = ()


class TestExtract:
    """Test the extract() traversal primitive."""

    def test_leaf_dispatch(self):
        result = extract(leaf("v"), lambda rows: "composite", lambda value: f"leaf:{value}")
        assert result == "leaf:v"

    def test_composite_dispatch(self):
        c = composite(row(leaf("a")), row(leaf("b")))
        result = extract(c, lambda rows: len(rows), lambda value: -1)
        assert result == 2

    def test_only_one_handler_runs(self):
        calls = []
        extract(leaf(1), lambda rows: calls.append("composite"), lambda value: calls.append("leaf"))
        assert calls == ["leaf"]

    def test_unknown_column_type(self):
        """A Column that is neither variant violates the model."""

        class Stray(Column):
            pass

        with pytest.raises(FormatInvariantViolation):
            extract(Stray(), lambda rows: None, lambda value: None)
