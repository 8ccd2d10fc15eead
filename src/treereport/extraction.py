"""
Interpreting helpers built on model.extract().

extract() dispatches one level. These helpers do the descent,
calling extract() at every level, for the common ways of pulling
values back out of a reported or parsed tree.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from treereport.model import Column, extract


def leaf_values(column: Column) -> List[Any]:
    """All leaf values, depth-first, left to right."""
    return extract(
        column,
        lambda rows: [value for row in rows for child in row.columns for value in leaf_values(child)],
        lambda value: [value],
    )


def to_lists(column: Column) -> Any:
    """
    Nested lists mirroring the tree.

    A Composite becomes a list of rows, each row a list of cells;
    a Leaf becomes its value.

    Example:
        [["Date", "2024-03-01"], ["Readings", [["12.5"], ["13.1"]]]]
    """
    return extract(
        column,
        lambda rows: [[to_lists(child) for child in row.columns] for row in rows],
        lambda value: value,
    )


def table_shape(column: Column) -> Tuple[int, int]:
    """(row count, widest row) of a Composite; (0, 0) for a Leaf."""
    return extract(
        column,
        lambda rows: (len(rows), max((len(row.columns) for row in rows), default=0)),
        lambda value: (0, 0),
    )


def cell(column: Column, row: int, col: int) -> Column:
    """
    The Column at (row, col) of a Composite.

    Raises:
        TypeError: If column is a Leaf
        IndexError: If the position does not exist
    """
    def on_leaf(value):
        raise TypeError(f"Leaf {value!r} has no cells")

    return extract(column, lambda rows: rows[row].columns[col], on_leaf)
