"""
Core Report Tree Objects

Defines the data structures every report is made of:
    - Endpoint (opaque leaf payload)
    - Column (Leaf or Composite, never both, never neither)
    - Row (non-empty ordered sequence of Columns)

A report is a single root Composite Column.

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about queries or sources
        - Know nothing about the text grammar
        - Are immutable once built
        - Are freshly allocated for every report
"""

from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence, Tuple, TypeVar

from treereport.errors import ConstructionError, FormatInvariantViolation


R = TypeVar("R")


@dataclass(frozen=True)
class Endpoint:
    """
    Opaque leaf payload carried by a Leaf Column.

    Properties:
        value: Any printable value (str(value) is what gets rendered)
    """

    value: Any

    @property
    def text(self) -> str:
        return str(self.value)


class Column(ABC):
    """
    Base class for report nodes.

    Exactly two subclasses exist: Leaf and Composite.
    Consumers dispatch with extract() or isinstance checks on both.

    This class is structure only.
    """
    pass


@dataclass(frozen=True)
class Leaf(Column):
    """A column holding a single Endpoint."""

    endpoint: Endpoint

    @property
    def value(self) -> Any:
        return self.endpoint.value


@dataclass(frozen=True)
class Row:
    """
    An ordered, non-empty sequence of Columns.

    A Row with zero columns indicates a query programming error
    and raises ConstructionError immediately.
    """

    columns: Tuple[Column, ...]

    def __post_init__(self):
        columns = tuple(self.columns)
        if not columns:
            raise ConstructionError("A Row must have at least one column")
        for column in columns:
            if not isinstance(column, Column):
                raise ConstructionError(f"Row columns must be Column objects, got {type(column).__name__}")
        object.__setattr__(self, "columns", columns)

    def __len__(self) -> int:
        return len(self.columns)


@dataclass(frozen=True)
class Composite(Column):
    """
    A column holding a nested table.

    Zero rows is legal: it is what an iterating query that
    matched nothing produces.
    """

    rows: Tuple[Row, ...] = field(default_factory=tuple)

    def __post_init__(self):
        rows = tuple(self.rows)
        for row in rows:
            if not isinstance(row, Row):
                raise ConstructionError(f"Composite rows must be Row objects, got {type(row).__name__}")
        object.__setattr__(self, "rows", rows)

    @property
    def width(self) -> int:
        """Number of columns in the widest row."""
        return max((len(row) for row in self.rows), default=0)


def leaf(value: Any) -> Leaf:
    """Shorthand for Leaf(Endpoint(value))."""
    return Leaf(Endpoint(value))


def row(*columns: Column) -> Row:
    """Shorthand for Row(columns)."""
    return Row(columns)


def composite(*rows: Row) -> Composite:
    """Shorthand for Composite(rows)."""
    return Composite(rows)


def extract(
    column: Column,
    on_composite: Callable[[Sequence[Row]], R],
    on_leaf: Callable[[Any], R],
) -> R:
    """
    Dispatch on the Column variant.

    Args:
        column: Column to inspect
        on_composite: Called with the rows of a Composite
        on_leaf: Called with the endpoint value of a Leaf

    Returns:
        Whatever the selected handler returns

    Raises:
        FormatInvariantViolation: If column is neither Leaf nor Composite
    """
    if isinstance(column, Composite):
        return on_composite(column.rows)
    if isinstance(column, Leaf):
        return on_leaf(column.endpoint.value)
    raise FormatInvariantViolation(f"Unsupported Column type: {type(column).__name__}")
