"""
Query System for Reports

Queries describe how rows and columns are derived from a source.
They are built once by the caller and may be reused across reports.

Two families:
    - RowQuery: yields zero, one or many Rows at one table level
    - ColumnQuery: yields the content of one cell

ColumnQuery content is a tagged value:
    - Endpoint: rendered as a Leaf Column
    - Nested: a sequence of RowQuery, rendered as a Composite Column

ARCHITECTURAL RULE:
    Queries never hold the source they are evaluated against.
    The reporter passes the bound source into every call.

    The only state a query may carry is its own opt-in state
    (Counter, RunningDifference). That state survives reuse
    and is documented on each class.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from treereport.errors import ConstructionError
from treereport.model import Endpoint
from treereport.source import Node


class ColumnQuery(ABC):
    """
    Base class for cell queries.

    content() is evaluated once per row, in declaration order,
    against the source bound for that row.
    """

    @abstractmethod
    def content(self, source: Node) -> "ColumnContent":
        """Return an Endpoint or Nested for the given bound source."""


@dataclass(frozen=True)
class Nested:
    """Row queries to expand into a nested Composite Column."""

    row_queries: Tuple["RowQuery", ...]


ColumnContent = Union[Endpoint, Nested]


class Literal(ColumnQuery):
    """A fixed value, independent of the source (headers, labels)."""

    def __init__(self, value: Any):
        self.value = value

    def content(self, source: Node) -> Endpoint:
        return Endpoint(self.value)

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


class Getter(ColumnQuery):
    """
    A value computed from the bound source.

    Example:
        Getter(lambda node: node.value.date)
    """

    def __init__(self, getter: Callable[[Node], Any]):
        self.getter = getter

    def content(self, source: Node) -> Endpoint:
        return Endpoint(self.getter(source))


class Rows(ColumnQuery):
    """
    A nested table.

    The reporter expands the row queries with the bound source
    as the new traversal root.
    """

    def __init__(self, *row_queries: "RowQuery"):
        self.row_queries = tuple(row_queries)

    def content(self, source: Node) -> Nested:
        return Nested(self.row_queries)


class Counter(ColumnQuery):
    """
    Emits str(n) for n = origin, origin + 1, ... one per evaluation.

    STATEFUL:
        The count carries over when the same instance is reused in
        another report. Call reset() to start again from origin.
        Not safe to share between concurrent reports.
    """

    def __init__(self, origin: int = 1):
        self.origin = origin
        self._next = origin

    def content(self, source: Node) -> Endpoint:
        value = self._next
        self._next += 1
        return Endpoint(str(value))

    def reset(self) -> None:
        self._next = self.origin


class RunningDifference(ColumnQuery):
    """
    Emits the difference between the current and the previous reading.

    The first evaluation has no prior reading: it seeds the register
    and emits a zero delta.

    STATEFUL:
        A reading that cannot be subtracted raises and leaves the register
        unchanged. The last reading carries over when the same instance is reused
        in another report. Call reset() to clear the register.
        Not safe to share between concurrent reports.
    """

    def __init__(self, reading: Callable[[Node], Any]):
        self.reading = reading
        self._previous = None

    def content(self, source: Node) -> Endpoint:
        current = self.reading(source)
        previous = current if self._previous is None else self._previous
        delta = current - previous
        self._previous = current
        return Endpoint(delta)

    def reset(self) -> None:
        self._previous = None


class RowQuery(ABC):
    """
    Base class for row queries.

    Properties:
        column_queries: Cell queries, one per column, in order
        iterates: False for static rows, True for per-child rows

    A RowQuery without column queries would only ever build
    empty Rows, so it is rejected at construction.
    """

    iterates: bool = False

    def __init__(self, *column_queries: ColumnQuery):
        if not column_queries:
            raise ConstructionError(f"{type(self).__name__} needs at least one column query")
        for query in column_queries:
            if not isinstance(query, ColumnQuery):
                raise ConstructionError(f"Expected ColumnQuery, got {type(query).__name__}")
        self.column_queries = tuple(column_queries)

    def accepts(self, source: Node) -> bool:
        """Predicate evaluated per candidate child. Default: always true."""
        return True

    def children_of(self, source: Node) -> Iterable[Node]:
        """Candidate children of the bound source, in source order."""
        return source.children()


class OneTimeRowQuery(RowQuery):
    """
    Emits exactly one row against the current source.

    Used for headers and label/value rows. Ignores iteration.
    """

    iterates = False


class EveryRowQuery(RowQuery):
    """
    Emits one row per child of the bound source.

    Args:
        column_queries: Cell queries evaluated with the child bound
        where: Optional predicate on the child; False skips it
        children: Optional node -> iterable of nodes replacing
            node.children() (branching to another collection)
    """

    iterates = True

    def __init__(
        self,
        *column_queries: ColumnQuery,
        where: Optional[Callable[[Node], bool]] = None,
        children: Optional[Callable[[Node], Iterable[Node]]] = None,
    ):
        super().__init__(*column_queries)
        self.where = where
        self.children = children

    def accepts(self, source: Node) -> bool:
        if self.where is None:
            return True
        return bool(self.where(source))

    def children_of(self, source: Node) -> Iterable[Node]:
        if self.children is None:
            return source.children()
        return self.children(source)


class MatchingRowQuery(EveryRowQuery):
    """
    Emits one row per child whose field equals an expected value.

    Example:
        MatchingRowQuery(lambda n: n.value.status, "FAIL", Getter(...))
    """

    def __init__(
        self,
        field: Callable[[Node], Any],
        expected: Any,
        *column_queries: ColumnQuery,
        children: Optional[Callable[[Node], Iterable[Node]]] = None,
    ):
        super().__init__(*column_queries, where=lambda node: field(node) == expected, children=children)
        self.field = field
        self.expected = expected
