"""
Reporter: Source + Queries → Column tree.

Walks a source depth-first, driven by row queries:

    report(run, OneTimeRowQuery(Literal("Date"), Getter(date_of)),
                EveryRowQuery(Getter(value_of)))

Rows at one level are concatenated in row-query declaration order,
then source-child order. Columns follow column-query order.

The bound source is passed down explicitly; queries hold no
reference to it. Any failure aborts the whole call, nothing
partial is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List

from treereport.errors import FormatInvariantViolation, QueryEvaluationError, ReportError
from treereport.model import Column, Composite, Endpoint, Leaf, Row
from treereport.queries import ColumnQuery, Nested, RowQuery
from treereport.source import Node

logger = logging.getLogger(__name__)


def _evaluate(what: str, query: Any, call: Callable[[], Any]) -> Any:
    """Run one query step, turning foreign failures into QueryEvaluationError."""
    try:
        return call()
    except ReportError:
        raise
    except Exception as e:
        raise QueryEvaluationError(f"{type(query).__name__} failed while {what}: {e}") from e


def _build_column(query: ColumnQuery, source: Node) -> Column:
    content = _evaluate("computing column content", query, lambda: query.content(source))
    if isinstance(content, Endpoint):
        return Leaf(content)
    if isinstance(content, Nested):
        return Composite(_build_rows(content.row_queries, source))
    raise FormatInvariantViolation(
        f"{type(query).__name__} produced {type(content).__name__}, expected Endpoint or Nested"
    )


def _build_row(row_query: RowQuery, source: Node) -> Row:
    return Row(tuple(_build_column(query, source) for query in row_query.column_queries))


def _build_rows(row_queries, source: Node) -> List[Row]:
    rows: List[Row] = []
    for row_query in row_queries:
        if not row_query.iterates:
            rows.append(_build_row(row_query, source))
            continue

        children = _evaluate("listing children", row_query, lambda: list(row_query.children_of(source)))
        for child in children:
            if _evaluate("testing predicate", row_query, lambda: row_query.accepts(child)):
                rows.append(_build_row(row_query, child))
    return rows


def report(root_source: Node, *row_queries: RowQuery) -> Composite:
    """
    Project a source into a report.

    Args:
        root_source: Node the top-level row queries are bound to
        row_queries: Row queries in output order

    Returns:
        Root Composite Column (zero rows if nothing matched)

    Raises:
        QueryEvaluationError: If any predicate, getter or child listing fails
    """
    rows = _build_rows(row_queries, root_source)
    logger.debug("Reported %d top-level rows from %d row queries", len(rows), len(row_queries))
    return Composite(rows)


__all__ = ["report"]
