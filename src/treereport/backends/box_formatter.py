"""
Box table formatter for report trees.

Converts a Column tree into box-drawn text (see treereport.grammar).

Rendering is bottom-up:
    - Leaf: the endpoint text, one output line per text line
    - Composite: a bordered table, nested tables embedded in their cell

Layout rules:
    - Column width = widest cell at that position across all rows
    - Shorter rows let their last cell span the remaining columns
    - Row height = tallest cell, shorter cells are top-aligned
    - Narrow cells are right-padded with spaces

Output is a pure function of the tree: same tree, same text.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from treereport import grammar
from treereport.errors import FormatInvariantViolation
from treereport.model import Column, Composite, Leaf

logger = logging.getLogger(__name__)

# Bar plus padding on both sides of a cell.
_CELL_OVERHEAD = 1 + 2 * grammar.PADDING


def _leaf_lines(column: Leaf) -> List[str]:
    """Split endpoint text into right-stripped lines, trailing blanks dropped."""
    text = column.endpoint.text
    if grammar.contains_frame_character(text):
        raise FormatInvariantViolation(f"Leaf text contains frame characters: {text!r}")
    lines = [line.rstrip() for line in text.split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return lines or [""]


def _block_width(lines: Sequence[str]) -> int:
    return max((len(line) for line in lines), default=0)


def _span_widths(widths: Sequence[int], cell_count: int) -> List[int]:
    """Widths of each cell in a row of cell_count cells; the last one spans the rest."""
    spanned = sum(widths[cell_count - 1:]) + _CELL_OVERHEAD * (len(widths) - cell_count)
    return list(widths[:cell_count - 1]) + [spanned]


def _column_widths(cells: Sequence[Sequence[List[str]]], total: int) -> List[int]:
    widths = [0] * total

    for row in cells:
        for j, lines in enumerate(row):
            if len(row) < total and j == len(row) - 1:
                continue
            widths[j] = max(widths[j], _block_width(lines))

    # Spanning cells that still do not fit widen the last column.
    for row in cells:
        if len(row) < total:
            deficit = _block_width(row[-1]) - _span_widths(widths, len(row))[-1]
            if deficit > 0:
                widths[-1] += deficit

    return widths


def _boundaries(cell_widths: Sequence[int]) -> List[int]:
    """Offsets of the vertical bars between cells (outer frame excluded)."""
    positions = []
    position = 0
    for width in cell_widths[:-1]:
        position += width + _CELL_OVERHEAD
        positions.append(position)
    return positions


def _rule(width: int, left: str, right: str, above: Sequence[int], below: Sequence[int]) -> str:
    chars = [grammar.HORIZONTAL] * width
    for position in set(above) | set(below):
        chars[position] = grammar.junction(position in above, position in below)
    chars[0] = left
    chars[-1] = right
    return "".join(chars)


def _row_lines(cells: Sequence[List[str]], cell_widths: Sequence[int]) -> List[str]:
    height = max(len(lines) for lines in cells)
    pad = " " * grammar.PADDING
    output = []
    for i in range(height):
        parts = [grammar.VERTICAL]
        for lines, width in zip(cells, cell_widths):
            content = lines[i] if i < len(lines) else ""
            parts.append(pad + content.ljust(width) + pad)
            parts.append(grammar.VERTICAL)
        output.append("".join(parts))
    return output


def _table_lines(column: Composite) -> List[str]:
    if not column.rows:
        return list(grammar.EMPTY_TABLE)

    cells = [[_render(child) for child in row.columns] for row in column.rows]
    widths = _column_widths(cells, column.width)
    table_width = 1 + sum(widths) + _CELL_OVERHEAD * len(widths)

    row_widths = [_span_widths(widths, len(row)) for row in cells]
    row_bounds = [_boundaries(w) for w in row_widths]

    lines = [_rule(table_width, grammar.TOP_LEFT, grammar.TOP_RIGHT, [], row_bounds[0])]
    for index, (row, cell_widths) in enumerate(zip(cells, row_widths)):
        if index > 0:
            lines.append(_rule(table_width, grammar.TEE_RIGHT, grammar.TEE_LEFT,
                               row_bounds[index - 1], row_bounds[index]))
        lines.extend(_row_lines(row, cell_widths))
    lines.append(_rule(table_width, grammar.BOTTOM_LEFT, grammar.BOTTOM_RIGHT, row_bounds[-1], []))
    return lines


def _render(column: Column) -> List[str]:
    if isinstance(column, Composite):
        return _table_lines(column)
    if isinstance(column, Leaf):
        return _leaf_lines(column)
    raise FormatInvariantViolation(f"Unsupported Column type: {type(column).__name__}")


def format_report(column: Column) -> str:
    """
    Render a report tree as box-drawn text.

    Args:
        column: Root column (normally the Composite returned by report())

    Returns:
        Lines joined with "\\n", no trailing newline

    Raises:
        FormatInvariantViolation: If a column is neither Leaf nor Composite,
            or leaf text contains frame characters
    """
    lines = _render(column)
    logger.debug("Formatted report: %d lines, %d columns wide", len(lines), _block_width(lines))
    return "\n".join(lines)


__all__ = ["format_report"]
