"""
Box Table Parser (report text → Column tree).

Exact inverse of treereport.backends.box_formatter:

    format_report(parse_report(format_report(tree))) == format_report(tree)

Procedure for one table block:
    1. Check the frame (┌ ┐ on top, └ ┘ at the bottom, │/├ on the sides)
    2. Split the interior into rows at ├ separator lines
    3. Read each row's column boundaries off the separators above and below
    4. Check every content line has │ exactly at those boundaries
    5. Check all rows share one boundary grid
    6. Slice cells; a cell starting with ┌ is a nested block (recurse),
       anything else is leaf text

Leaf values come back as strings.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from treereport import grammar
from treereport.errors import ParseError
from treereport.model import Column, Composite, Endpoint, Leaf, Row
from treereport.storage import read_report

logger = logging.getLogger(__name__)

_TOP_RULE = {grammar.HORIZONTAL, grammar.TEE_DOWN}
_MIDDLE_RULE = {grammar.HORIZONTAL, grammar.TEE_DOWN, grammar.TEE_UP, grammar.CROSS}
_BOTTOM_RULE = {grammar.HORIZONTAL, grammar.TEE_UP}


def _rule_boundaries(rule: str, allowed: set, line_no: int) -> Tuple[List[int], List[int]]:
    """Return (boundaries above, boundaries below) marked on a horizontal rule."""
    above, below = [], []
    for position, ch in enumerate(rule[1:-1], start=1):
        if ch not in allowed:
            raise ParseError(f"Unexpected character {ch!r} in horizontal rule at column {position + 1}", line_no)
        if ch in (grammar.TEE_UP, grammar.CROSS):
            above.append(position)
        if ch in (grammar.TEE_DOWN, grammar.CROSS):
            below.append(position)
    return above, below


def _check_frame(lines: Sequence[str], first_line: int) -> int:
    """Validate the outer frame of a block and return its width."""
    if len(lines) < 2:
        raise ParseError("Table needs a top and a bottom border", first_line)

    width = len(lines[0])
    for offset, line in enumerate(lines):
        if len(line) != width:
            raise ParseError(f"Line is {len(line)} characters wide, expected {width}", first_line + offset)

    top, bottom = lines[0], lines[-1]
    if width < 2 or top[0] != grammar.TOP_LEFT or top[-1] != grammar.TOP_RIGHT:
        raise ParseError("Missing top border", first_line)
    if bottom[0] != grammar.BOTTOM_LEFT or bottom[-1] != grammar.BOTTOM_RIGHT:
        raise ParseError("Missing bottom border", first_line + len(lines) - 1)

    for offset, line in enumerate(lines[1:-1], start=1):
        if line[0] == grammar.VERTICAL and line[-1] == grammar.VERTICAL:
            continue
        if line[0] == grammar.TEE_RIGHT and line[-1] == grammar.TEE_LEFT:
            continue
        raise ParseError("Line is not enclosed by the table frame", first_line + offset)
    return width


def _split_rows(lines: Sequence[str], first_line: int) -> Tuple[List[int], List[Tuple[int, int]]]:
    """
    Locate rule lines and row line ranges.

    Returns:
        (rule line offsets, [(start, end) offsets of each row's content lines])
    """
    rules = [0]
    rows = []
    start = 1
    for offset in range(1, len(lines)):
        if offset < len(lines) - 1 and lines[offset][0] != grammar.TEE_RIGHT:
            continue
        if offset == start:
            raise ParseError("Row has no content lines", first_line + offset)
        rows.append((start, offset))
        rules.append(offset)
        start = offset + 1
    return rules, rows


def _check_alignment(row_bounds: Sequence[List[int]], rows: Sequence[Tuple[int, int]], first_line: int) -> None:
    """Every row's boundaries must be a prefix of the widest row's."""
    grid = max(row_bounds, key=len)
    for bounds, (start, _) in zip(row_bounds, rows):
        if bounds != grid[:len(bounds)]:
            raise ParseError(
                f"Column boundaries {[b + 1 for b in bounds]} do not align with {[b + 1 for b in grid]}",
                first_line + start,
            )


def _parse_leaf(content: Sequence[str], first_line: int) -> Leaf:
    for offset, line in enumerate(content):
        if grammar.contains_frame_character(line):
            raise ParseError("Frame character inside a leaf cell", first_line + offset)
    lines = [line.rstrip() for line in content]
    while lines and not lines[-1]:
        lines.pop()
    return Leaf(Endpoint("\n".join(lines)))


def _parse_nested(content: Sequence[str], first_line: int) -> Composite:
    block_width = content[0].find(grammar.TOP_RIGHT) + 1
    if block_width == 0:
        raise ParseError("Nested table has no top-right corner", first_line)

    block_end = None
    for offset, line in enumerate(content):
        if line.startswith(grammar.BOTTOM_LEFT):
            block_end = offset
            break
    if block_end is None:
        raise ParseError("Nested table has no bottom border", first_line)

    for offset, line in enumerate(content):
        rest = line[block_width:] if offset <= block_end else line
        if rest.strip(" "):
            raise ParseError("Unexpected text beside a nested table", first_line + offset)

    block = [line[:block_width] for line in content[:block_end + 1]]
    return _parse_block(block, first_line)


def _parse_cell(segment: Sequence[str], first_line: int, column: int) -> Column:
    pad = grammar.PADDING
    for offset, line in enumerate(segment):
        if len(line) < 2 * pad or line[:pad].strip(" ") or line[len(line) - pad:].strip(" "):
            raise ParseError(f"Cell at column {column + 1} is missing its padding", first_line + offset)
    content = [line[pad:len(line) - pad] for line in segment]
    if content[0].startswith(grammar.TOP_LEFT):
        return _parse_nested(content, first_line)
    return _parse_leaf(content, first_line)


def _parse_block(lines: Sequence[str], first_line: int) -> Composite:
    width = _check_frame(lines, first_line)
    if len(lines) == 2:
        if tuple(lines) != grammar.EMPTY_TABLE:
            raise ParseError("Table border without rows", first_line)
        return Composite(())

    rules, rows = _split_rows(lines, first_line)

    row_bounds = []
    for index, (start, end) in enumerate(rows):
        top_allowed = _TOP_RULE if index == 0 else _MIDDLE_RULE
        bottom_allowed = _BOTTOM_RULE if index == len(rows) - 1 else _MIDDLE_RULE
        _, bounds = _rule_boundaries(lines[rules[index]], top_allowed, first_line + rules[index])
        below, _ = _rule_boundaries(lines[rules[index + 1]], bottom_allowed, first_line + rules[index + 1])
        if bounds != below:
            raise ParseError("Separators above and below the row disagree on column boundaries", first_line + start)
        for offset in range(start, end):
            for position in bounds:
                if lines[offset][position] != grammar.VERTICAL:
                    raise ParseError(f"Expected {grammar.VERTICAL!r} at column {position + 1}", first_line + offset)
        row_bounds.append(bounds)

    _check_alignment(row_bounds, rows, first_line)

    parsed_rows = []
    for bounds, (start, end) in zip(row_bounds, rows):
        edges = [0] + bounds + [width - 1]
        columns = []
        for left, right in zip(edges, edges[1:]):
            segment = [line[left + 1:right] for line in lines[start:end]]
            columns.append(_parse_cell(segment, first_line + start, left + 1))
        parsed_rows.append(Row(tuple(columns)))
    return Composite(parsed_rows)


def parse_report(text: str) -> Composite:
    """
    Parse box-drawn report text into a Column tree.

    Args:
        text: Output of format_report (one trailing newline is tolerated)

    Returns:
        Root Composite Column

    Raises:
        ParseError: If the text is empty or does not follow the grammar
    """
    if text.endswith("\n"):
        text = text[:-1]
    if not text.strip():
        raise ParseError("Report text is empty")

    column = _parse_block(text.split("\n"), 1)
    logger.debug("Parsed report with %d top-level rows", len(column.rows))
    return column


def parse_report_file(filepath: str) -> Composite:
    """
    Parse a report file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ParseError: If parsing fails
    """
    return parse_report(read_report(filepath))


__all__ = [
    "parse_report",
    "parse_report_file",
    "ParseError",
]
