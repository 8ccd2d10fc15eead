"""
Error taxonomy for report construction, evaluation, formatting and parsing.

All errors derive from ReportError so callers can catch the whole family.

    ConstructionError        - programming error in how rows/queries were built
    QueryEvaluationError     - a query failed while reading its bound source
    FormatInvariantViolation - a tree the formatter cannot render
    ParseError               - malformed report text (recoverable)
"""

from typing import Optional


class ReportError(Exception):
    """Base class for all treereport errors."""
    pass


class ConstructionError(ReportError):
    """Raised when a Row or RowQuery is built without columns."""
    pass


class QueryEvaluationError(ReportError):
    """Raised when a predicate, getter or child enumeration fails."""
    pass


class FormatInvariantViolation(ReportError):
    """Raised when a Column cannot be rendered by the grammar."""
    pass


class ParseError(ReportError):
    """
    Raised when report text does not follow the box grammar.

    Properties:
        line: 1-based line number of the offending line, if known
    """

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
