"""Backends for report output generation."""

from .box_formatter import format_report

__all__ = ["format_report"]
