"""
Tree Report Package

Projects hierarchical sources into tabular reports.

Three parts share one data model (treereport.model):
    - Reporter: Source + Queries → Column tree
    - Formatter: Column tree → box-drawn text
    - Parser: box-drawn text → Column tree

ARCHITECTURAL GUARANTEE:
------------------------
The formatter and parser never see queries.
They operate on the Column tree alone, so reporting and
interpreting can be used independently of each other.
"""

__version__ = "0.1.0"
