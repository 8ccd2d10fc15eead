#!/usr/bin/env python3
"""
Demo: Report an inspection run and print the box table.

Shows static header rows, an iterating row with a counter and a
running difference, and a nested sub-table.
"""

import logging

from treereport.backends import format_report
from treereport.examples import build_example_queries, build_example_run
from treereport.queries import Counter, EveryRowQuery, Getter, Literal, OneTimeRowQuery, RunningDifference
from treereport.reporter import report


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    source = build_example_run(readings=(12.5, 13.1, 12.9, 14.0))

    print("=" * 80)
    print("EXAMPLE REPORT")
    print("=" * 80)
    print(format_report(report(source, *build_example_queries())))

    print("\n" + "=" * 80)
    print("READINGS WITH ROW NUMBERS AND DELTAS")
    print("=" * 80)
    tree = report(
        source,
        OneTimeRowQuery(Literal("#"), Literal("Reading"), Literal("Delta")),
        EveryRowQuery(
            Counter(),
            Getter(lambda node: f"{node.value.value} {node.value.unit}"),
            RunningDifference(lambda node: node.value.value),
        ),
    )
    print(format_report(tree))


if __name__ == "__main__":
    main()
