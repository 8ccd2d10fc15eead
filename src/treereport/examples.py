"""
Example report: an inspection run with header fields and two child readings.

Produces:

    ┌──────────────┬────────────┐
    │ Date         │ 2024-03-01 │
    ├──────────────┼────────────┤
    │ Tested by    │ J. Smith   │
    ├──────────────┼────────────┤
    │ Final result │ PASS       │
    ├──────────────┼────────────┤
    │ Readings     │ ┌──────┐   │
    │              │ │ 12.5 │   │
    │              │ ├──────┤   │
    │              │ │ 13.1 │   │
    │              │ └──────┘   │
    └──────────────┴────────────┘
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from treereport.queries import EveryRowQuery, Getter, Literal, OneTimeRowQuery, Rows, RowQuery
from treereport.source import WrappedNode


@dataclass
class Reading:
    value: float
    unit: str = "V"


@dataclass
class InspectionRun:
    date: str
    tested_by: str
    result: str
    readings: List[Reading] = field(default_factory=list)


def build_example_run(readings: Tuple[float, ...] = (12.5, 13.1)) -> WrappedNode:
    run = InspectionRun(
        date="2024-03-01",
        tested_by="J. Smith",
        result="PASS",
        readings=[Reading(value) for value in readings],
    )
    # InspectionRun -> readings; Reading has no "readings" attribute, so it is a leaf.
    return WrappedNode(run, lambda value: getattr(value, "readings", []))


def build_example_queries() -> Tuple[RowQuery, ...]:
    return (
        OneTimeRowQuery(Literal("Date"), Getter(lambda node: node.value.date)),
        OneTimeRowQuery(Literal("Tested by"), Getter(lambda node: node.value.tested_by)),
        OneTimeRowQuery(Literal("Final result"), Getter(lambda node: node.value.result)),
        OneTimeRowQuery(
            Literal("Readings"),
            Rows(EveryRowQuery(Getter(lambda node: node.value.value))),
        ),
    )
