#!/usr/bin/env python3
"""
Complete Pipeline Demo: Source → Report → Text → File → Text → Report → Values

Shows the full workflow:
1. Report on a source with queries
2. Format the report as a box table
3. Write it to disk and read it back
4. Parse the text into a report tree
5. Interpret the parsed tree
"""

import sys
import tempfile

from treereport.backends import format_report
from treereport.errors import ParseError
from treereport.examples import build_example_queries, build_example_run
from treereport.extraction import leaf_values, to_lists
from treereport.reporter import report
from treereport.storage import read_report, write_report
from treereport.table_parser import parse_report


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Source → Report → Text → Report → Values")
    print("=" * 80)

    # =========================================================================
    # STEP 1-2: Report and format
    # =========================================================================
    print("\n1. REPORTING...")
    tree = report(build_example_run(), *build_example_queries())
    text = format_report(tree)
    print(text)

    # =========================================================================
    # STEP 3: Persist
    # =========================================================================
    print("\n2. WRITING AND READING BACK...")
    directory = tempfile.mkdtemp(prefix="treereport-")
    path = write_report(text, directory, "inspection")
    print(f"   ✓ Saved {path}")
    restored_text = read_report(path)

    # =========================================================================
    # STEP 4: Parse
    # =========================================================================
    print("\n3. PARSING...")
    try:
        parsed = parse_report(restored_text)
    except ParseError as e:
        print(f"   ✗ {e}")
        sys.exit(1)
    print(f"   ✓ Round trip exact: {format_report(parsed) == text}")

    # =========================================================================
    # STEP 5: Interpret
    # =========================================================================
    print("\n4. INTERPRETING...")
    rows = to_lists(parsed)
    for label, value in rows[:3]:
        print(f"   {label}: {value}")
    readings = [float(reading[0]) for reading in rows[3][1]]
    print(f"   Mean reading: {sum(readings) / len(readings):.2f}")
    print(f"   All leaf values: {leaf_values(parsed)}")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()
