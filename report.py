"""Step 2 – Decode the aggregate file and print the child-poverty table.

Standalone: python report.py INPUT [LIMIT]
Module:     from report import run_report
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path
from typing import TextIO

from aggregate import check_input_file, parse_limit
from codec import read_aggregate
from records import ReportRecord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Column layout
# ---------------------------------------------------------------------------
# (heading, width) – widths match the row format below, two-space gutters.

COLUMNS: list[tuple[str, int]] = [
    ("State", 5),
    ("Population", 10),
    ("Child Population", 16),
    ("Child Poverty Population", 24),
    ("% Child Poverty", 15),
]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_headings(input_path: str | Path) -> list[str]:
    """Blank line, absolute file path, blank line, titles, dash borders."""
    titles = "  ".join(title for title, _ in COLUMNS)
    borders = "  ".join("-" * width for _, width in COLUMNS)
    return [
        "",
        f"File: {Path(input_path).resolve()}",
        "",
        titles,
        borders,
    ]


def _format_percentage(value: float) -> str:
    """Two decimals in 15 columns; a state with no children shows NaN."""
    if math.isnan(value):
        return f"{'NaN':>15}"
    return f"{value:15.2f}"


def format_row(record: ReportRecord) -> str:
    """'   01      31,754             6,475                       733            11.32'"""
    return (
        f"   {record.state_code:02d}"
        f"  {record.total_population:10,d}"
        f"  {record.child_population:16,d}"
        f"  {record.child_poverty_population:24,d}"
        f"  {_format_percentage(record.child_poverty_percentage)}"
    )


def render_report(records: Iterable[ReportRecord], input_path: str | Path) -> str:
    lines = render_headings(input_path)
    lines.extend(format_row(r) for r in records)
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Public entry-point
# ---------------------------------------------------------------------------


def run_report(input_path: str | Path, limit: int | None = None, out: TextIO | None = None) -> int:
    """Print the report for an aggregate file.  Returns the number of rows printed."""
    path = check_input_file(input_path)
    if out is None:
        out = sys.stdout

    for heading in render_headings(path):
        out.write(heading + "\n")

    rows = 0
    with closing(read_aggregate(path, limit=limit)) as records:
        for record in records:
            out.write(format_row(record) + "\n")
            rows += 1

    logger.info("report: %d rows from %s", rows, path)
    return rows


# ---------------------------------------------------------------------------
# Standalone entry-point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if len(sys.argv) < 2:
        print("\nNo input file specified. Exiting application......")
        sys.exit(1)

    try:
        check_input_file(sys.argv[1])
    except FileNotFoundError:
        print("\nThe input file does not exist. Exiting application.....")
        sys.exit(1)

    try:
        record_limit = parse_limit(sys.argv[2] if len(sys.argv) > 2 else None)
        run_report(sys.argv[1], limit=record_limit)
    except Exception as e:
        logger.error("report: %s", e)
        sys.exit(1)
