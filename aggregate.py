"""Step 1 – Read district lines, sum them per state, write the aggregate file.

Standalone: python aggregate.py INPUT OUTPUT [LIMIT]
Module:     from aggregate import aggregate, run_aggregate
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from itertools import islice
from pathlib import Path

import states as states_module
from codec import write_aggregate
from fixed_width import INPUT_ENCODING, parse_line
from records import StateRecord

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def check_input_file(input_path: str | Path) -> Path:
    """Raise FileNotFoundError unless input_path is an existing regular file."""
    path = Path(input_path)
    if not path.is_file():
        raise FileNotFoundError(f"The input file does not exist: {path}")
    return path


def parse_limit(raw: str | None) -> int | None:
    """CLI record-count argument → int, or None for "read everything"."""
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"record count must be an integer, got '{raw}'") from None


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def aggregate(lines: Iterable[str], limit: int | None = None) -> list[StateRecord]:
    """Fold district lines into one record per state code.

    Reads at most `limit` lines (None = all; zero or negative = none).
    States come back in the order their code first appeared.  A parse error
    or containment violation aborts the whole aggregation.
    """
    if limit is not None and limit <= 0:
        return []

    accumulators: dict[int, StateRecord] = {}
    lines_read = 0
    for line in islice(lines, limit):
        lines_read += 1
        district = parse_line(line)
        current = accumulators.get(district.state_code)
        if current is None:
            if states_module.get_state_by_fips(district.state_code) is None:
                logger.warning("aggregate: unknown state code %02d (line %d), kept as-is", district.state_code, lines_read)
            accumulators[district.state_code] = district
        else:
            accumulators[district.state_code] = current.merge(district)

    logger.info("aggregate: %d lines folded into %d states", lines_read, len(accumulators))
    return list(accumulators.values())


def read_census_data(input_path: str | Path, limit: int | None = None) -> list[StateRecord]:
    """Aggregate the district file at input_path."""
    path = check_input_file(input_path)
    logger.info("aggregate: reading %s", path)
    with path.open(encoding=INPUT_ENCODING, newline="") as fh:
        return aggregate(fh, limit=limit)


def run_aggregate(
    input_path: str | Path,
    output_path: str | Path,
    limit: int | None = None,
) -> list[StateRecord]:
    """Aggregate input_path and write the binary aggregate to output_path.

    Returns:
        The per-state records, in first-seen order.
    """
    records = read_census_data(input_path, limit=limit)
    write_aggregate(output_path, records)
    return records


# ---------------------------------------------------------------------------
# Standalone entry-point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if len(sys.argv) < 2:
        print("\nNo input file specified. Exiting application......")
        sys.exit(1)
    if len(sys.argv) < 3:
        print("\nNo output file specified. Exiting application.....")
        sys.exit(1)

    try:
        check_input_file(sys.argv[1])
    except FileNotFoundError:
        print("\nThe input file does not exist. Exiting application.....")
        sys.exit(1)

    try:
        record_limit = parse_limit(sys.argv[3] if len(sys.argv) > 3 else None)
        state_records = run_aggregate(sys.argv[1], sys.argv[2], limit=record_limit)
    except Exception as e:
        logger.error("aggregate: there was an error reading and analyzing the data: %s", e)
        sys.exit(1)

    logger.info("aggregate: done. %d states written to %s", len(state_records), sys.argv[2])
