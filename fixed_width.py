"""Fixed-width parser for census school-district lines.

The layout is frozen by the census bureau's district file format: nothing is
delimited, every field lives at a fixed column range.

Module:     from fixed_width import parse_line
"""

from __future__ import annotations

from records import StateRecord

# ---------------------------------------------------------------------------
# Configuration constants (column ranges are half-open, 0-based)
# ---------------------------------------------------------------------------

STATE_CODE_COLUMNS: tuple[int, int] = (0, 2)
TOTAL_POPULATION_COLUMNS: tuple[int, int] = (82, 90)
CHILD_POPULATION_COLUMNS: tuple[int, int] = (91, 99)
CHILD_POVERTY_POPULATION_COLUMNS: tuple[int, int] = (100, 108)

# latin-1 maps every byte to one character, so column == byte offset
INPUT_ENCODING: str = "latin-1"

MIN_LINE_LENGTH: int = max(
    STATE_CODE_COLUMNS[1],
    TOTAL_POPULATION_COLUMNS[1],
    CHILD_POPULATION_COLUMNS[1],
    CHILD_POVERTY_POPULATION_COLUMNS[1],
)


class LineTooShortError(IndexError):
    """The line ends before the last fixed-width field does."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _int_field(line: str, columns: tuple[int, int], name: str) -> int:
    start, end = columns
    raw = line[start:end].strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} at columns {start}-{end} is not an integer: '{raw}'") from None


# ---------------------------------------------------------------------------
# Public entry-point
# ---------------------------------------------------------------------------


def parse_line(line: str) -> StateRecord:
    """Parse one district line into a validated StateRecord.

    Raises:
        LineTooShortError:         line ends before column 108.
        ValueError:                a field is blank or non-numeric, or out of range.
        PopulationInvariantError:  child > total or poverty > child.
    """
    line = line.rstrip("\r\n")
    if len(line) < MIN_LINE_LENGTH:
        raise LineTooShortError(
            f"line is {len(line)} characters, fixed-width fields need {MIN_LINE_LENGTH}"
        )

    return StateRecord(
        state_code=_int_field(line, STATE_CODE_COLUMNS, "state code"),
        total_population=_int_field(line, TOTAL_POPULATION_COLUMNS, "total population"),
        child_population=_int_field(line, CHILD_POPULATION_COLUMNS, "child population"),
        child_poverty_population=_int_field(line, CHILD_POVERTY_POPULATION_COLUMNS, "child poverty population"),
    )
