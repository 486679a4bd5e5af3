"""Shared fixtures for pipeline tests."""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so imports like `import records` work
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# A real line from the 2013 school district file (USSD13.txt).
ALABASTER_LINE = (
    "01 00190 Alabaster City School District".ljust(85)
    + "31754     6475      733 USSD13.txt 24NOV2014  "
)


def district_line(
    state: int,
    total: int,
    child: int,
    poverty: int,
    district: str = "Some School District",
) -> str:
    """Build a fixed-width line with each field right-aligned in its columns."""
    return (
        f"{state:02d} 00000 {district}".ljust(82)[:82]
        + f"{total:>8d}"
        + " "
        + f"{child:>8d}"
        + " "
        + f"{poverty:>8d}"
        + " USSD13.txt 24NOV2014  "
    )


@pytest.fixture
def sample_lines() -> list[str]:
    """Three districts across two states; state 01 appears twice."""
    return [
        ALABASTER_LINE,
        district_line(2, 10000, 2000, 100, "Anchorage School District"),
        district_line(1, 5000, 1000, 250, "Albertville City School District"),
    ]


@pytest.fixture
def census_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    path = tmp_path / "USSD13.txt"
    path.write_text("\n".join(sample_lines) + "\n", encoding="latin-1")
    return path
