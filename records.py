"""Data model shared by the aggregation and report steps.

Module:     from records import StateRecord, ReportRecord, PopulationInvariantError
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Configuration constants
# ---------------------------------------------------------------------------

INT32_MAX: int = 2**31 - 1   # counts travel as 4-byte signed ints on the wire


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class PopulationInvariantError(Exception):
    """A sub-population would exceed the population that contains it.

    Carries the three resulting counts so the caller can report them.
    """

    def __init__(self, total_population: int, child_population: int, child_poverty_population: int) -> None:
        self.total_population = total_population
        self.child_population = child_population
        self.child_poverty_population = child_poverty_population
        super().__init__(self._message())

    def _message(self) -> str:
        return (
            "Invalid argument -->\n"
            "Resulting child population or child poverty population\n"
            "would exceed total population.\n"
            + "-" * 66 + "\n"
            f"                  Total Population:  {self.total_population}\n"
            f"        Resultant Child Population:  {self.child_population}\n"
            f"Resultant Child Poverty Population:  {self.child_poverty_population}"
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def poverty_percentage(child_population: int, child_poverty_population: int) -> float:
    """100 × poverty / child.  NaN when there are no children to divide by."""
    if child_population == 0:
        return math.nan
    return 100 * child_poverty_population / child_population


def check_containment(total_population: int, child_population: int, child_poverty_population: int) -> None:
    """Raise PopulationInvariantError unless poverty <= child <= total."""
    if child_population > total_population or child_poverty_population > child_population:
        raise PopulationInvariantError(total_population, child_population, child_poverty_population)


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class StateRecord(BaseModel):
    """One district line, or the running total for every district of a state."""
    model_config = ConfigDict(frozen=True)

    state_code: int = Field(ge=0, le=INT32_MAX)
    total_population: int = Field(ge=0, le=INT32_MAX)
    child_population: int = Field(ge=0, le=INT32_MAX)
    child_poverty_population: int = Field(ge=0, le=INT32_MAX)

    @model_validator(mode="after")
    def _check_containment(self) -> StateRecord:
        check_containment(self.total_population, self.child_population, self.child_poverty_population)
        return self

    @property
    def child_poverty_percentage(self) -> float:
        return poverty_percentage(self.child_population, self.child_poverty_population)

    def add(self, total_population: int, child_population: int, child_poverty_population: int) -> StateRecord:
        """Return a new record with the counts added.  The receiver is left as-is."""
        total = self.total_population + total_population
        child = self.child_population + child_population
        poverty = self.child_poverty_population + child_poverty_population
        check_containment(total, child, poverty)
        return StateRecord(
            state_code=self.state_code,
            total_population=total,
            child_population=child,
            child_poverty_population=poverty,
        )

    def merge(self, other: StateRecord) -> StateRecord:
        """Fold another district of the same state into this one."""
        if other.state_code != self.state_code:
            raise ValueError(f"cannot merge state {other.state_code:02d} into state {self.state_code:02d}")
        return self.add(other.total_population, other.child_population, other.child_poverty_population)


class ReportRecord(BaseModel):
    """Read-only copy of one record decoded from the aggregate file.

    child_poverty_percentage is the value stored on the wire, not recomputed.
    """
    model_config = ConfigDict(frozen=True)

    state_code: int
    total_population: int
    child_population: int
    child_poverty_population: int
    child_poverty_percentage: float

    @classmethod
    def from_state_record(cls, record: StateRecord) -> ReportRecord:
        return cls(
            state_code=record.state_code,
            total_population=record.total_population,
            child_population=record.child_population,
            child_poverty_population=record.child_poverty_population,
            child_poverty_percentage=record.child_poverty_percentage,
        )
