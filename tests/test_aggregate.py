"""Tests for aggregate.py – dedup, first-seen order, bounded reads, abort."""

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from aggregate import (  # noqa: E402
    aggregate,
    check_input_file,
    parse_limit,
    read_census_data,
    run_aggregate,
)
from codec import read_aggregate  # noqa: E402
from conftest import ALABASTER_LINE, district_line  # noqa: E402
from records import PopulationInvariantError  # noqa: E402


def _totals(records) -> dict[int, tuple[int, int, int]]:
    return {
        r.state_code: (r.total_population, r.child_population, r.child_poverty_population)
        for r in records
    }


# ---------------------------------------------------------------------------
# Core aggregation
# ---------------------------------------------------------------------------


class TestAggregate:
    def test_same_state_merged(self):
        lines = [district_line(1, 100, 50, 10), district_line(1, 200, 80, 20)]
        result = aggregate(lines)
        assert len(result) == 1
        assert _totals(result) == {1: (300, 130, 30)}

    def test_first_seen_order(self):
        lines = [
            district_line(6, 10, 5, 1),
            district_line(2, 10, 5, 1),
            district_line(6, 10, 5, 1),
            district_line(1, 10, 5, 1),
        ]
        assert [r.state_code for r in aggregate(lines)] == [6, 2, 1]

    def test_sample_lines(self, sample_lines: list[str]):
        result = aggregate(sample_lines)
        assert _totals(result) == {1: (36754, 7475, 983), 2: (10000, 2000, 100)}

    def test_order_within_state_does_not_change_totals(self, sample_lines: list[str]):
        reordered = [sample_lines[2], sample_lines[1], sample_lines[0]]
        assert _totals(aggregate(reordered)) == _totals(aggregate(sample_lines))

    def test_empty_input(self):
        assert aggregate([]) == []

    def test_more_than_sixty_states(self):
        lines = [district_line(code, 10, 5, 1) for code in range(1, 81)]
        assert len(aggregate(lines)) == 80

    def test_unknown_state_code_kept_and_logged(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            result = aggregate([district_line(99, 10, 5, 1)])
        assert result[0].state_code == 99
        assert "unknown state code 99" in caplog.text


# ---------------------------------------------------------------------------
# Bounded reads
# ---------------------------------------------------------------------------


class TestLimit:
    def test_limit_stops_early(self, sample_lines: list[str]):
        result = aggregate(sample_lines, limit=2)
        assert _totals(result) == {1: (31754, 6475, 733), 2: (10000, 2000, 100)}

    def test_limit_zero(self, sample_lines: list[str]):
        assert aggregate(sample_lines, limit=0) == []

    def test_negative_limit_same_as_zero(self, sample_lines: list[str]):
        assert aggregate(sample_lines, limit=-1) == []

    def test_limit_above_line_count(self, sample_lines: list[str]):
        assert aggregate(sample_lines, limit=1000) == aggregate(sample_lines)

    def test_limit_does_not_read_past_bound(self):
        # the bad third line is never parsed
        lines = [district_line(1, 10, 5, 1), district_line(2, 10, 5, 1), "garbage"]
        assert len(aggregate(lines, limit=2)) == 2

    def test_zero_limit_reads_nothing(self):
        consumed = []

        def source():
            for line in [district_line(1, 10, 5, 1)]:
                consumed.append(line)
                yield line

        aggregate(source(), limit=0)
        assert consumed == []


# ---------------------------------------------------------------------------
# All-or-nothing errors
# ---------------------------------------------------------------------------


class TestAbort:
    def test_parse_error_aborts(self):
        lines = [district_line(1, 10, 5, 1), ALABASTER_LINE[:50]]
        with pytest.raises(IndexError):
            aggregate(lines)

    def test_non_numeric_field_aborts(self):
        bad = ALABASTER_LINE[:100] + "     7x3" + ALABASTER_LINE[108:]
        with pytest.raises(ValueError):
            aggregate([ALABASTER_LINE, bad])

    def test_invalid_later_line_aborts(self):
        lines = [district_line(1, 100, 10, 10), district_line(1, 100, 0, 5)]
        with pytest.raises(PopulationInvariantError) as exc:
            aggregate(lines)
        assert (exc.value.total_population, exc.value.child_population, exc.value.child_poverty_population) == (
            100, 0, 5,
        )

    def test_state_total_beyond_int32_aborts(self):
        # 22 x 99,999,999 overflows a 4-byte signed count
        lines = [district_line(1, 99_999_999, 0, 0) for _ in range(22)]
        with pytest.raises(ValidationError):
            aggregate(lines)

    def test_state_total_below_int32_allowed(self):
        lines = [district_line(1, 99_999_999, 0, 0) for _ in range(21)]
        assert aggregate(lines)[0].total_population == 2_099_999_979


# ---------------------------------------------------------------------------
# File entry points
# ---------------------------------------------------------------------------


class TestFiles:
    def test_check_input_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            check_input_file(tmp_path / "nope.txt")

    def test_check_input_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            check_input_file(tmp_path)

    def test_read_census_data(self, census_file: Path):
        assert [r.state_code for r in read_census_data(census_file)] == [1, 2]

    def test_crlf_line_endings(self, tmp_path: Path, sample_lines: list[str]):
        path = tmp_path / "dos.txt"
        path.write_bytes(("\r\n".join(sample_lines) + "\r\n").encode("latin-1"))
        assert len(read_census_data(path)) == 2

    def test_non_ascii_district_name_keeps_offsets(self, tmp_path: Path):
        line = district_line(35, 1000, 200, 50, "Española Public Schools")
        path = tmp_path / "nm.txt"
        path.write_text(line + "\n", encoding="latin-1")
        assert _totals(read_census_data(path)) == {35: (1000, 200, 50)}

    def test_run_aggregate_end_to_end(self, tmp_path: Path):
        path = tmp_path / "in.txt"
        path.write_text(
            ALABASTER_LINE + "\n" + district_line(2, 10000, 2000, 100) + "\n",
            encoding="latin-1",
        )
        out = tmp_path / "out.dat"
        records = run_aggregate(path, out)
        assert len(records) == 2
        assert out.stat().st_size == 48

        decoded = list(read_aggregate(out))
        assert [d.state_code for d in decoded] == [1, 2]
        assert decoded[0].total_population == 31754
        assert decoded[0].child_population == 6475
        assert decoded[0].child_poverty_population == 733
        assert decoded[0].child_poverty_percentage == pytest.approx(11.3205, abs=1e-4)
        assert decoded[1].child_poverty_percentage == pytest.approx(5.0)

    def test_run_aggregate_missing_input_writes_nothing(self, tmp_path: Path):
        out = tmp_path / "out.dat"
        with pytest.raises(FileNotFoundError):
            run_aggregate(tmp_path / "missing.txt", out)
        assert not out.exists()

    def test_run_aggregate_parse_error_writes_nothing(self, tmp_path: Path):
        path = tmp_path / "in.txt"
        path.write_text(ALABASTER_LINE + "\nshort line\n", encoding="latin-1")
        out = tmp_path / "out.dat"
        with pytest.raises(IndexError):
            run_aggregate(path, out)
        assert not out.exists()


class TestParseLimit:
    def test_none(self):
        assert parse_limit(None) is None

    def test_integer(self):
        assert parse_limit("5") == 5
        assert parse_limit("-2") == -2

    def test_garbage(self):
        with pytest.raises(ValueError, match="record count"):
            parse_limit("ten")
