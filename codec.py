"""Binary codec for the aggregate file shared by the analyze and report steps.

Each record is five big-endian fields with no header, no separator and no
record count:

    state_code                int32
    total_population          int32
    child_population          int32
    child_poverty_population  int32
    child_poverty_percentage  float64   (derived, stored for the report)

Module:     from codec import write_aggregate, read_aggregate
"""

from __future__ import annotations

import io
import logging
import struct
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from records import ReportRecord, StateRecord

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration constants
# ---------------------------------------------------------------------------

RECORD_FORMAT: str = ">iiiid"
RECORD_STRUCT = struct.Struct(RECORD_FORMAT)
RECORD_SIZE: int = RECORD_STRUCT.size   # 24 bytes


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_record(record: StateRecord) -> bytes:
    return RECORD_STRUCT.pack(
        record.state_code,
        record.total_population,
        record.child_population,
        record.child_poverty_population,
        record.child_poverty_percentage,
    )


def encode_records(records: Iterable[StateRecord]) -> bytes:
    return b"".join(encode_record(r) for r in records)


def write_records(stream: BinaryIO, records: Iterable[StateRecord]) -> int:
    """Write records to an open binary stream.  Returns the number written."""
    count = 0
    for record in records:
        stream.write(encode_record(record))
        count += 1
    return count


def write_aggregate(path: str | Path, records: Iterable[StateRecord]) -> int:
    """Create/truncate path and write every record to it."""
    with open(path, "wb") as fh:
        count = write_records(fh, records)
    logger.info("codec: wrote %d records (%d bytes) to %s", count, count * RECORD_SIZE, path)
    return count


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_record(chunk: bytes) -> ReportRecord:
    state_code, total, child, poverty, percentage = RECORD_STRUCT.unpack(chunk)
    return ReportRecord(
        state_code=state_code,
        total_population=total,
        child_population=child,
        child_poverty_population=poverty,
        child_poverty_percentage=percentage,
    )


def iter_records(stream: BinaryIO, limit: int | None = None) -> Iterator[ReportRecord]:
    """Lazily decode records until the stream runs out or limit is reached.

    End of stream, including mid-record, ends the sequence without error.
    A limit of zero or below yields nothing.
    """
    count = 0
    while limit is None or count < limit:
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) < RECORD_SIZE:
            if chunk:
                logger.warning("codec: ignoring %d trailing bytes (partial record)", len(chunk))
            return
        yield decode_record(chunk)
        count += 1


def decode_records(data: bytes, limit: int | None = None) -> list[ReportRecord]:
    """Decode an in-memory aggregate file."""
    return list(iter_records(io.BytesIO(data), limit=limit))


def read_aggregate(path: str | Path, limit: int | None = None) -> Iterator[ReportRecord]:
    """Yield records from an aggregate file; the file closes when iteration ends."""
    with open(path, "rb") as fh:
        yield from iter_records(fh, limit=limit)
