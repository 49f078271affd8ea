from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from .codec import compress_bound
from .constants import CHUNK_SIZE, RECORD_HEADER
from .errors import RecordBoundsError, TruncatedRecordError


# Record layout (no padding between records, no file header):
#  - compressed_length u32 LE
#  - raw_length u32 LE
#  - payload[compressed_length] (zlib container)


@dataclass
class Record:
    compressed_length: int
    raw_length: int
    payload: bytes

    def pack(self) -> bytes:
        return RECORD_HEADER.pack(self.compressed_length, self.raw_length) + self.payload


def check_record_bounds(compressed_length: int, raw_length: int) -> None:
    if not 0 < raw_length <= CHUNK_SIZE:
        raise RecordBoundsError(f"raw length {raw_length} outside 1..{CHUNK_SIZE}")
    bound = compress_bound(raw_length)
    if compressed_length > bound:
        raise RecordBoundsError(f"compressed length {compressed_length} exceeds bound {bound}")


def write_record(f: BinaryIO, payload: bytes, raw_length: int) -> int:
    """Write one record and return the number of bytes written."""
    check_record_bounds(len(payload), raw_length)
    data = Record(len(payload), raw_length, payload).pack()
    n = f.write(data)
    # Raw (unbuffered) sinks may accept fewer bytes than offered, or none (None)
    if n != len(data):
        raise OSError(f"short write: {n} of {len(data)} bytes")
    return len(data)


def read_exact(f: BinaryIO, n: int) -> bytes:
    b = f.read(n)
    if len(b) != n:
        raise TruncatedRecordError(f"unexpected EOF: wanted {n} bytes, got {len(b)}")
    return b


def read_record(f: BinaryIO) -> Optional[Record]:
    """Parse the next record without inflating it; None at a clean EOF."""
    fixed = f.read(RECORD_HEADER.size)
    if not fixed:
        return None
    if len(fixed) != RECORD_HEADER.size:
        raise TruncatedRecordError("unexpected EOF inside record header")
    compressed_length, raw_length = RECORD_HEADER.unpack(fixed)
    check_record_bounds(compressed_length, raw_length)
    payload = read_exact(f, compressed_length)
    return Record(compressed_length, raw_length, payload)


def iter_records(f: BinaryIO) -> Iterator[Record]:
    while True:
        rec = read_record(f)
        if rec is None:
            return
        yield rec
