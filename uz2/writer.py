from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from .codec import Codec, CompressionLevel
from .constants import CHUNK_SIZE, OUTPUT_SUFFIX
from .errors import Uz2Error
from .records import write_record
from .signature import check_signature


@dataclass
class ChunkStats:
    index: int
    raw_length: int
    compressed_length: int
    bytes_read: int
    total_length: Optional[int] = None

    @property
    def ratio(self) -> int:
        return (self.compressed_length * 100) // self.raw_length

    @property
    def percent_complete(self) -> Optional[int]:
        if not self.total_length:
            return None
        return (self.bytes_read * 100) // self.total_length


@dataclass
class CompressSummary:
    chunks: int = 0
    bytes_in: int = 0
    bytes_out: int = 0


ProgressCallback = Callable[[ChunkStats], None]


def default_output_path(input_path: str) -> str:
    return input_path + OUTPUT_SUFFIX


def _seekable(f: BinaryIO) -> bool:
    try:
        return f.seekable()
    except (AttributeError, ValueError):
        return False


def measure_length(f: BinaryIO) -> Optional[int]:
    """Total stream length, or None when f cannot seek.

    Leaves a seekable stream positioned at offset 0.
    """
    if not _seekable(f):
        return None
    f.seek(0, io.SEEK_END)
    size = f.tell()
    f.seek(0)
    return size


def read_chunk(f: BinaryIO, size: int = CHUNK_SIZE, prefix: bytes = b"") -> bytes:
    """Read up to size bytes, looping over short reads until EOF."""
    buf = bytearray(prefix)
    while len(buf) < size:
        b = f.read(size - len(buf))
        if not b:
            break
        buf += b
    return bytes(buf)


def _compress_chunks(
    source: BinaryIO,
    sink: BinaryIO,
    level: CompressionLevel,
    *,
    head: bytes,
    progress: Optional[ProgressCallback],
) -> CompressSummary:
    # The signature is part of the first chunk. Seekable sources are re-read
    # from offset 0; otherwise the already consumed bytes are carried over.
    if _seekable(source):
        total = measure_length(source)
        pending = b""
    else:
        total = None
        pending = head

    codec = Codec(level)
    summary = CompressSummary()
    while True:
        raw = read_chunk(source, CHUNK_SIZE, pending)
        pending = b""
        if not raw:
            break
        enc = codec.compress(raw)
        summary.bytes_in += len(raw)
        summary.bytes_out += write_record(sink, enc, len(raw))
        if progress is not None:
            progress(
                ChunkStats(
                    index=summary.chunks,
                    raw_length=len(raw),
                    compressed_length=len(enc),
                    bytes_read=summary.bytes_in,
                    total_length=total,
                )
            )
        summary.chunks += 1
    return summary


def compress_stream(
    source: BinaryIO,
    sink: BinaryIO,
    level: CompressionLevel = CompressionLevel.DEFAULT,
    *,
    name: Optional[str] = None,
    progress: Optional[ProgressCallback] = None,
) -> CompressSummary:
    """Compress an Unreal package read from source into .uz2 records on sink.

    Args:
        source: Binary stream positioned at the start of the package.
        sink: Writable binary stream receiving the records.
        level: CompressionLevel.DEFAULT or CompressionLevel.MAXIMUM.
        name: Source name used in error messages.
        progress: Called once per record after it is written.

    Raises:
        InvalidSignatureError: source is not an Unreal package; nothing is written.
        OSError: a read or write failed.
    """
    head = check_signature(source, name)
    return _compress_chunks(source, sink, level, head=head, progress=progress)


def _same_file(a: str, b: str) -> bool:
    # Follows symlinks and catches hardlinks; a missing path is never the same file
    try:
        return os.path.samefile(a, b)
    except FileNotFoundError:
        return False


def compress_file(
    input_path: str,
    output_path: Optional[str] = None,
    level: CompressionLevel = CompressionLevel.DEFAULT,
    *,
    progress: Optional[ProgressCallback] = None,
) -> CompressSummary:
    """Compress input_path into output_path (default: input_path + ".uz2").

    The signature is checked before the output is created or truncated.
    If compression fails after that, the partial output is removed.
    """
    out = output_path or default_output_path(input_path)
    if _same_file(out, input_path):
        raise Uz2Error(f"refusing to overwrite input file '{input_path}'")
    with open(input_path, "rb") as rf:
        head = check_signature(rf, input_path)
        try:
            with open(out, "wb") as wf:
                return _compress_chunks(rf, wf, level, head=head, progress=progress)
        except BaseException:
            try:
                os.unlink(out)
            except FileNotFoundError:
                pass
            raise
