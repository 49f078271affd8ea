from __future__ import annotations

import enum
import zlib

from .errors import RecordBoundsError


class CompressionLevel(enum.Enum):
    """The two deflate levels a .uz2 writer may use."""

    DEFAULT = zlib.Z_DEFAULT_COMPRESSION
    MAXIMUM = zlib.Z_BEST_COMPRESSION

    @classmethod
    def from_harder(cls, harder: bool) -> "CompressionLevel":
        return cls.MAXIMUM if harder else cls.DEFAULT


def compress_bound(n: int) -> int:
    """Worst-case size of a zlib container holding n input bytes.

    Same formula as zlib's compressBound().
    """
    return n + (n >> 12) + (n >> 14) + (n >> 25) + 13


class Codec:
    def __init__(self, level: CompressionLevel = CompressionLevel.DEFAULT):
        self.level = level

    def compress(self, data: bytes) -> bytes:
        # zlib container: 2-byte header, deflate stream, adler32 trailer
        out = zlib.compress(data, self.level.value)
        bound = compress_bound(len(data))
        if len(out) > bound:
            raise RecordBoundsError(
                f"compressed chunk is {len(out)} bytes, above the {bound} byte bound for {len(data)} input bytes"
            )
        return out
