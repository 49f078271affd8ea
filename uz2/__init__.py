"""
uz2: compress Unreal packages for UT2004 redirect downloads.

A .uz2 file is a plain sequence of records, one per 32 KiB chunk of the
source package:

- compressed_length u32 (little endian)
- raw_length u32 (little endian, at most 32768)
- compressed_length bytes of zlib data

There is no file header, footer or record count; consumers read records
until end of file. The package signature (C1 83 2A 9E) is checked before
anything is written, and the signature bytes are compressed as part of the
first chunk.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "codec",
    "signature",
    "records",
    "writer",
]

# Programmatic API: uz2.writer.compress_stream/compress_file, or
# uz2.cli.cmd_compress which mirrors the command line.
