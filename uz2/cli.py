from __future__ import annotations

import sys
import argparse

from typing import List, Optional

from uz2.codec import CompressionLevel
from uz2.errors import Uz2Error
from uz2.writer import ChunkStats, CompressSummary, compress_file


def _print_progress(stats: ChunkStats) -> None:
    """Print one line per compressed chunk.

    Args:
        stats: Sizes for the chunk just written plus the running byte count.
    """
    pct = stats.percent_complete
    if pct is None:
        print(f"compressed {stats.raw_length} bytes to {stats.compressed_length} bytes ({stats.ratio}%)")
    else:
        print(
            f"compressed {stats.raw_length} bytes to {stats.compressed_length} bytes "
            f"({stats.ratio}%, {pct}% complete)"
        )


def cmd_compress(infile: str, *, outfile: Optional[str] = None, harder: bool = False, verbose: bool = False) -> CompressSummary:
    """Compress an Unreal package to .uz2.

    Args:
        infile: Path to the package to compress.
        outfile: Destination path; defaults to infile + ".uz2".
        harder: Use maximum deflate level instead of the zlib default.
        verbose: Print per-chunk progress to stdout.

    Returns:
        Chunk and byte counts for the written file.
    """
    level = CompressionLevel.from_harder(harder)
    return compress_file(infile, outfile, level, progress=_print_progress if verbose else None)


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="uz2",
        description="uz2 - UT2004 data compressor",
        epilog="Writes infile.uz2 unless -o is given.",
    )
    ap.add_argument("-v", dest="verbose", action="store_true", help="verbose mode")
    ap.add_argument("-t", dest="harder", action="store_true", help="try to compress harder")
    ap.add_argument("-o", dest="outfile", metavar="outfile", help="specify output file (otherwise infile.uz2)")
    ap.add_argument("infile", help="Unreal package to compress")

    args = ap.parse_args(argv)
    try:
        cmd_compress(args.infile, outfile=args.outfile, harder=args.harder, verbose=args.verbose)
    except FileNotFoundError as e:
        print(f"Error: unable to open '{e.filename}': {e.strerror}", file=sys.stderr)
        sys.exit(2)
    except MemoryError:
        print("Error: out of memory", file=sys.stderr)
        sys.exit(2)
    except (Uz2Error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    sys.exit(0)


if __name__ == "__main__":
    main()
