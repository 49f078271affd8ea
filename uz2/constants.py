import struct


# Unreal package signature (0x9E2A83C1 little endian)
PACKAGE_MAGIC = bytes([0xC1, 0x83, 0x2A, 0x9E])

# Raw bytes per chunk; every record except the last holds exactly this many
CHUNK_SIZE = 0x8000

OUTPUT_SUFFIX = ".uz2"

# Record header: compressed_length u32, raw_length u32
RECORD_HEADER = struct.Struct("<II")
