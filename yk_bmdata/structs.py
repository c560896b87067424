"""Fixed-size frames of the bookmark format, declared with construct."""

from construct import Array, Bytes, Int32ub, Int32ul, Int64ul, Struct

BookmarkHeader = Struct(
    'magic' / Bytes(4),
    'length' / Int32ul,
    'version' / Int32ub,
    'data_offset' / Int32ul,  # offset to "FirstToC Offset"
)

TocHeader = Struct(
    'length' / Int32ul,
    'magic' / Int32ul,  # 0xfffffffe
    'level' / Int32ul,  # ToC identifier
    'offset' / Int32ul,  # offset to next ToC (0 if none)
    'count' / Int32ul,
)

TocRecord = Struct(
    'key' / Int32ul,
    'offset' / Int32ul,  # offset to data record
    'reserved' / Int32ul,
)

DataRecordHeader = Struct(
    'length' / Int32ul,
    'type' / Int32ul,
)

# resourceProps / volProps: flags, flags asked for, reserved
PropertyBlob = Struct(
    'flags' / Int64ul,
    'valid' / Int64ul,
    'reserved' / Int64ul,
)


def offset_array(count):
    return Array(count, Int32ul)
