"""Bounds-checked reads over an in-memory bookmark blob."""

import struct

from yk_bmdata.errors import MalformedRecord, OutOfBounds


class ByteCursor:
    """Random-access little-endian reader.

    Offsets are relative to ``base``, the way every offset stored inside a
    bookmark is relative to the start of its data section. Reads never go
    past ``limit`` (the end of the blob) and raise OutOfBounds instead.
    """

    def __init__(self, data, base=0, limit=None):
        self._data = memoryview(data).cast('B')
        if limit is None:
            limit = len(self._data)
        self.base = base
        self.limit = min(limit, len(self._data))

    def __len__(self):
        return max(self.limit - self.base, 0)

    def rebase(self, base, limit=None):
        return ByteCursor(self._data, base, self.limit if limit is None else limit)

    def check(self, offset, length):
        if offset < 0 or length < 0 or self.base + offset + length > self.limit:
            raise OutOfBounds(offset, length)

    def read_bytes(self, offset, length):
        self.check(offset, length)
        start = self.base + offset
        return self._data[start:start + length].tobytes()

    def _unpack(self, fmt, offset):
        size = struct.calcsize(fmt)
        return struct.unpack(fmt, self.read_bytes(offset, size))[0]

    def read_u8(self, offset):
        return self._unpack('<B', offset)

    def read_u16(self, offset):
        return self._unpack('<H', offset)

    def read_u32(self, offset):
        return self._unpack('<I', offset)

    def read_u64(self, offset):
        return self._unpack('<Q', offset)

    def read_string(self, offset, length, cstring=False):
        raw = self.read_bytes(offset, length)
        if cstring:
            raw = raw.split(b'\x00', 1)[0]
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedRecord(offset, 'invalid UTF-8 string ({})'.format(e.reason))

    def parse(self, layout, offset):
        """Parse a fixed-size construct layout at offset."""
        return layout.parse(self.read_bytes(offset, layout.sizeof()))
