"""Test helpers: encode bookmark blobs in the on-disk layout."""

import struct

import pytest

from yk_bmdata import consts


class BlobBuilder:
    """Builds the data section of a bookmark record by record.

    Offsets returned by the builder are relative to the data section, the
    way they are stored in the blob.
    """

    def __init__(self):
        self.body = bytearray(4)  # first ToC offset, set by build()

    def _align(self):
        while len(self.body) % 4:
            self.body.append(0)

    def record(self, data_type, payload=b''):
        self._align()
        offset = len(self.body)
        self.body += struct.pack('<II', len(payload), data_type) + payload
        return offset

    def string(self, text):
        return self.record(consts.STRING_UTF8, text.encode('utf-8'))

    def data(self, blob):
        return self.record(consts.DATA_BLOB, blob)

    def sint32(self, value):
        return self.record(consts.NUMBER_SINT32, struct.pack('<i', value))

    def sint64(self, value):
        return self.record(consts.NUMBER_SINT64, struct.pack('<q', value))

    def double(self, value):
        return self.record(consts.NUMBER_FLOAT64, struct.pack('<d', value))

    def date(self, seconds):
        return self.record(consts.DATE, struct.pack('>d', seconds))

    def boolean(self, value):
        return self.record(consts.BOOL_TRUE if value else consts.BOOL_FALSE)

    def uuid(self, value):
        return self.record(consts.UUID, value.bytes)

    def url(self, text):
        return self.record(consts.URL_ABSOLUTE, text.encode('utf-8'))

    def array(self, offsets):
        return self.record(consts.ARRAY, struct.pack('<{}I'.format(len(offsets)), *offsets))

    def dictionary(self, pairs):
        flat = [offset for pair in pairs for offset in pair]
        return self.record(consts.DICTIONARY, struct.pack('<{}I'.format(len(flat)), *flat))

    def properties(self, flags, valid, reserved=0):
        return self.data(struct.pack('<QQQ', flags, valid, reserved))

    def toc(self, entries, level=1, next_offset=0):
        """Append a ToC block of (key, offset) entries; returns its offset."""
        self._align()
        offset = len(self.body)
        self.body += struct.pack('<IIIII', 12 + 12 * len(entries), consts.TOC_MAGIC, level, next_offset,
                                 len(entries))
        for key, record_offset in entries:
            self.body += struct.pack('<III', key, record_offset, 0)
        return offset

    def patch_u32(self, offset, value):
        struct.pack_into('<I', self.body, offset, value)

    def build(self, first_toc, magic=b'book', version=0x410, data_offset=48, length=None):
        self.patch_u32(0, first_toc)
        total = data_offset + len(self.body)
        header = magic + struct.pack('<I', total if length is None else length)
        header += struct.pack('>I', version) + struct.pack('<I', data_offset)
        header += bytes(data_offset - len(header))
        return bytes(header + self.body)


@pytest.fixture
def builder():
    return BlobBuilder()


@pytest.fixture
def single_entry_blob(builder):
    target = builder.string('hello')
    first_toc = builder.toc([(consts.KEY_DISPLAY_NAME, target)])
    return builder.build(first_toc)
