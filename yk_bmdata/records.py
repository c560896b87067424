"""Decoding of typed data records.

A record is an 8 byte frame (length, type) followed by length bytes of
payload. Arrays, dictionaries and relative URLs hold offsets of other
records rather than values, so decoding them recurses back into the
decoder; the recursion is bounded by max_depth and by refusing to revisit
a record that is already being decoded further up the stack.

Decoded values are immutable (arrays are tuples, dictionaries are read-only
mappings), so a record referenced from several places is decoded once and
the same value is shared.
"""

import logging
import types
import uuid

from construct import Float32l, Float64b, Float64l, Int8sl, Int16sl, Int32sl, Int64sl

from yk_bmdata import consts
from yk_bmdata.errors import MalformedRecord, OutOfBounds, TooDeeplyNested
from yk_bmdata.structs import DataRecordHeader, offset_array
from yk_bmdata.values import URL, MacDate, Unrecognized

log = logging.getLogger(__name__)

_FLOATS = {4: Float32l, 8: Float64l}

# number subtype -> (construct fields by payload size)
_NUMBERS = {
    consts.NUMBER_SINT8: {1: Int8sl},
    consts.NUMBER_SINT16: {2: Int16sl},
    consts.NUMBER_SINT32: {4: Int32sl},
    consts.NUMBER_SINT64: {8: Int64sl},
    consts.NUMBER_FLOAT32: {4: Float32l},
    consts.NUMBER_FLOAT64: {8: Float64l},
    consts.NUMBER_CHAR: {1: Int8sl},
    consts.NUMBER_SHORT: {2: Int16sl},
    consts.NUMBER_INT: {4: Int32sl},
    consts.NUMBER_LONG: {4: Int32sl, 8: Int64sl},
    consts.NUMBER_LONGLONG: {8: Int64sl},
    consts.NUMBER_FLOAT: _FLOATS,
    consts.NUMBER_DOUBLE: _FLOATS,
    consts.NUMBER_CFINDEX: {4: Int32sl, 8: Int64sl},
    consts.NUMBER_NSINTEGER: {4: Int32sl, 8: Int64sl},
    consts.NUMBER_CGFLOAT: _FLOATS,
}


class RecordDecoder:
    """Decode records of one bookmark.

    cursor must be based at the data section. A decoder holds per-call
    state while decoding, so use one decoder per thread.
    """

    def __init__(self, cursor, max_depth=consts.DEFAULT_MAX_DEPTH):
        if not 0 <= max_depth <= consts.MAX_DEPTH_LIMIT:
            raise ValueError('max_depth must be between 0 and {}'.format(consts.MAX_DEPTH_LIMIT))
        self.cursor = cursor
        self.max_depth = max_depth
        self._active = set()
        # offset -> (value, height of the nesting below it)
        self._done = {}

    def read_record(self, offset):
        """Return (type, payload) of the record at offset."""
        frame = self.cursor.parse(DataRecordHeader, offset)
        payload_offset = offset + DataRecordHeader.sizeof()
        try:
            payload = self.cursor.read_bytes(payload_offset, frame.length)
        except OutOfBounds:
            raise OutOfBounds(offset, DataRecordHeader.sizeof() + frame.length)
        return frame.type, payload

    def decode(self, offset, depth=0):
        return self._decode(offset, depth)[0]

    def _decode(self, offset, depth):
        if depth > self.max_depth:
            raise TooDeeplyNested(offset, self.max_depth)
        if offset in self._done:
            value, height = self._done[offset]
            if depth + height > self.max_depth:
                raise TooDeeplyNested(offset, self.max_depth)
            return value, height
        if offset in self._active:
            raise MalformedRecord(offset, 'cyclic reference')
        if offset % 4:
            log.debug('record at 0x{:x} is not 4-byte aligned'.format(offset))

        data_type, payload = self.read_record(offset)
        self._active.add(offset)
        try:
            value, height = self._interpret(offset, data_type, payload, depth)
        finally:
            self._active.discard(offset)
        self._done[offset] = (value, height)
        return value, height

    def _children(self, offsets, depth):
        values = []
        height = 0
        for offset in offsets:
            value, below = self._decode(offset, depth + 1)
            values.append(value)
            height = max(height, below + 1)
        return values, height

    def _interpret(self, offset, data_type, payload, depth):
        """Return (value, height) of a record; height is 0 for scalars."""
        if data_type == consts.ARRAY:
            values, height = self._children(self._offsets(offset, payload), depth)
            return tuple(values), height

        elif data_type == consts.DICTIONARY:
            offsets = self._offsets(offset, payload)
            if len(offsets) % 2:
                raise MalformedRecord(offset, 'dictionary payload of {} bytes'.format(len(payload)))
            values, height = self._children(offsets, depth)
            result = {}
            for key, value in zip(values[::2], values[1::2]):
                result[_hashable(offset, key)] = value
            return types.MappingProxyType(result), height

        elif data_type == consts.URL_RELATIVE:
            offsets = self._offsets(offset, payload)
            if len(offsets) != 2:
                raise MalformedRecord(offset, 'relative URL with {} components'.format(len(offsets)))
            (base, relative), height = self._children(offsets, depth)
            if not isinstance(base, (URL, str)):
                raise MalformedRecord(offset, 'relative URL base is not a URL')
            if not isinstance(relative, str):
                raise MalformedRecord(offset, 'relative URL part is not a string')
            return URL(base, relative), height

        return self._scalar(offset, data_type, payload), 0

    def _scalar(self, offset, data_type, payload):
        if data_type == consts.STRING_UTF8:
            return self._string(offset, payload)

        elif data_type == consts.DATA_BLOB:
            return payload

        elif data_type in _NUMBERS:
            return self._number(offset, data_type, payload)

        elif data_type == consts.DATE:  # double, Big-Endian
            self._expect_size(offset, payload, 8, 'date')
            return MacDate(Float64b.parse(payload))

        elif data_type in (consts.BOOL_FALSE, consts.BOOL_TRUE):
            self._expect_size(offset, payload, 0, 'boolean')
            return data_type == consts.BOOL_TRUE

        elif data_type == consts.UUID:
            self._expect_size(offset, payload, 16, 'UUID')
            return uuid.UUID(bytes=payload)

        elif data_type == consts.URL_ABSOLUTE:
            return URL(None, self._string(offset, payload))

        elif data_type == consts.NULL:
            return None

        log.debug('record at 0x{:x} has unknown data type 0x{:04x} (family 0x{:04x})'.format(
            offset, data_type, data_type & consts.TYPE_MASK))
        return Unrecognized(data_type, payload)

    def _string(self, offset, payload):
        return self.cursor.read_string(offset + DataRecordHeader.sizeof(), len(payload))

    def _number(self, offset, data_type, payload):
        field = _NUMBERS[data_type].get(len(payload))
        if field is None:
            raise MalformedRecord(offset, 'number type 0x{:04x} with {} byte payload'.format(data_type, len(payload)))
        return field.parse(payload)

    def _offsets(self, offset, payload):
        if len(payload) % 4:
            raise MalformedRecord(offset, 'offset list of {} bytes'.format(len(payload)))
        return list(offset_array(len(payload) // 4).parse(payload))

    def _expect_size(self, offset, payload, size, what):
        if len(payload) != size:
            raise MalformedRecord(offset, '{} with {} byte payload'.format(what, len(payload)))


def _is_collection(value):
    return type(value) is tuple or isinstance(value, types.MappingProxyType)


def _hashable(offset, key):
    # only flat arrays and dictionaries can be keys; hashing nested ones is
    # not bounded when their elements are shared
    if isinstance(key, types.MappingProxyType):
        items = tuple(key.items())
        if any(_is_collection(item) for item in key.values()):
            raise MalformedRecord(offset, 'nested collection as dictionary key')
        return items
    if type(key) is tuple and any(_is_collection(item) for item in key):
        raise MalformedRecord(offset, 'nested collection as dictionary key')
    return key
