"""Errors raised while decoding bookmark data."""


class BookmarkError(Exception):
    """Base class of every decoding error."""


class InvalidMagic(BookmarkError):
    def __init__(self, magic):
        self.magic = magic
        super().__init__('not bookmark data (magic {!r})'.format(magic))


class TruncatedHeader(BookmarkError):
    def __init__(self, size, reason='buffer shorter than the bookmark header'):
        self.size = size
        self.reason = reason
        super().__init__('{} ({} bytes)'.format(reason, size))


class OutOfBounds(BookmarkError):
    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        super().__init__('read of {} bytes at offset 0x{:x} is out of bounds'.format(length, offset))


class CyclicToc(BookmarkError):
    def __init__(self, offset):
        self.offset = offset
        super().__init__('ToC chain revisits offset 0x{:x}'.format(offset))


class TooDeeplyNested(BookmarkError):
    def __init__(self, offset, depth):
        self.offset = offset
        self.depth = depth
        super().__init__('record at offset 0x{:x} nested deeper than {}'.format(offset, depth))


class MalformedRecord(BookmarkError):
    def __init__(self, offset, reason):
        self.offset = offset
        self.reason = reason
        super().__init__('malformed record at offset 0x{:x}: {}'.format(offset, reason))
