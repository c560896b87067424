import collections
import logging

from yk_bmdata import consts
from yk_bmdata.cursor import ByteCursor
from yk_bmdata.errors import InvalidMagic, OutOfBounds, TruncatedHeader
from yk_bmdata.structs import BookmarkHeader, TocHeader

log = logging.getLogger(__name__)

Header = collections.namedtuple('Header', 'magic total_length version data_offset toc_offset reserved')


def parse_header(raw_data):
    """Validate the bookmark header and locate the first ToC.

    toc_offset is relative to the data section (data_offset), like every
    other offset stored in the blob.
    """
    if len(raw_data) < consts.HEADER_SIZE:
        raise TruncatedHeader(len(raw_data))

    cursor = ByteCursor(raw_data)
    header = cursor.parse(BookmarkHeader, 0)
    if header.magic != consts.MAGIC:
        raise InvalidMagic(header.magic)
    if header.length > len(raw_data):
        raise OutOfBounds(0, header.length)
    if header.data_offset < consts.HEADER_SIZE:
        raise TruncatedHeader(header.data_offset, 'data offset inside the fixed header')
    if header.data_offset + 4 > header.length:
        raise TruncatedHeader(header.length, 'no room for the first ToC offset')

    cursor = ByteCursor(raw_data, limit=header.length)
    reserved = cursor.read_bytes(consts.HEADER_SIZE, header.data_offset - consts.HEADER_SIZE)
    data = cursor.rebase(header.data_offset)
    toc_offset = data.read_u32(0)
    data.check(toc_offset, TocHeader.sizeof())

    log.debug('bookmark header: length={} version=0x{:08x} data offset={} first ToC offset={}'.format(
        header.length, header.version, header.data_offset, toc_offset))
    return Header(header.magic, header.length, header.version, header.data_offset, toc_offset, reserved)
