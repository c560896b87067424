import collections
import logging

from yk_bmdata import consts
from yk_bmdata.errors import CyclicToc, MalformedRecord
from yk_bmdata.structs import TocHeader, TocRecord

log = logging.getLogger(__name__)

TocBlock = collections.namedtuple('TocBlock', 'offset length level next_offset count')


class Toc:
    """Every ToC block of a bookmark merged into one key -> record offset map."""

    def __init__(self, entries, blocks):
        self.entries = entries
        self.blocks = blocks

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries.items())

    def __getitem__(self, key):
        return self.entries[key]


def is_custom_key(key):
    return bool(key & consts.CUSTOM_KEY_FLAG)


def parse_toc(cursor, header, duplicate_keys='last', max_blocks=consts.MAX_TOC_BLOCKS):
    """Walk the ToC chain starting at header.toc_offset.

    cursor must be based at the data section. Record offsets are stored as
    found; they are bounds-checked when the record is decoded.
    """
    if duplicate_keys not in consts.DUPLICATE_POLICIES:
        raise ValueError('duplicate_keys must be one of {}'.format(', '.join(consts.DUPLICATE_POLICIES)))

    entries = collections.OrderedDict()
    blocks = []
    visited = set()
    offset = header.toc_offset
    if not offset:
        # offset 0 holds the first ToC offset itself, so there is no ToC
        log.warning('bookmark has no ToC (first ToC offset is 0)')
    while offset:
        if offset in visited or len(blocks) >= max_blocks:
            raise CyclicToc(offset)
        visited.add(offset)

        toc = cursor.parse(TocHeader, offset)
        if toc.magic != consts.TOC_MAGIC:
            log.warning('ToC at 0x{:x} has unexpected magic 0x{:08x}'.format(offset, toc.magic))
        blocks.append(TocBlock(offset, toc.length, toc.level, toc.offset, toc.count))
        log.debug('ToC {} at 0x{:x}: {} records, next at 0x{:x}'.format(toc.level, offset, toc.count, toc.offset))

        # length may under-report the record area, so trust count instead
        index_start = offset + TocHeader.sizeof()
        cursor.check(index_start, toc.count * TocRecord.sizeof())
        for index in range(toc.count):
            record = cursor.parse(TocRecord, index_start + index * TocRecord.sizeof())
            _add_entry(entries, record.key, record.offset, duplicate_keys)

        offset = toc.offset

    return Toc(entries, blocks)


def _add_entry(entries, key, offset, policy):
    if key in entries:
        log.debug('duplicate ToC key {} (0x{:x} and 0x{:x})'.format(consts.key_name(key), entries[key], offset))
        if policy == 'error':
            raise MalformedRecord(offset, 'duplicate ToC key 0x{:x}'.format(key))
        if policy == 'first':
            return
        # last one wins, but keep the key in its latest position
        del entries[key]
    entries[key] = offset
