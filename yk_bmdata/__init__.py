"""Decoder for macOS bookmark data (the "book" blobs stored in plists)."""

from yk_bmdata.bookmark import Bookmark, build, decode
from yk_bmdata.consts import ResourceFlags, VolumeFlags
from yk_bmdata.cursor import ByteCursor
from yk_bmdata.errors import (
    BookmarkError,
    CyclicToc,
    InvalidMagic,
    MalformedRecord,
    OutOfBounds,
    TooDeeplyNested,
    TruncatedHeader,
)
from yk_bmdata.header import Header, parse_header
from yk_bmdata.records import RecordDecoder
from yk_bmdata.toc import Toc, TocBlock, parse_toc
from yk_bmdata.values import URL, MacDate, PropertyFlags, Unrecognized

__author__ = 'yk'
__version__ = '0.2.0'
__reference1__ = "http://michaellynn.github.io/2015/10/24/apples-bookmarkdata-exposed/"
__reference2__ = "Simon Key - Mac OS X - Delving a Little Deeper"

__all__ = [
    'Bookmark', 'build', 'decode',
    'ResourceFlags', 'VolumeFlags',
    'ByteCursor',
    'BookmarkError', 'CyclicToc', 'InvalidMagic', 'MalformedRecord', 'OutOfBounds', 'TooDeeplyNested',
    'TruncatedHeader',
    'Header', 'parse_header',
    'RecordDecoder',
    'Toc', 'TocBlock', 'parse_toc',
    'URL', 'MacDate', 'PropertyFlags', 'Unrecognized',
]
