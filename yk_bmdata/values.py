"""Python types for bookmark values that have no exact builtin counterpart."""

import collections
import datetime

from yk_bmdata import consts

MAC_EPOCH = datetime.datetime(2001, 1, 1, tzinfo=datetime.timezone.utc)


class MacDate(float):
    """Seconds since 2001-01-01 00:00:00 UTC (CFAbsoluteTime)."""

    def timestamp(self):
        return float(self) + consts.Cocoa_to_Epoch

    def to_datetime(self):
        return MAC_EPOCH + datetime.timedelta(seconds=float(self))

    def __repr__(self):
        return 'MacDate({!r})'.format(float(self))


class URL(collections.namedtuple('URL', 'base relative')):
    """A CFURL. Absolute URLs have no base."""

    __slots__ = ()

    def __str__(self):
        if self.base is None:
            return self.relative
        return '{}{}'.format(self.base, self.relative)


Unrecognized = collections.namedtuple('Unrecognized', 'type_tag payload')
Unrecognized.__doc__ = 'Record with a data type this decoder does not know; the payload is kept as is.'

PropertyFlags = collections.namedtuple('PropertyFlags', 'flags valid reserved')
