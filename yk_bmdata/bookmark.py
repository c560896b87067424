import collections.abc
import logging
import os
import types
import uuid

from yk_bmdata import consts
from yk_bmdata.cursor import ByteCursor
from yk_bmdata.errors import BookmarkError, MalformedRecord
from yk_bmdata.header import parse_header
from yk_bmdata.records import RecordDecoder
from yk_bmdata.structs import PropertyBlob
from yk_bmdata.toc import is_custom_key, parse_toc
from yk_bmdata.values import URL, MacDate, PropertyFlags

log = logging.getLogger(__name__)


class _Mismatch(Exception):
    pass


def _string(value):
    if not isinstance(value, str):
        raise _Mismatch('expected a string')
    return value


def _integer(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise _Mismatch('expected an integer')
    return value


def _boolean(value):
    if not isinstance(value, bool):
        raise _Mismatch('expected a boolean')
    return value


def _date(value):
    if not isinstance(value, MacDate):
        raise _Mismatch('expected a date')
    return value


def _blob(value):
    if not isinstance(value, bytes):
        raise _Mismatch('expected data')
    return value


def _string_list(value):
    if type(value) is not tuple:
        raise _Mismatch('expected an array')
    return tuple(_string(item) for item in value)


def _integer_list(value):
    if type(value) is not tuple:
        raise _Mismatch('expected an array')
    return tuple(_integer(item) for item in value)


def _uuid(value):
    # volUUID is normally stored as a string
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(_string(value))
    except ValueError:
        raise _Mismatch('string is not a UUID')


def _url(value):
    if isinstance(value, URL):
        return value
    return URL(None, _string(value))


def _properties(value):
    value = _blob(value)
    if len(value) != PropertyBlob.sizeof():
        raise _Mismatch('property flags of {} bytes'.format(len(value)))
    props = PropertyBlob.parse(value)
    return PropertyFlags(props.flags, props.valid, props.reserved)


def _extension(value):
    # sandbox extensions are NUL terminated data
    if isinstance(value, bytes):
        try:
            value = value.split(b'\x00', 1)[0].decode('utf-8')
        except UnicodeDecodeError:
            raise _Mismatch('extension is not UTF-8')
    return _string(value).rstrip('\x00')


# attribute -> (ToC key, conversion)
FIELDS = collections.OrderedDict([
    ('path_components', (consts.KEY_PATH, _string_list)),
    ('cnid_path', (consts.KEY_CNID_PATH, _integer_list)),
    ('target_properties', (consts.KEY_FILE_PROPERTIES, _properties)),
    ('file_name', (consts.KEY_FILE_NAME, _string)),
    ('file_id', (consts.KEY_FILE_ID, _integer)),
    ('creation_date', (consts.KEY_CREATION_DATE, _date)),
    ('volume_path', (consts.KEY_VOLUME_PATH, _string)),
    ('volume_url', (consts.KEY_VOLUME_URL, _url)),
    ('volume_name', (consts.KEY_VOLUME_NAME, _string)),
    ('volume_uuid', (consts.KEY_VOLUME_UUID, _uuid)),
    ('volume_size', (consts.KEY_VOLUME_SIZE, _integer)),
    ('volume_creation_date', (consts.KEY_VOLUME_CREATION_DATE, _date)),
    ('volume_properties', (consts.KEY_VOLUME_PROPERTIES, _properties)),
    ('volume_is_root', (consts.KEY_VOLUME_IS_ROOT, _boolean)),
    ('volume_mount_point', (consts.KEY_VOLUME_MOUNT_POINT, _url)),
    ('containing_folder_index', (consts.KEY_CONTAINING_FOLDER, _integer)),
    ('username', (consts.KEY_USERNAME, _string)),
    ('uid', (consts.KEY_UID, _integer)),
    ('was_file_reference', (consts.KEY_WAS_FILE_REFERENCE, _boolean)),
    ('creation_options', (consts.KEY_CREATION_OPTIONS, _integer)),
    ('localized_name', (consts.KEY_DISPLAY_NAME, _string)),
    ('bookmark_creation_date', (consts.KEY_BOOKMARK_CREATION_DATE, _date)),
    ('security_extension_rw', (consts.KEY_SANDBOX_RW_EXTENSION, _extension)),
    ('security_extension_ro', (consts.KEY_SANDBOX_RO_EXTENSION, _extension)),
    ('alias_data', (consts.KEY_ALIAS_DATA, _blob)),
])


def _named(name, doc):
    return property(lambda self: self._fields.get(name), doc=doc)


class Bookmark(collections.abc.Mapping):
    """Decoded bookmark data.

    A read-only mapping of ToC key -> value. Standard keys are ints (see
    consts.KEY_*), custom keys are the strings they are named by. Well-known
    keys are also available as attributes, which are None when the key is
    missing or holds a value of the wrong type.
    """

    def __init__(self, header, values, fields, errors=None, toc_ids=()):
        object.__setattr__(self, '_header', header)
        object.__setattr__(self, '_values', dict(values))
        object.__setattr__(self, '_fields', dict(fields))
        object.__setattr__(self, '_errors', dict(errors or {}))
        object.__setattr__(self, '_toc_ids', tuple(toc_ids))

    @classmethod
    def from_bytes(cls, raw_data, **options):
        return decode(raw_data, **options)

    def __setattr__(self, name, value):
        raise AttributeError('Bookmark is read-only')

    def __delattr__(self, name):
        raise AttributeError('Bookmark is read-only')

    def __getitem__(self, key):
        return self._values[key]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return '<Bookmark path={!r} volume={!r} keys={}>'.format(self.path, self.volume_name, len(self))

    @property
    def header(self):
        return self._header

    @property
    def toc_ids(self):
        return self._toc_ids

    @property
    def errors(self):
        """ToC key -> error for records that could not be decoded."""
        return types.MappingProxyType(self._errors)

    def key_name(self, key):
        return consts.key_name(key)

    path_components = _named('path_components', 'Path components of the target, from the volume root.')
    cnid_path = _named('cnid_path', 'Catalog node IDs matching path_components.')
    target_properties = _named('target_properties', 'PropertyFlags of the target (resourceProps).')
    file_name = _named('file_name', None)
    file_id = _named('file_id', None)
    creation_date = _named('creation_date', 'Creation date of the target as a MacDate.')
    volume_path = _named('volume_path', None)
    volume_url = _named('volume_url', None)
    volume_name = _named('volume_name', None)
    volume_uuid = _named('volume_uuid', 'uuid.UUID of the volume holding the target.')
    volume_size = _named('volume_size', None)
    volume_creation_date = _named('volume_creation_date', None)
    volume_properties = _named('volume_properties', 'PropertyFlags of the volume (volProps).')
    volume_is_root = _named('volume_is_root', None)
    volume_mount_point = _named('volume_mount_point', None)
    containing_folder_index = _named('containing_folder_index', 'Index into path_components of the containing folder.')
    username = _named('username', None)
    uid = _named('uid', None)
    was_file_reference = _named('was_file_reference', None)
    creation_options = _named('creation_options', None)
    localized_name = _named('localized_name', 'Display name of the target.')
    bookmark_creation_date = _named('bookmark_creation_date', None)
    security_extension_rw = _named('security_extension_rw', 'Sandbox read-write extension token.')
    security_extension_ro = _named('security_extension_ro', 'Sandbox read-only extension token.')
    alias_data = _named('alias_data', None)

    @property
    def path(self):
        """path_components joined with the platform separator."""
        if self.path_components is None:
            return None
        return os.path.join(os.sep, *self.path_components)

    @property
    def target_flags(self):
        if self.target_properties is None:
            return None
        return consts.ResourceFlags(self.target_properties.flags)

    @property
    def volume_flags(self):
        if self.volume_properties is None:
            return None
        return consts.VolumeFlags(self.volume_properties.flags)


def build(cursor, header, toc, max_depth=consts.DEFAULT_MAX_DEPTH, duplicate_keys='last', type_mismatch='absent'):
    """Decode every ToC entry and assemble a Bookmark.

    cursor must be based at the data section. A record whose frame lies out
    of bounds is fatal; any other failure only drops that key. duplicate_keys
    applies to custom keys that resolve to the same name.
    """
    if duplicate_keys not in consts.DUPLICATE_POLICIES:
        raise ValueError('duplicate_keys must be one of {}'.format(', '.join(consts.DUPLICATE_POLICIES)))
    if type_mismatch not in consts.MISMATCH_POLICIES:
        raise ValueError('type_mismatch must be one of {}'.format(', '.join(consts.MISMATCH_POLICIES)))

    decoder = RecordDecoder(cursor, max_depth=max_depth)
    values = {}
    errors = {}
    for key, offset in toc:
        decoder.read_record(offset)
        if is_custom_key(key):
            key = _custom_key(decoder, key)
            if key in values or key in errors:
                log.debug('duplicate custom key {!r} at 0x{:x}'.format(key, offset))
                if duplicate_keys == 'error':
                    raise MalformedRecord(offset, 'duplicate custom key {!r}'.format(key))
                if duplicate_keys == 'first':
                    continue
                values.pop(key, None)
                errors.pop(key, None)
        try:
            values[key] = decoder.decode(offset)
        except BookmarkError as e:
            log.warning('skipping {}: {}'.format(consts.key_name(key), e))
            errors[key] = e

    fields = {}
    for name, (key, convert) in FIELDS.items():
        if key not in values:
            continue
        try:
            fields[name] = convert(values[key])
        except _Mismatch as e:
            if type_mismatch == 'error':
                raise MalformedRecord(toc[key], '{}: {}'.format(consts.key_name(key), e))
            log.warning('ignoring {}: {}'.format(consts.key_name(key), e))

    return Bookmark(header, values, fields, errors, [block.level for block in toc.blocks])


def _custom_key(decoder, key):
    try:
        name = decoder.decode(key & ~consts.CUSTOM_KEY_FLAG)
    except BookmarkError as e:
        log.warning('cannot resolve name of custom key 0x{:08x}: {}'.format(key, e))
        return key
    if not isinstance(name, str):
        log.warning('custom key 0x{:08x} is not named by a string'.format(key))
        return key
    return name


def decode(raw_data, max_depth=consts.DEFAULT_MAX_DEPTH, duplicate_keys='last', type_mismatch='absent'):
    """Decode a bookmark blob (the bytes of a "book" record) into a Bookmark."""
    header = parse_header(raw_data)
    cursor = ByteCursor(raw_data, header.data_offset, header.total_length)
    toc = parse_toc(cursor, header, duplicate_keys=duplicate_keys)
    return build(cursor, header, toc, max_depth=max_depth, duplicate_keys=duplicate_keys,
                 type_mismatch=type_mismatch)
