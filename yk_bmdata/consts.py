import enum

__reference1__ = "http://michaellynn.github.io/2015/10/24/apples-bookmarkdata-exposed/"
__reference2__ = "https://mac-alias.readthedocs.io/en/latest/bookmark_fmt.html"

MAGIC = b'book'
HEADER_SIZE = 16  # magic, length, version, data offset
TOC_MAGIC = 0xfffffffe
CUSTOM_KEY_FLAG = 0x80000000

Cocoa_to_Epoch = 978307200  # 2001-01-01 00:00:00 UTC

DEFAULT_MAX_DEPTH = 32
MAX_DEPTH_LIMIT = 128  # stays well inside the interpreter recursion limit
MAX_TOC_BLOCKS = 256

DUPLICATE_POLICIES = ('last', 'first', 'error')
MISMATCH_POLICIES = ('absent', 'error')

# data types (high 24 bits = family, low 8 bits = subtype)
TYPE_MASK = 0xffffff00

STRING_UTF8 = 0x0101
DATA_BLOB = 0x0201
NUMBER_SINT8 = 0x0301
NUMBER_SINT16 = 0x0302
NUMBER_SINT32 = 0x0303
NUMBER_SINT64 = 0x0304
NUMBER_FLOAT32 = 0x0305
NUMBER_FLOAT64 = 0x0306
NUMBER_CHAR = 0x0307
NUMBER_SHORT = 0x0308
NUMBER_INT = 0x0309
NUMBER_LONG = 0x030a
NUMBER_LONGLONG = 0x030b
NUMBER_FLOAT = 0x030c
NUMBER_DOUBLE = 0x030d
NUMBER_CFINDEX = 0x030e
NUMBER_NSINTEGER = 0x030f
NUMBER_CGFLOAT = 0x0310
DATE = 0x0400
BOOL_FALSE = 0x0500
BOOL_TRUE = 0x0501
ARRAY = 0x0601
DICTIONARY = 0x0701
UUID = 0x0801
URL_ABSOLUTE = 0x0901
URL_RELATIVE = 0x0902
NULL = 0x0a01

# well-known ToC keys
KEY_PATH = 0x1004
KEY_CNID_PATH = 0x1005
KEY_FILE_PROPERTIES = 0x1010
KEY_FILE_NAME = 0x1020
KEY_FILE_ID = 0x1030
KEY_CREATION_DATE = 0x1040
KEY_TOC_PATH = 0x2000
KEY_VOLUME_PATH = 0x2002
KEY_VOLUME_URL = 0x2005
KEY_VOLUME_NAME = 0x2010
KEY_VOLUME_UUID = 0x2011
KEY_VOLUME_SIZE = 0x2012
KEY_VOLUME_CREATION_DATE = 0x2013
KEY_VOLUME_PROPERTIES = 0x2020
KEY_VOLUME_IS_ROOT = 0x2030
KEY_VOLUME_BOOKMARK = 0x2040
KEY_VOLUME_MOUNT_POINT = 0x2050
KEY_CONTAINING_FOLDER = 0xc001
KEY_USERNAME = 0xc011
KEY_UID = 0xc012
KEY_WAS_FILE_REFERENCE = 0xd001
KEY_CREATION_OPTIONS = 0xd010
KEY_URL_LENGTHS = 0xe003
KEY_DISPLAY_NAME = 0xf017
KEY_ICON_DATA = 0xf020
KEY_ICON_REF = 0xf021
KEY_TYPE_BINDING_DATA = 0xf022
KEY_BOOKMARK_CREATION_DATE = 0xf030
KEY_SANDBOX_RW_EXTENSION = 0xf080
KEY_SANDBOX_RO_EXTENSION = 0xf081
KEY_ALIAS_DATA = 0xfe00

RecordTypes = {
    KEY_PATH: 'filePath',  # pathComponents
    KEY_CNID_PATH: 'fileInodePath',  # fileIDs
    KEY_FILE_PROPERTIES: 'resourceProps',
    KEY_FILE_NAME: 'fileName',
    KEY_FILE_ID: 'fileID',
    KEY_CREATION_DATE: 'fileCreationDate',
    KEY_TOC_PATH: 'volInfoDepths',
    KEY_VOLUME_PATH: 'volPath',
    KEY_VOLUME_URL: 'volURL',
    KEY_VOLUME_NAME: 'volName',
    KEY_VOLUME_UUID: 'volUUID',
    KEY_VOLUME_SIZE: 'volSize',  # volCapacity
    KEY_VOLUME_CREATION_DATE: 'volCreationDate',
    KEY_VOLUME_PROPERTIES: 'volProps',
    KEY_VOLUME_IS_ROOT: 'volWasBoot',
    KEY_VOLUME_BOOKMARK: 'volBookmark',
    KEY_VOLUME_MOUNT_POINT: 'volMountURL',
    KEY_CONTAINING_FOLDER: 'volDepthCountHome',  # containing folder index
    KEY_USERNAME: 'username',
    KEY_UID: 'userUID',
    KEY_WAS_FILE_REFERENCE: 'wasFileReference',
    KEY_CREATION_OPTIONS: 'creationOptions',
    KEY_URL_LENGTHS: 'urlLengths',
    KEY_DISPLAY_NAME: 'displayName',
    KEY_ICON_DATA: 'iconData',
    KEY_ICON_REF: 'iconRef',  # Effective Flattened Icon Ref
    KEY_TYPE_BINDING_DATA: 'typeBindingData',
    KEY_BOOKMARK_CREATION_DATE: 'bookmarkCreationDate',
    KEY_SANDBOX_RW_EXTENSION: 'sandboxInfo',  # Sandbox RW Extension
    KEY_SANDBOX_RO_EXTENSION: 'sandboxInfoRO',
    KEY_ALIAS_DATA: 'aliasData',
}


def key_name(key):
    if isinstance(key, str):
        return key
    return RecordTypes.get(key, '0x{:04x}'.format(key))


class ResourceFlags(enum.IntFlag):
    """CFURL resource property flags (kCFURLResource*)."""
    IS_REGULAR_FILE = 0x00000001
    IS_DIRECTORY = 0x00000002
    IS_SYMBOLIC_LINK = 0x00000004
    IS_VOLUME = 0x00000008
    IS_PACKAGE = 0x00000010
    IS_SYSTEM_IMMUTABLE = 0x00000020
    IS_USER_IMMUTABLE = 0x00000040
    IS_HIDDEN = 0x00000080
    HAS_HIDDEN_EXTENSION = 0x00000100
    IS_APPLICATION = 0x00000200
    IS_COMPRESSED = 0x00000400
    CAN_SET_HIDDEN_EXTENSION = 0x00000800
    IS_READABLE = 0x00001000
    IS_WRITEABLE = 0x00002000
    IS_EXECUTABLE = 0x00004000
    IS_ALIAS_FILE = 0x00008000
    IS_MOUNT_TRIGGER = 0x00010000


class VolumeFlags(enum.IntFlag):
    """CFURL volume property flags (kCFURLVolume*)."""
    IS_LOCAL = 0x00000001
    IS_AUTOMOUNT = 0x00000002
    DONT_BROWSE = 0x00000004
    IS_READ_ONLY = 0x00000008
    IS_QUARANTINED = 0x00000010
    IS_EJECTABLE = 0x00000020
    IS_REMOVABLE = 0x00000040
    IS_INTERNAL = 0x00000080
    IS_EXTERNAL = 0x00000100
    IS_DISK_IMAGE = 0x00000200
    IS_FILE_VAULT = 0x00000400
    IS_LOCAL_IDISK_MIRROR = 0x00000800
    IS_IPOD = 0x00001000
    IS_IDISK = 0x00002000
    IS_CD = 0x00004000
    IS_DVD = 0x00008000
    IS_DEVICE_FILE_SYSTEM = 0x00010000
    SUPPORTS_PERSISTENT_IDS = 0x100000000
    SUPPORTS_SEARCH_FS = 0x200000000
    SUPPORTS_EXCHANGE = 0x400000000
    SUPPORTS_SYMBOLIC_LINKS = 0x1000000000
    SUPPORTS_DENY_MODES = 0x2000000000
    SUPPORTS_COPY_FILE = 0x4000000000
    SUPPORTS_READ_DIR_ATTR = 0x8000000000
    SUPPORTS_JOURNALING = 0x10000000000
    SUPPORTS_RENAME = 0x20000000000
    SUPPORTS_FAST_STAT_FS = 0x40000000000
    SUPPORTS_CASE_SENSITIVE_NAMES = 0x80000000000
    SUPPORTS_CASE_PRESERVED_NAMES = 0x100000000000
    SUPPORTS_FLOCK = 0x200000000000
    HAS_NO_ROOT_DIRECTORY_TIMES = 0x400000000000
    SUPPORTS_EXTENDED_SECURITY = 0x800000000000
    SUPPORTS_2TB_FILE_SIZE = 0x1000000000000
    SUPPORTS_HARD_LINKS = 0x2000000000000
    SUPPORTS_MANDATORY_BYTE_RANGE_LOCKS = 0x4000000000000
    SUPPORTS_PATH_FROM_ID = 0x8000000000000
    IS_JOURNALING = 0x20000000000000
    SUPPORTS_SPARSE_FILES = 0x40000000000000
    SUPPORTS_ZERO_RUNS = 0x80000000000000
    SUPPORTS_VOL_SIZES = 0x100000000000000
    SUPPORTS_REMOTE_EVENTS = 0x200000000000000
    SUPPORTS_HIDDEN_FILES = 0x400000000000000
    SUPPORTS_DECMPFS_COMPRESSION = 0x800000000000000
    HAS_64BIT_OBJECT_IDS = 0x1000000000000000
