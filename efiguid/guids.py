#!/usr/bin/python
""" efi guid type, binary and text codec """
import uuid
import struct
import functools

from efiguid.errors import InvalidFormat, AllocationFailure

##################################################################################################
# constants

GUID_FORMAT          = '%08x-%04x-%04x-%04x-%02x%02x%02x%02x%02x%02x'
GUID_SIZE            = 16
GUID_LENGTH          = 36
GUID_LENGTH_WITH_NUL = GUID_LENGTH + 1

hyphen_offsets = (8, 13, 18, 23)
hex_digits     = frozenset('0123456789abcdefABCDEF')

def bswap16(value):
    return ((value & 0xff) << 8) | ((value >> 8) & 0xff)

##################################################################################################

@functools.total_ordering
class EfiGuid:
    """
    class representing an efi guid

    Binary layout is 16 bytes without padding: a (u32 le), b (u16 le),
    c (u16 le), d (u16, stored big endian) and e (6 raw bytes).
    Equality and ordering compare the raw bytes.
    """

    __slots__ = ('_data',)

    def __init__(self, data = None):
        if data is None:
            data = bytes(GUID_SIZE)
        if isinstance(data, (int, str)):
            raise InvalidFormat(f'guid needs {GUID_SIZE} bytes, not {type(data).__name__}')
        data = bytes(data)
        if len(data) != GUID_SIZE:
            raise InvalidFormat(f'guid needs {GUID_SIZE} bytes, got {len(data)}')
        self._data = data

    @classmethod
    def from_fields(cls, a, b, c, d, e):
        """
        build guid from the five struct members, d is the value of the
        struct member (read little endian), i.e. byte swapped compared to
        the text representation
        """
        e = bytes(e)
        if len(e) != 6:
            raise InvalidFormat(f'guid field e needs 6 bytes, got {len(e)}')
        try:
            return cls(struct.pack('<LHHH', a, b, c, d) + e)
        except struct.error as err:
            raise InvalidFormat(f'guid field out of range: {err}') from err

    @classmethod
    def from_uuid(cls, value):
        return cls(value.bytes_le)

    @classmethod
    def zero(cls):
        return cls(b'\x00' * GUID_SIZE)

    @classmethod
    def empty(cls):
        return cls(b'\xff' * GUID_SIZE)

    def fields(self):
        """ return (a, b, c, d, e) as stored in the struct """
        (a, b, c, d) = struct.unpack_from('<LHHH', self._data)
        return (a, b, c, d, self._data[10:])

    @property
    def uuid(self):
        return uuid.UUID(bytes_le = self._data)

    def is_zero(self):
        return self._data == b'\x00' * GUID_SIZE

    def is_empty(self):
        return self._data == b'\xff' * GUID_SIZE

    def __bytes__(self):
        return self._data

    def __str__(self):
        return format_guid(self)

    def __repr__(self):
        return f"{self.__class__.__name__}('{str(self)}')"

    def __eq__(self, other):
        if not isinstance(other, EfiGuid):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other):
        if not isinstance(other, EfiGuid):
            return NotImplemented
        return self._data < other._data

    def __hash__(self):
        return hash(self._data)

##################################################################################################
# parse

def parse_bin(data, offset = 0):
    """ read guid from bytes data at offset """
    blob = bytes(data[offset : offset + GUID_SIZE])
    if len(blob) != GUID_SIZE:
        raise InvalidFormat(f'short guid data at offset {offset}')
    return EfiGuid(blob)

def check_str(text):
    """ validate guid text: 8-4-4-4-12 hex digits, optionally in braces """
    if not isinstance(text, str):
        raise InvalidFormat(f'guid must be a string, not {type(text).__name__}')
    if len(text) == GUID_LENGTH + 2 and text[0] == '{' and text[-1] == '}':
        text = text[1:-1]
    if len(text) != GUID_LENGTH:
        raise InvalidFormat(f'invalid guid: "{text}"')
    for (pos, char) in enumerate(text):
        if pos in hyphen_offsets:
            if char != '-':
                raise InvalidFormat(f'invalid guid: "{text}"')
        elif char not in hex_digits:
            raise InvalidFormat(f'invalid guid: "{text}"')
    return text

def parse_str(text):
    """ parse canonical guid text """
    text = check_str(text)
    a = int(text[0:8], 16)
    b = int(text[9:13], 16)
    c = int(text[14:18], 16)
    d = int(text[19:23], 16)
    e = bytes.fromhex(text[24:36])
    return EfiGuid.from_fields(a, b, c, bswap16(d), e)

def to_guid(value):
    """ accept EfiGuid, uuid.UUID, 16 raw bytes or guid text """
    if isinstance(value, EfiGuid):
        return value
    if isinstance(value, uuid.UUID):
        return EfiGuid.from_uuid(value)
    if isinstance(value, str):
        return parse_str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return EfiGuid(value)
    raise InvalidFormat(f'cannot convert {type(value).__name__} to guid')

##################################################################################################
# format

def format_guid(guid):
    """ canonical text, lowercase, field d byte swapped """
    (a, b, c, d, e) = to_guid(guid).fields()
    return GUID_FORMAT % ((a, b, c, bswap16(d)) + tuple(e))

def guid_str_size(guid):
    """ number of characters guid_to_str() returns (without terminator) """
    to_guid(guid)
    return GUID_LENGTH

def guid_to_buffer(guid, buf):
    """ render guid plus terminating nul into a writable buffer """
    text = format_guid(guid).encode('ascii') + b'\0'
    with memoryview(buf) as view:
        if view.readonly:
            raise ValueError('guid buffer is read-only')
        if view.nbytes < GUID_LENGTH_WITH_NUL:
            raise ValueError(f'guid buffer too small ({view.nbytes} < {GUID_LENGTH_WITH_NUL})')
        if view.itemsize != 1:
            raise ValueError(f'guid buffer needs byte items, not {view.format}')
    buf[ : GUID_LENGTH_WITH_NUL] = text
    return GUID_LENGTH

def guid_to_str(guid):
    try:
        return format_guid(guid)
    except MemoryError as err:
        raise AllocationFailure('cannot allocate guid string') from err

def guid_cmp(guid1, guid2):
    """ memcmp style compare, returns -1, 0 or 1 """
    b1 = bytes(to_guid(guid1))
    b2 = bytes(to_guid(guid2))
    return (b1 > b2) - (b1 < b2)
