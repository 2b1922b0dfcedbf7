#!/usr/bin/python
""" sorted guid <-> name tables """
import bisect
import logging
import collections

from efiguid import guids
from efiguid.errors import InvalidFormat

##################################################################################################
# constants

NAME_FIELD_WIDTH   = 40    # including terminating nul
SYMBOL_PREFIX      = 'efi_guid_'
SYMBOL_FIELD_WIDTH = NAME_FIELD_WIDTH + len(SYMBOL_PREFIX)

GuidNameEntry = collections.namedtuple('GuidNameEntry',
                                       ('guid', 'name', 'symbol', 'description'))

##################################################################################################
# name keys

def cstr(name):
    """ python string as C would see it, i.e. cut at the first nul """
    if not isinstance(name, str):
        raise InvalidFormat(f'name must be a string, not {type(name).__name__}')
    return name.split('\0', 1)[0]

def name_key(name):
    """
    fixed width lookup key: utf-8, truncated to the field capacity and
    nul padded to exactly NAME_FIELD_WIDTH bytes
    """
    raw = cstr(name).encode('utf-8')[ : NAME_FIELD_WIDTH - 1]
    return raw.ljust(NAME_FIELD_WIDTH, b'\0')

def normalize_name(name):
    """ strip one pair of surrounding braces, truncate to field capacity """
    name = cstr(name)
    if len(name) > 2 and name[0] == '{' and name[len(name) - 1] == '}':
        name = name[1 : len(name) - 1]
    return name_key(name).rstrip(b'\0').decode('utf-8', errors = 'ignore')

def make_entry(guid, name, symbol = None, description = None):
    """ validate and build a GuidNameEntry """
    guid = guids.to_guid(guid)
    if not name or '\0' in name:
        raise ValueError(f'invalid guid name: {name!r}')
    if len(name.encode('utf-8')) >= NAME_FIELD_WIDTH:
        raise ValueError(f'guid name too long: {name}')
    if symbol is None:
        symbol = SYMBOL_PREFIX + name
    if len(symbol.encode('utf-8')) >= SYMBOL_FIELD_WIDTH:
        raise ValueError(f'guid symbol too long: {symbol}')
    return GuidNameEntry(guid, name, symbol, description or name)

##################################################################################################

class GuidTable:
    """
    read-only guid name table

    One set of entries with two sorted indices, one ordered by the raw
    guid bytes and one ordered by the fixed width name key.  Both lookups
    are binary searches, so keys must be built exactly like the indices.
    """

    def __init__(self, entries = ()):
        self.entries = tuple(entries)

        self.by_guid = sorted(self.entries, key = lambda e: bytes(e.guid))
        self.guid_keys = [ bytes(e.guid) for e in self.by_guid ]
        for (prev, item) in zip(self.guid_keys, self.guid_keys[1:]):
            if prev == item:
                raise ValueError(f'duplicate guid in table: {guids.EfiGuid(item)}')

        self.by_name = sorted(self.entries, key = lambda e: name_key(e.name))
        self.name_keys = [ name_key(e.name) for e in self.by_name ]
        for (prev, item) in zip(self.name_keys, self.name_keys[1:]):
            if prev == item:
                name = item.rstrip(b'\0').decode()
                raise ValueError(f'duplicate name in table: {name}')

    @staticmethod
    def search(keys, key):
        idx = bisect.bisect_left(keys, key)
        if idx < len(keys) and keys[idx] == key:
            return idx
        return None

    def lookup_guid(self, guid):
        """ find entry by guid (exact byte match) """
        idx = self.search(self.guid_keys, bytes(guids.to_guid(guid)))
        if idx is None:
            return None
        return self.by_guid[idx]

    def lookup_name(self, name):
        """ find entry by name, name is used as-is (no brace stripping) """
        idx = self.search(self.name_keys, name_key(name))
        if idx is None:
            return None
        return self.by_name[idx]

    def entries_by_name(self):
        return list(self.by_name)

    def merged(self, other):
        """ new table, entries of other replace clashing entries of self """
        gkeys = { bytes(e.guid) for e in other }
        nkeys = { name_key(e.name) for e in other }
        keep = [ e for e in self
                 if bytes(e.guid) not in gkeys and name_key(e.name) not in nkeys ]
        return GuidTable(keep + list(other))

    @classmethod
    def from_lines(cls, lines, source = '<lines>'):
        """
        parse efivar style guids.txt lines:
            <guid> <symbol> <description ...>
        name is the symbol without the efi_guid_ prefix
        """
        entries = []
        for (lineno, line) in enumerate(lines, start = 1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            items = line.split(None, 2)
            if len(items) < 2:
                raise InvalidFormat(f'{source}:{lineno}: expected "<guid> <symbol> [description]"')
            try:
                guid = guids.parse_str(items[0])
            except InvalidFormat as err:
                raise InvalidFormat(f'{source}:{lineno}: {err}') from err
            symbol = items[1]
            name = symbol
            if name.startswith(SYMBOL_PREFIX):
                name = name[len(SYMBOL_PREFIX):]
            description = items[2] if len(items) > 2 else None
            try:
                entries.append(make_entry(guid, name, symbol, description))
            except ValueError as err:
                raise InvalidFormat(f'{source}:{lineno}: {err}') from err
        return cls(entries)

    @classmethod
    def from_file(cls, filename):
        logging.info('reading guid table from %s', filename)
        with open(filename, 'r', encoding = 'utf-8') as f:
            return cls.from_lines(f, source = filename)

    def __iter__(self):
        return iter(self.by_guid)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, guid):
        try:
            return self.lookup_guid(guid) is not None
        except InvalidFormat:
            return False

    def __repr__(self):
        return f'{self.__class__.__name__}({len(self)} entries)'
