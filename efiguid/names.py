#!/usr/bin/python
"""
guid <-> name and symbol conversions

Lookups go to the well-known table first.  Unknown guids are printed as
text by guid_to_name(), unknown names are looked up as efi_guid_<name>
symbol in the running process by name_to_guid().  Both table and
resolver can be replaced per call.
"""
import errno

from efiguid import guids
from efiguid.known import well_known
from efiguid.table import SYMBOL_PREFIX, normalize_name
from efiguid.errors import InvalidFormat, NotFound, ResolutionError
from efiguid.symbols import ProcessSymbolResolver

default_resolver = ProcessSymbolResolver()

def str_to_guid(text):
    """ parse canonical guid text """
    return guids.parse_str(text)

def guid_to_str(guid):
    """ canonical guid text """
    return guids.guid_to_str(guid)

def guid_to_name(guid, table = None):
    """ registered name of guid, canonical text for unknown guids """
    guid = guids.to_guid(guid)
    if table is None:
        table = well_known
    entry = table.lookup_guid(guid)
    if entry is not None:
        return entry.name
    return guids.guid_to_str(guid)

def guid_to_symbol(guid, table = None):
    """ symbol name of guid, there is no fallback for unknown guids """
    guid = guids.to_guid(guid)
    if table is None:
        table = well_known
    entry = table.lookup_guid(guid)
    if entry is None:
        raise NotFound(f'unknown guid: {guid}', errno.EINVAL)
    return entry.symbol

def symbol_to_guid(symbol, resolver = None):
    """ guid stored at symbol address """
    if resolver is None:
        resolver = default_resolver
    blob = resolver.resolve(symbol)
    try:
        return guids.EfiGuid(blob)
    except InvalidFormat as err:
        raise ResolutionError(f'symbol {symbol}: {err}') from err

def name_to_guid(name, table = None, resolver = None):
    """
    guid for a registered name, '{name}' works too.  Names missing in the
    table are resolved as efi_guid_<name> symbol.
    """
    if table is None:
        table = well_known
    name = normalize_name(name)
    entry = table.lookup_name(name)
    if entry is not None:
        return entry.guid

    try:
        return symbol_to_guid(SYMBOL_PREFIX + name, resolver)
    except ResolutionError as err:
        raise NotFound(f'unknown guid name: {name}', errno.ENOENT) from err

def resolve_guid(text, table = None, resolver = None):
    """ guid text or guid name to guid """
    try:
        return guids.parse_str(text)
    except InvalidFormat:
        pass
    return name_to_guid(text, table, resolver)
