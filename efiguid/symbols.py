#!/usr/bin/python
"""
symbol fallback resolvers

A resolver maps a symbol name to the 16 bytes stored at the symbol
address, i.e. resolve('efi_guid_global') returns the raw guid.  Failure
is reported by raising ResolutionError.  No validation of the bytes
beyond the size is done, the caller trusts the symbol to be a guid.
"""
import os
import ctypes
import logging
import functools

import pefile

from efiguid import guids
from efiguid.errors import ResolutionError

RTLD_LAZY = getattr(os, 'RTLD_LAZY', 1)

def symbol_bytes(symbol):
    if not isinstance(symbol, str):
        raise ResolutionError(f'symbol name must be a string, not {type(symbol).__name__}')
    raw = symbol.encode('utf-8')
    if not raw or b'\0' in raw:
        raise ResolutionError(f'invalid symbol name: {symbol!r}')
    return raw

##################################################################################################
# running process

@functools.lru_cache(maxsize = None)
def dlfcn():
    """ dlopen, dlsym and dlclose of the running process """
    try:
        lib = ctypes.CDLL(None)
        dlopen  = lib.dlopen
        dlsym   = lib.dlsym
        dlclose = lib.dlclose
    except (OSError, TypeError, AttributeError) as err:
        raise ResolutionError(f'no dynamic linker interface: {err}') from err

    dlopen.argtypes  = [ ctypes.c_char_p, ctypes.c_int ]
    dlopen.restype   = ctypes.c_void_p
    dlsym.argtypes   = [ ctypes.c_void_p, ctypes.c_char_p ]
    dlsym.restype    = ctypes.c_void_p
    dlclose.argtypes = [ ctypes.c_void_p ]
    dlclose.restype  = ctypes.c_int
    return (dlopen, dlsym, dlclose)

# pylint: disable=too-few-public-methods
class ProcessSymbolResolver:
    """
    resolve exported symbols of the running process (including loaded
    shared objects), optionally followed by extra shared libraries,
    for example libefivar.so.1 which exports efi_guid_* data symbols
    """

    def __init__(self, libraries = ()):
        self.libraries = tuple(libraries)

    @staticmethod
    def lookup(library, name):
        """ dlopen library (None = process), dlsym name, copy bytes, dlclose """
        (dlopen, dlsym, dlclose) = dlfcn()
        path = library.encode() if library else None
        handle = dlopen(path, RTLD_LAZY)
        if not handle:
            raise ResolutionError(f'cannot open {library or "process"} symbol namespace')
        try:
            addr = dlsym(handle, name)
            if not addr:
                return None
            return ctypes.string_at(addr, guids.GUID_SIZE)
        finally:
            dlclose(handle)

    def resolve(self, symbol):
        name = symbol_bytes(symbol)
        blob = self.lookup(None, name)
        if blob is not None:
            return blob

        for library in self.libraries:
            try:
                blob = self.lookup(library, name)
            except ResolutionError as err:
                logging.debug('symbol %s: %s', symbol, err)
                continue
            if blob is not None:
                logging.debug('symbol %s: found in %s', symbol, library)
                return blob

        raise ResolutionError(f'symbol not found: {symbol}')

##################################################################################################
# in-memory and pe images

# pylint: disable=too-few-public-methods
class MappingSymbolResolver:
    """ resolve symbols from a dict, values are 16 bytes or guids """

    def __init__(self, mapping = None):
        self.mapping = dict(mapping or {})

    def resolve(self, symbol):
        symbol_bytes(symbol)
        value = self.mapping.get(symbol)
        if value is None:
            raise ResolutionError(f'symbol not found: {symbol}')
        return bytes(guids.to_guid(value))

class PeSymbolResolver:
    """ resolve exported data symbols of a pe (efi) image """

    def __init__(self, filename = None, data = None):
        self.filename = filename
        self.exports = {}
        try:
            pe = pefile.PE(filename, data = data, fast_load = True)
        except (pefile.PEFormatError, OSError) as err:
            raise ResolutionError(f'{filename or "<data>"}: not a PE binary: {err}') from err
        try:
            pe.parse_data_directories(directories = [
                pefile.DIRECTORY_ENTRY['IMAGE_DIRECTORY_ENTRY_EXPORT'] ])
            exportdir = getattr(pe, 'DIRECTORY_ENTRY_EXPORT', None)
            if exportdir:
                for sym in exportdir.symbols:
                    if not sym.name or sym.forwarder:
                        continue
                    try:
                        self.exports[sym.name.decode()] = pe.get_data(sym.address,
                                                                      guids.GUID_SIZE)
                    except pefile.PEFormatError:
                        logging.debug('%s: export %s: bad address 0x%x',
                                      filename, sym.name, sym.address)
        finally:
            pe.close()
        logging.debug('%s: %d exports', filename or '<data>', len(self.exports))

    def resolve(self, symbol):
        symbol_bytes(symbol)
        blob = self.exports.get(symbol)
        if blob is None:
            raise ResolutionError(f'symbol not found: {symbol}')
        if len(blob) != guids.GUID_SIZE:
            raise ResolutionError(f'symbol too short: {symbol}')
        return blob

# pylint: disable=too-few-public-methods
class ChainSymbolResolver:
    """ try resolvers in order, first hit wins """

    def __init__(self, *resolvers):
        self.resolvers = resolvers

    def resolve(self, symbol):
        for resolver in self.resolvers:
            try:
                return resolver.resolve(symbol)
            except ResolutionError as err:
                logging.debug('symbol %s: %s', symbol, err)
        raise ResolutionError(f'symbol not found: {symbol}')
