#!/usr/bin/python
""" efi guid error types """
import errno as _errno

class GuidError(Exception):
    """ base class for all guid conversion errors """
    errno = _errno.EINVAL

    def __init__(self, message, errno = None):
        super().__init__(message)
        if errno is not None:
            self.errno = errno

class InvalidFormat(GuidError, ValueError):
    """ text or bytes are not a well-formed guid """
    errno = _errno.EINVAL

class NotFound(GuidError, LookupError):
    """ no table entry and no symbol fallback for a guid or name """
    errno = _errno.ENOENT

class ResolutionError(GuidError):
    """ symbol lookup failed (namespace unavailable or symbol absent) """
    errno = _errno.ENOENT

class AllocationFailure(GuidError, MemoryError):
    """ out of memory while rendering a guid """
    errno = _errno.ENOMEM
