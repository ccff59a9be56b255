#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from functools import lru_cache


class Str:
    """String extensions for transpiled code.

    Python str is immutable and cannot carry attributes, so these are static
    helpers taking the string as first argument, the way generated code calls
    them: Str.startsWith(s, "x").
    """

    @staticmethod
    def hashCode(self):
        """Content hash: hash = 31*hash + unit over UTF-16 code units, seeded 0."""
        return _contentHash(self)

    @staticmethod
    def startsWith(self, prefix):
        """True if prefix is empty, equal to self, or a leading part of self."""
        return len(prefix) <= len(self) and prefix == self[:len(prefix)]

    @staticmethod
    def endsWith(self, suffix):
        """True if suffix is empty, equal to self, or a trailing part of self."""
        return len(suffix) <= len(self) and suffix == self[len(self) - len(suffix):]

    @staticmethod
    def equals(self, other):
        if other is None:
            return False
        return self == other


@lru_cache(maxsize=4096)
def _contentHash(s):
    h = 0
    data = s.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        h = 31 * h + (data[i] | (data[i + 1] << 8))
    return h
