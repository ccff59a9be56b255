#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class ObjUtil:
    """Utility methods for object operations on any value"""

    @staticmethod
    def hashCode(obj):
        if obj is None:
            return 0
        if isinstance(obj, str):
            from .Str import Str
            return Str.hashCode(obj)
        # Value types hash by value
        if isinstance(obj, (bool, int, float)):
            return hash(obj)
        if hasattr(obj, "hashCode") and callable(obj.hashCode) and not isinstance(obj, type):
            return obj.hashCode()
        from .Identity import Identity
        return Identity.cur().of(obj)

    @staticmethod
    def equals(a, b):
        if a is None:
            return b is None
        if b is None:
            return False
        if isinstance(a, str):
            from .Str import Str
            return Str.equals(a, b)
        if hasattr(a, "equals") and callable(a.equals) and not isinstance(a, type):
            return a.equals(b)
        return a == b

    @staticmethod
    def toString(obj):
        if obj is None:
            return "null"
        if isinstance(obj, bool):
            return "true" if obj else "false"
        if isinstance(obj, str):
            return obj
        if hasattr(obj, "toString") and callable(obj.toString) and not isinstance(obj, type):
            return obj.toString()
        return str(obj)
