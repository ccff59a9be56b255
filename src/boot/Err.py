#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Err(Exception):
    """Base error class"""

    def __init__(self, msg=None):
        Exception.__init__(self, msg)
        self._msg = msg

    @classmethod
    def make(cls, msg=None):
        """Factory method - creates instance of the calling class"""
        return cls(msg)

    def msg(self):
        return self._msg if self._msg is not None else ""

    def toStr(self):
        name = type(self).__name__
        if self._msg:
            return f"{name}: {self._msg}"
        return name

    def __str__(self):
        return self.toStr()


class UnresolvedErr(Err):
    """Class name is not registered yet - a definition-order bug"""
    pass


class ArgErr(Err):
    """Argument error"""
    pass


class UnknownSlotErr(Err):
    """Unknown slot error"""
    pass
