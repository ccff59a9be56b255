#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import copy

from .Identity import Identity


class Obj:
    """Base behavior of every object built through Boot.define.

    The root prototype of each runtime subclasses Obj, so these methods are
    reachable from any instance by walking up the prototype chain.
    """

    def hashCode(self):
        """Identity hash - stable for this physical object for the process lifetime."""
        return Identity.cur().of(self)

    def equals(self, that):
        return self is that

    def toString(self):
        return f"{type(self).__name__}#{self.hashCode()}"

    def getClass(self):
        """Return the Class metadata of this object"""
        return getattr(self._ctor(), "$")

    def _ctor(self):
        # The prototype of every defined class owns "$" -> its constructor
        ctor = getattr(type(self), "$", None)
        if ctor is None:
            from .Boot import Boot
            ctor = Boot.cur().root
        return ctor

    # Copies never share identity with their source

    def __copy__(self):
        cls = type(self)
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone.__dict__.pop(Identity.SLOT, None)
        return clone

    def __deepcopy__(self, memo):
        cls = type(self)
        clone = cls.__new__(cls)
        memo[id(self)] = clone
        for name, val in self.__dict__.items():
            if name != Identity.SLOT:
                clone.__dict__[name] = copy.deepcopy(val, memo)
        return clone

    def __str__(self):
        return self.toString()

    def __repr__(self):
        return self.toString()

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.hashCode()
