#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Err import UnresolvedErr
from .Log import Log


class Registry:
    """Class name -> Constructor mapping owned by one runtime.

    The root type has no name here; resolve("") returns it. Registering an
    existing name silently replaces the entry (last writer wins).
    """

    _log = Log.get("boot")

    def __init__(self, root):
        self._root = root
        self._classes = {}

    def register(self, name, ctor):
        if name in self._classes:
            Registry._log.debug(f"redefine {name}")
        self._classes[name] = ctor

    def resolve(self, name):
        """Resolve a superclass name; empty name is the root type."""
        if not name:
            return self._root
        return self.find(name)

    def find(self, name, checked=True):
        ctor = self._classes.get(name)
        if ctor is not None:
            return ctor
        if checked:
            raise UnresolvedErr.make(f"Class not defined: {name}")
        return None

    def names(self):
        """Registered class names in definition order."""
        return list(self._classes.keys())

    def __contains__(self, name):
        return name in self._classes

    def __iter__(self):
        return iter(self._classes.values())

    def __len__(self):
        return len(self._classes)
