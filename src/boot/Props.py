#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import weakref

from .Log import Log


class Props:
    """Non-overwriting property installer.

    Installs capabilities onto an existing object only where the object does
    not already own a truthy value under that name. A conflict is never an
    error: the earlier value wins and the call is a no-op for that name.
    """

    _log = Log.get("boot")

    # id(target) -> (weakref to target, set of names installed through define);
    # entries go away with their target
    _installed = {}

    @staticmethod
    def define(target, properties):
        """Install each name/value of properties onto target if absent.

        Args:
            target: Object or class to extend in place
            properties: Mapping of attribute name to value
        """
        for name, value in properties.items():
            if Props._own(target, name):
                Props._log.debug(f"keep existing {Props._label(target)}.{name}")
                continue
            setattr(target, name, value)
            Props._record(target, name)

    @staticmethod
    def installed(target):
        """Names installed on target through define, sorted."""
        entry = Props._installed.get(id(target))
        if entry is None or entry[0]() is not target:
            return []
        return sorted(entry[1])

    @staticmethod
    def _record(target, name):
        key = id(target)
        entry = Props._installed.get(key)
        if entry is None or entry[0]() is not target:
            try:
                ref = weakref.ref(target, lambda _, key=key: Props._installed.pop(key, None))
            except TypeError:
                # not weak-referenceable; the install stands, unrecorded
                return
            entry = Props._installed[key] = (ref, set())
        entry[1].add(name)

    @staticmethod
    def _own(target, name):
        """Value target owns under name, not counting inherited values."""
        try:
            ns = vars(target)
        except TypeError:
            return getattr(target, name, None)
        return ns.get(name)

    @staticmethod
    def _label(target):
        if isinstance(target, type):
            return target.__name__
        return type(target).__name__
