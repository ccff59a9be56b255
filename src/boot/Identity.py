#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class Identity:
    """Process-wide identity hash assignment.

    Every object gets the next value of a single monotonically increasing
    counter the first time its identity is requested, and keeps that value
    for the rest of the process. Values are never reused, so two distinct
    objects never share an identity. Ordering reflects first-request order
    only, not creation order.

    The counter is class state shared by every runtime in the process.
    """

    # Name of the hidden per-object slot holding the assigned identity
    SLOT = "_hashCode"

    _counter = 0
    # id(obj) -> (obj, identity) for objects that cannot carry a slot;
    # holding obj keeps id(obj) from being reused
    _pinned = {}

    _instance = None

    @staticmethod
    def cur():
        if Identity._instance is None:
            Identity._instance = Identity()
        return Identity._instance

    def next(self):
        """Draw the next counter value."""
        val = Identity._counter
        Identity._counter += 1
        return val

    def peek(self):
        """Value the next assignment will draw."""
        return Identity._counter

    def of(self, obj):
        """Return the identity of obj, assigning one on first request."""
        try:
            val = vars(obj).get(Identity.SLOT)
        except TypeError:
            val = None
        if val is not None:
            return val

        entry = Identity._pinned.get(id(obj))
        if entry is not None:
            return entry[1]

        val = self.next()
        try:
            setattr(obj, Identity.SLOT, val)
        except (AttributeError, TypeError):
            Identity._pinned[id(obj)] = (obj, val)
        return val
