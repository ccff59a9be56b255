#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#


class ClassSpec:
    """Parsed form of a flat class definition emitted by the compiler.

    The compiler encodes members and statics in one mapping: a key starting
    with STATIC is static (marker stripped), the key STATIC alone is the
    static initializer, anything else is an instance member.
    """

    STATIC = "_"

    def __init__(self, name, superclassName, members, statics, initializer=None, annotations=None):
        self.name = name
        self.superclassName = superclassName
        self.members = members
        self.statics = statics
        self.initializer = initializer
        self.annotations = annotations

    @staticmethod
    def parse(name, superclassName, definition, annotations=None):
        """Split definition into ordered members and statics in one pass."""
        members = {}
        statics = {}
        initializer = None
        for key, val in definition.items():
            if key.startswith(ClassSpec.STATIC):
                if len(key) == 1:
                    initializer = val
                else:
                    statics[key[1:]] = val
            else:
                members[key] = val
        return ClassSpec(name, superclassName, members, statics, initializer, annotations)

    def __repr__(self):
        return f"ClassSpec({self.name} : {self.superclassName or 'Object'})"
