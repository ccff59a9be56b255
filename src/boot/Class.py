#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# Members of the Class metadata class.
#
# Metadata objects are ordinary instances: Boot defines "Class" through
# Boot.define with this definition while it starts up, so the descriptor of
# a class is built by the same factory it describes. Each constructor only
# asks for its metadata on first access, by which time "Class" exists.

from .Constructor import Constructor


def _init(self, name, prototype, annotations, superclassMetadata):
    """Constructor variant 0"""
    self.name = name
    self.prototype = prototype
    self.annotations = annotations
    self.superclassMetadata = superclassMetadata


def getName(self):
    return f"{Constructor.runtimeOf(self._ctor()).namespace}.{self.name}"


def getSimpleName(self):
    return self.name


def getSuperclass(self):
    return self.superclassMetadata


def getAnnotations(self):
    return dict(self.annotations)


def getAnnotation(self, key, default=None):
    return self.annotations.get(key, default)


def isAnnotationPresent(self, key):
    return key in self.annotations


def getDeclaredMethods(self):
    """Member functions declared by this class itself, name -> function.

    Constructor variants and the class back-reference are excluded. Each
    call returns a new dict.
    """
    methods = {}
    for name, val in vars(self.prototype).items():
        if name.startswith(Constructor.CTOR) or name.startswith("__"):
            continue
        if callable(val):
            methods[name] = val
    return methods


def getDeclaredConstructors(self):
    """Selectors of the constructor variants declared by this class."""
    prefix = Constructor.CTOR
    return sorted(name[len(prefix):] for name, val in vars(self.prototype).items()
                  if name.startswith(prefix) and len(name) > len(prefix) and callable(val))


def isAssignableFrom(self, other):
    """True if other is this class or one of its subclasses."""
    while other is not None:
        if other is self:
            return True
        other = other.superclassMetadata
    return False


def isInstance(self, obj):
    return isinstance(obj, self.prototype)


def newInstance(self, *args):
    """Construct an instance; the last argument selects the constructor."""
    return getattr(self.prototype, "$")(*args)


def toString(self):
    return f"class {self.getName()}"


DEFINITION = {
    "$0": _init,
    "getName": getName,
    "getSimpleName": getSimpleName,
    "getSuperclass": getSuperclass,
    "getAnnotations": getAnnotations,
    "getAnnotation": getAnnotation,
    "isAnnotationPresent": isAnnotationPresent,
    "getDeclaredMethods": getDeclaredMethods,
    "getDeclaredConstructors": getDeclaredConstructors,
    "isAssignableFrom": isAssignableFrom,
    "isInstance": isInstance,
    "newInstance": newInstance,
    "toString": toString,
}
