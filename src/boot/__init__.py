#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# boot - class model runtime for transpiled code

# Errors
from .Err import Err, UnresolvedErr, ArgErr, UnknownSlotErr

# Support
from .Env import Env
from .Log import Log, LogLevel, LogRec
from .Props import Props

# Identity
from .Identity import Identity
from .Obj import Obj
from .ObjUtil import ObjUtil
from .Str import Str

# Class model
from .ClassSpec import ClassSpec
from .Constructor import Constructor
from .Registry import Registry
from .Boot import Boot


def define(name, superclassName, definition, annotations=None):
    """Define a class in the default runtime."""
    return Boot.cur().define(name, superclassName, definition, annotations)


def defineNative(name, properties):
    """Extend a host type in the default runtime."""
    return Boot.cur().defineNative(name, properties)
