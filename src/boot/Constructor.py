#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import types

from .Err import ArgErr, UnknownSlotErr


class Constructor:
    """Callable standing for one defined class.

    Instance behavior lives on the prototype, a Python class whose only base
    is the superclass prototype. Statics are attributes of the constructor
    itself, bound so that the constructor is their receiver. Calling the
    constructor creates an instance and runs the constructor variant named
    by the last argument: ctor(a, b, 1) runs instance.$1(a, b).

    The constructor's own state is kept under "$"-prefixed slots, a prefix
    the compiler reserves, so statics may use any other name. Read it
    through the accessors on the Constructor class, e.g.
    Constructor.prototypeOf(ctor), or the metadata through ctor.$.
    """

    # Prefix of constructor variant members and of reserved slots
    CTOR = "$"

    _RUNTIME = "$runtime"
    _NAME = "$name"
    _PROTOTYPE = "$prototype"
    _SUPERCLASS = "$superclass"
    _ANNOTATIONS = "$annotations"
    _METADATA = "$metadata"

    def __init__(self, runtime, name, prototype, superclass=None, annotations=None):
        state = vars(self)
        state[Constructor._RUNTIME] = runtime
        state[Constructor._NAME] = name
        state[Constructor._PROTOTYPE] = prototype
        state[Constructor._SUPERCLASS] = superclass
        state[Constructor._ANNOTATIONS] = annotations
        state[Constructor._METADATA] = None

    @staticmethod
    def runtimeOf(ctor):
        return vars(ctor)[Constructor._RUNTIME]

    @staticmethod
    def nameOf(ctor):
        return vars(ctor)[Constructor._NAME]

    @staticmethod
    def prototypeOf(ctor):
        return vars(ctor)[Constructor._PROTOTYPE]

    @staticmethod
    def superclassOf(ctor):
        return vars(ctor)[Constructor._SUPERCLASS]

    @staticmethod
    def isBuilt(ctor):
        """True once the metadata of ctor has been created."""
        return vars(ctor)[Constructor._METADATA] is not None

    @staticmethod
    def metadataOf(ctor):
        """Class metadata, built on first read and cached for good."""
        state = vars(ctor)
        meta = state[Constructor._METADATA]
        if meta is None:
            superclass = state[Constructor._SUPERCLASS]
            superMeta = Constructor.metadataOf(superclass) if superclass is not None else None
            meta = state[Constructor._RUNTIME].metaclass(
                state[Constructor._NAME], state[Constructor._PROTOTYPE],
                state[Constructor._ANNOTATIONS] or {}, superMeta, 0)
            state[Constructor._METADATA] = meta
        return meta

    @staticmethod
    def install(ctor, name, val):
        """Attach a static member; functions get the constructor as receiver."""
        if isinstance(val, types.FunctionType):
            val = types.MethodType(val, ctor)
        setattr(ctor, name, val)

    def __call__(self, *args):
        name = Constructor.nameOf(self)
        if not args:
            raise ArgErr.make(f"Missing constructor selector: {name}")
        params = args[:-1]
        selector = args[-1]

        prototype = Constructor.prototypeOf(self)
        instance = prototype.__new__(prototype)
        init = getattr(instance, f"{Constructor.CTOR}{selector}", None)
        if init is None or isinstance(init, Constructor):
            raise UnknownSlotErr.make(f"{name}.{Constructor.CTOR}{selector}")
        init(*params)
        return instance

    def __str__(self):
        return f"Class {Constructor.nameOf(self)}"

    def __repr__(self):
        return self.__str__()


# Generated code reads metadata as ctor.$
setattr(Constructor, "$", property(Constructor.metadataOf))
