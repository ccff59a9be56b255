#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import builtins

from . import Class as ClassDef
from . import Native
from .ClassSpec import ClassSpec
from .Constructor import Constructor
from .Env import Env
from .Identity import Identity
from .Log import Log
from .Obj import Obj
from .Props import Props
from .Registry import Registry


class Boot:
    """Runtime that generated classes link against.

    A Boot owns the class registry shared by everything it defines; the
    identity counter is process-wide (Identity.cur()). Startup order matters:

      1. root constructor "Object" (prototype subclasses Obj)
      2. "Class", the metadata class, defined through define() itself
      3. host type conveniences (WebSocket.connect) when the host has them

    Metadata is only built when first read, so step 2 can run before any
    class, including Class itself, has a descriptor.
    """

    _instance = None
    _log = Log.get("boot")

    def __init__(self, host=None, namespace=None):
        self.namespace = namespace if namespace is not None else Env.cur().config("namespace")
        self.identity = Identity.cur()
        self._host = dict(host) if host is not None else {}

        rootProto = type("Object", (Obj,), {"__module__": self.namespace})
        self.root = Constructor(self, "Object", rootProto)
        Props.define(rootProto, {"$": self.root})
        self.registry = Registry(self.root)

        self.metaclass = None
        self.metaclass = self.define("Class", "", ClassDef.DEFINITION)

        socketType = self.hostType("WebSocket")
        if socketType is not None:
            self.defineNative("WebSocket", Native.webSocket(socketType))

    @staticmethod
    def cur():
        """Process-wide default runtime, created on first use."""
        if Boot._instance is None:
            Boot._instance = Boot()
        return Boot._instance

    def define(self, name, superclassName, definition, annotations=None):
        """Define a class.

        Args:
            name: Simple name of the class to define
            superclassName: Simple name of the parent class, "" for Object
            definition: Flat mapping of members, "_"-prefixed statics and
                the "_" static initializer
            annotations: Optional annotation mapping

        Returns:
            The new Constructor, also registered under name

        Raises:
            UnresolvedErr: superclassName has not been defined yet
        """
        superclass = self.registry.resolve(superclassName)
        spec = ClassSpec.parse(name, superclassName, definition, annotations)

        prototype = type(name, (Constructor.prototypeOf(superclass),), {"__module__": self.namespace})
        ctor = Constructor(self, name, prototype, superclass, spec.annotations)

        for key, val in spec.statics.items():
            Constructor.install(ctor, key, val)
        for key, val in spec.members.items():
            setattr(prototype, key, val)

        self.registry.register(name, ctor)
        Props.define(prototype, {"$": ctor})
        Boot._log.debug(f"define {name} : {Constructor.nameOf(superclass)}")

        if spec.initializer is not None:
            spec.initializer(ctor)
        return ctor

    def defineNative(self, name, properties):
        """Install properties on a host type; no-op if the host lacks it."""
        hostType = self.hostType(name)
        if hostType is None:
            Boot._log.debug(f"no host type {name}")
            return
        Props.define(hostType, properties)

    def hostType(self, name):
        """Host class named name: host overrides first, then builtins at call time."""
        hostType = self._host.get(name)
        if hostType is None:
            hostType = getattr(builtins, name, None)
        return hostType if isinstance(hostType, type) else None

    def forName(self, name):
        """Metadata of a registered class.

        Unknown names get a detached descriptor extending Object, which is
        not registered.
        """
        ctor = self.registry.find(name, False)
        if ctor is not None:
            return Constructor.metadataOf(ctor)
        prototype = type(name, (Constructor.prototypeOf(self.root),), {"__module__": self.namespace})
        return self.metaclass(name, prototype, {}, Constructor.metadataOf(self.root), 0)

    def find(self, metadata):
        """Names of registered classes assignable to metadata."""
        return [Constructor.nameOf(ctor) for ctor in self.registry
                if metadata.isAssignableFrom(Constructor.metadataOf(ctor))]
