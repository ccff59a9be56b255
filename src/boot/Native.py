#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# Conveniences installed on host types the runtime does not define itself.


# listener slot -> connection callback attribute
_WEB_SOCKET_CALLBACKS = (
    ("open", "onopen"),
    ("close", "onclose"),
    ("error", "onerror"),
    ("message", "onmessage"),
)


def webSocket(socketType):
    """Properties to install on a host WebSocket type."""

    def connect(uri, listener):
        """Establish connection by WebSocket."""
        connection = socketType(uri)
        for slot, callback in _WEB_SOCKET_CALLBACKS:
            setattr(connection, callback, _listenerSlot(listener, slot))
        return connection

    return {"connect": staticmethod(connect)}


def _listenerSlot(listener, name):
    if isinstance(listener, dict):
        return listener.get(name)
    return getattr(listener, name, None)
