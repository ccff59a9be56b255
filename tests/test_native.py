import builtins

import pytest

from boot import Boot


class FakeSocket:
    def __init__(self, uri):
        self.uri = uri


def test_define_native_absent_host_type_is_noop(runtime):
    assert runtime.defineNative("NoSuchHostType", {"x": 1}) is None


def test_define_native_installs_on_host_type():
    class Widget:
        existing = "keep"

    runtime = Boot(host={"Widget": Widget}, namespace="boot")
    runtime.defineNative("Widget", {"existing": "replace", "added": lambda self: "added"})
    assert Widget.existing == "keep"
    assert Widget().added() == "added"


def test_define_native_builtin_type_is_immutable(runtime):
    with pytest.raises(TypeError):
        runtime.defineNative("str", {"hashCode": lambda self: 0})


def test_web_socket_connect_wires_callbacks():
    Boot(host={"WebSocket": FakeSocket}, namespace="boot")

    class Listener:
        def open(self):
            return "open"

        def close(self):
            return "close"

        def error(self):
            return "error"

        def message(self):
            return "message"

    conn = FakeSocket.connect("ws://localhost/live", Listener())
    assert isinstance(conn, FakeSocket)
    assert conn.uri == "ws://localhost/live"
    assert conn.onopen() == "open"
    assert conn.onclose() == "close"
    assert conn.onerror() == "error"
    assert conn.onmessage() == "message"


def test_web_socket_connect_accepts_mapping_listener():
    class Socket(FakeSocket):
        pass

    Boot(host={"WebSocket": Socket}, namespace="boot")
    received = []
    conn = Socket.connect("ws://x", {"message": received.append})
    conn.onmessage("hello")
    assert received == ["hello"]
    assert conn.onopen is None


def test_define_native_sees_builtins_added_after_start(runtime, monkeypatch):
    class LateHostType:
        pass

    monkeypatch.setattr(builtins, "LateHostType", LateHostType, raising=False)
    runtime.defineNative("LateHostType", {"added": lambda self: "added"})
    assert LateHostType().added() == "added"


def test_host_override_wins_over_builtins(monkeypatch):
    class Builtin:
        pass

    class Override:
        pass

    monkeypatch.setattr(builtins, "Shared", Builtin, raising=False)
    runtime = Boot(host={"Shared": Override}, namespace="boot")
    runtime.defineNative("Shared", {"tag": "host"})
    assert Override.tag == "host"
    assert not hasattr(Builtin, "tag")
