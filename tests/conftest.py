import pytest

from boot import Boot


@pytest.fixture
def runtime():
    """A fresh runtime with its own class registry."""
    return Boot(namespace="boot")


@pytest.fixture
def shapes(runtime):
    """Shape <- Circle hierarchy used across tests."""

    def shapeInit(self, name):
        self.label = name

    shape = runtime.define("Shape", "", {
        "$0": shapeInit,
        "area": lambda self: 0,
        "describe": lambda self: f"{self.label}:{self.area()}",
    })

    def circleInit(self, r):
        shapeInit(self, "circle")
        self.r = r

    circle = runtime.define("Circle", "Shape", {
        "$1": circleInit,
        "area": lambda self: 3 * self.r * self.r,
    })
    return shape, circle
