import pytest

from fractal_catalog import build_catalog


class RecordingSurface:
    """Stand-in surface that records every call instead of drawing."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []
        self.current = None

    def clear(self):
        self.calls.append(("clear",))

    def translate(self, dx, dy):
        self.calls.append(("translate", dx, dy))

    def rotate(self, angle):
        self.calls.append(("rotate", angle))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))
        self.current = (x, y)

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))
        self.current = (x, y)

    def lines(self):
        return [c[1:] for c in self.calls if c[0] == "line_to"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def catalog():
    return build_catalog()
