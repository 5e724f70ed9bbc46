"""
Turtle interpreter for expanded L-system strings.

The turtle walks the string one symbol at a time and strokes straight onto
the surface it was given:

F, A, B → Forward `step` units, drawing a line
+       → Turn by -angle
-       → Turn by +angle
[       → Save position and heading
]       → Restore the last saved position and heading, moving without drawing
other   → Ignored (helper variables that only matter during expansion)
"""

import logging
from dataclasses import dataclass
from math import cos, degrees, radians, sin

from fractal_errors import MalformedSequence

logger = logging.getLogger(__name__)

# Below this canvas width the drawing is scaled from the height instead
SMALL_SURFACE_WIDTH = 600
SMALL_SURFACE_FACTOR = 2

FORWARD_SYMBOLS = "FAB"


@dataclass(frozen=True)
class CursorState:
    x: float
    y: float
    heading: float  # degrees


class FractalTurtle:
    """Cursor with a save/restore stack that draws on a surface as it moves."""

    def __init__(self, surface, angle, step, heading=0.0):
        self.surface = surface
        self.angle = angle
        self.step = step
        self.x = 0.0
        self.y = 0.0
        self.heading = heading
        self.stack = []

    @property
    def depth(self):
        return len(self.stack)

    def state(self):
        return CursorState(self.x, self.y, self.heading)

    def forward(self):
        self.x += self.step * cos(radians(self.heading))
        self.y += self.step * sin(radians(self.heading))
        self.surface.line_to(self.x, self.y)

    def left(self):
        self.heading += self.angle

    def right(self):
        self.heading -= self.angle

    def push(self):
        self.stack.append(self.state())

    def pop(self, position=None):
        if not self.stack:
            raise MalformedSequence("']' without a matching '['", position)
        saved = self.stack.pop()
        self.x, self.y, self.heading = saved.x, saved.y, saved.heading
        self.surface.move_to(self.x, self.y)

    def run(self, sequence):
        for i, ch in enumerate(sequence):
            if ch in FORWARD_SYMBOLS:
                self.forward()
            elif ch == '+':
                self.right()
            elif ch == '-':
                self.left()
            elif ch == '[':
                self.push()
            elif ch == ']':
                self.pop(i)
        return self


def compute_scale(width, height):
    if width < SMALL_SURFACE_WIDTH:
        return height * SMALL_SURFACE_FACTOR
    return width


def stroke_length(definition, iterations, width, height):
    # An axiom-only render is drawn at the size of the first round
    return definition.scaling.length_factor * compute_scale(width, height) / max(iterations, 1)


def interpret(sequence, definition, iterations, surface):
    """Position the surface for `definition` and draw `sequence` on it.

    Returns the turtle so callers can inspect where it ended up.
    """
    scaling = definition.scaling
    surface.translate(scaling.origin_x * surface.width, scaling.origin_y * surface.height)
    surface.move_to(0.0, 0.0)
    surface.rotate(scaling.initial_heading)

    step = stroke_length(definition, iterations, surface.width, surface.height)
    # Heading starts at the turn angle taken as radians, matching the preset rotations
    turtle = FractalTurtle(surface, definition.angle, step, heading=degrees(definition.angle))
    logger.debug("Interpreting %d symbols for %s, step=%.3f", len(sequence), definition.name, step)
    return turtle.run(sequence)


__all__ = [
    'CursorState',
    'FractalTurtle',
    'compute_scale',
    'stroke_length',
    'interpret',
]
