"""
The fixed set of fractals that can be rendered.

Each entry is an immutable FractalDefinition. The catalog is built once with
build_catalog() and handed to the render entry point; nothing here changes
after start up.

Canvas rotations (`initial_heading`) are radians. Values such as 60.0 or -90.0
are kept exactly as they were tuned, even though they are not multiples of pi.
"""

from math import pi
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping

from fractal_errors import UnknownFractal
from lsystem import FractalDefinition, ViewScaling, check_definition


BARNSLEY_FERN = FractalDefinition(
    name="Barnsley Fern",
    variables="XF",
    axiom="X",
    rules={'X': "F-[[X]+X]+F[+FX]-X", 'F': "FF"},
    angle=22.5,
    max_iterations=7,
    scaling=ViewScaling(initial_heading=pi / 3.0, length_factor=0.025, origin_x=0.5, origin_y=1.0),
)

DRAGON_CURVE = FractalDefinition(
    name="Dragon Curve",
    variables="XY",
    axiom="FX",
    rules={'X': "X+YF+", 'Y': "-FX-Y"},
    angle=90.0,
    max_iterations=12,
    scaling=ViewScaling(initial_heading=60.0, length_factor=0.1, origin_x=0.5, origin_y=0.5),
)

SEGMENT_32 = FractalDefinition(
    name="32-Segment Curve",
    variables="F",
    axiom="F+F+F+F",
    rules={'F': "-F+F-F-F+F+FF-F+F+FF+F-F-FF+FF-FF+F+F-FF-F-F+FF-F-F+F+F-F+"},
    angle=90.0,
    max_iterations=3,
    scaling=ViewScaling(initial_heading=90.0, length_factor=0.013, origin_x=0.6, origin_y=0.5),
)

FRACTAL_PLANT = FractalDefinition(
    name="Fractal Plant",
    variables="F",
    axiom="F",
    rules={'F': "FF-[-F+F+F]+[+F-F-F]"},
    angle=22.5,
    max_iterations=5,
    scaling=ViewScaling(initial_heading=pi / 3.0, length_factor=0.045, origin_x=0.5, origin_y=0.9),
)

KOCH_ISLAND = FractalDefinition(
    name="Koch Island",
    variables="F",
    axiom="F+F+F+F",
    rules={'F': "F+F-F-FF+F+F-F"},
    angle=90.0,
    max_iterations=4,
    scaling=ViewScaling(initial_heading=90.0, length_factor=0.025, origin_x=0.6, origin_y=0.5),
)

# A and B both draw forward
PEANO_GOSPER = FractalDefinition(
    name="Peano-Gosper Curve",
    variables="AB",
    axiom="A",
    rules={'A': "A-B--B+A++AA+B-", 'B': "+A-BB--B-A++A+B"},
    angle=60.0,
    max_iterations=5,
    scaling=ViewScaling(initial_heading=60.0, length_factor=0.035, origin_x=0.5, origin_y=0.3),
)

HILBERT_CURVE = FractalDefinition(
    name="Hilbert Curve",
    variables="XY",
    axiom="X",
    rules={'X': "+YF-XFX-FY+", 'Y': "-XF+YFY+FX-"},
    angle=90.0,
    max_iterations=7,
    scaling=ViewScaling(initial_heading=-90.0, length_factor=0.035, origin_x=0.3, origin_y=0.7),
)

# F is rewritten to nothing, so only the strokes added in the latest round survive
FREC_FRACTAL = FractalDefinition(
    name="Frec Fractal",
    variables="FXY",
    axiom="XYXYXYX+XYXYXYX+XYXYXYX+XYXYXYX",
    rules={'F': "", 'X': "FX+FX+FXFY-FY-", 'Y': "+FX+FXFY-FY-FY"},
    angle=90.0,
    max_iterations=4,
    scaling=ViewScaling(initial_heading=45.0, length_factor=0.02, origin_x=0.5, origin_y=0.5),
)

SIERPINSKI_TRIANGLE = FractalDefinition(
    name="Sierpinski Triangle",
    variables="XF",
    axiom="FXF--FF--FF",
    rules={'X': "--FXF++FXF++FXF--", 'F': "FF"},
    angle=60.0,
    max_iterations=7,
    scaling=ViewScaling(initial_heading=-60.0, length_factor=0.03, origin_x=0.2, origin_y=0.2),
)

SIERPINSKI_SQUARE = FractalDefinition(
    name="Sierpinski Square",
    variables="F",
    axiom="F+F+F+F",
    rules={'F': "FF+F+F+F+FF"},
    angle=90.0,
    max_iterations=5,
    scaling=ViewScaling(initial_heading=-90.0, length_factor=0.025, origin_x=0.2, origin_y=0.8),
)

FRACTAL_PLANT_2 = FractalDefinition(
    name="Fractal Plant 2",
    variables="FVWXYZ",
    axiom="VZFFF",
    rules={
        'F': "F",
        'V': "[+++W][---W]YV",
        'W': "+X[-W]Z",
        'X': "-W[+X]Z",
        'Y': "YZ",
        'Z': "[-FFF][+FFF]F",
    },
    angle=18.0,
    max_iterations=11,
    scaling=ViewScaling(initial_heading=-pi / 4.0, length_factor=0.15, origin_x=0.5, origin_y=0.8),
)

KOCH_SNOWFLAKE = FractalDefinition(
    name="Koch Snowflake",
    variables="F",
    axiom="F++F++F",
    rules={'F': "F-F++F-F"},
    angle=60.0,
    max_iterations=6,
    scaling=ViewScaling(initial_heading=-60.0, length_factor=0.01, origin_x=0.2, origin_y=0.7),
)

# Scaling chosen for this catalog: the rotation points the trunk straight up
# and the root sits just above the bottom edge
FRACTAL_TREE = FractalDefinition(
    name="Fractal Tree",
    variables="XF",
    axiom="X",
    rules={'X': "F+[[X]-X]-F[-FX]+X", 'F': "FF"},
    angle=30.0,
    max_iterations=7,
    scaling=ViewScaling(initial_heading=-0.155, length_factor=0.025, origin_x=0.5, origin_y=0.95),
)

# Ids are part of the public API, append new presets at the end
PRESETS = (
    BARNSLEY_FERN,
    DRAGON_CURVE,
    SEGMENT_32,
    FRACTAL_PLANT,
    KOCH_ISLAND,
    PEANO_GOSPER,
    HILBERT_CURVE,
    FREC_FRACTAL,
    SIERPINSKI_TRIANGLE,
    SIERPINSKI_SQUARE,
    FRACTAL_PLANT_2,
    KOCH_SNOWFLAKE,
    FRACTAL_TREE,
)


class FractalCatalog:
    """Read-only, id-ordered lookup table of fractal definitions."""

    def __init__(self, definitions: Mapping[int, FractalDefinition]):
        self._definitions = MappingProxyType(dict(sorted(definitions.items())))

    def get(self, fractal_id: int) -> FractalDefinition:
        try:
            return self._definitions[fractal_id]
        except (KeyError, TypeError):
            raise UnknownFractal(fractal_id) from None

    def __getitem__(self, fractal_id: int) -> FractalDefinition:
        return self.get(fractal_id)

    def __contains__(self, fractal_id) -> bool:
        try:
            return fractal_id in self._definitions
        except TypeError:
            return False

    def __iter__(self) -> Iterator[int]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def items(self):
        return self._definitions.items()

    def summary(self) -> List[Dict]:
        return [
            {
                "id": fractal_id,
                "name": definition.name,
                "angle": definition.angle,
                "max_iterations": definition.max_iterations,
            }
            for fractal_id, definition in self._definitions.items()
        ]


def build_catalog(presets=PRESETS) -> FractalCatalog:
    definitions = {}
    for fractal_id, definition in enumerate(presets, start=1):
        check_definition(definition)
        definitions[fractal_id] = definition
    return FractalCatalog(definitions)


__all__ = ['PRESETS', 'FractalCatalog', 'build_catalog']
