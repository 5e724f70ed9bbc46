import io
import logging
from math import cos, sin

import numpy as np
from PIL import Image, ImageDraw

from fractal_errors import SurfaceUnavailable

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0, 0)
STROKE_COLOR = (0, 0, 0, 255)
STROKE_WIDTH = 1


class RasterSurface:
    """A canvas-like drawing surface that renders to a PIL RGBA image.

    Keeps a current transform (translate / rotate) and a current point the
    same way a 2D canvas context does. Every line_to is stroked right away.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), BACKGROUND)
        self._draw = ImageDraw.Draw(self.image)
        self.reset_transform()
        self._current = None

    def clear(self):
        """Erase everything and reset the transform, like resizing a canvas."""
        self._draw.rectangle([0, 0, self.width, self.height], fill=BACKGROUND)
        self.reset_transform()
        self._current = None

    def reset_transform(self):
        # Affine transform (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
        self._transform = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def translate(self, dx, dy):
        a, b, c, d, e, f = self._transform
        self._transform = (a, b, c, d, e + a * dx + c * dy, f + b * dx + d * dy)

    def rotate(self, angle):
        """Rotate the coordinate system by angle radians."""
        a, b, c, d, e, f = self._transform
        ca, sa = cos(angle), sin(angle)
        self._transform = (
            a * ca + c * sa,
            b * ca + d * sa,
            c * ca - a * sa,
            d * ca - b * sa,
            e,
            f,
        )

    def transform_point(self, x, y):
        a, b, c, d, e, f = self._transform
        return (a * x + c * y + e, b * x + d * y + f)

    def move_to(self, x, y):
        self._current = self.transform_point(x, y)

    def line_to(self, x, y):
        end = self.transform_point(x, y)
        if self._current is not None:
            self._draw.line([self._current, end], fill=STROKE_COLOR, width=STROKE_WIDTH)
        self._current = end

    def get_image_data(self):
        """Copy of the pixels as a flat RGBA uint8 array, row-major."""
        return np.asarray(self.image, dtype=np.uint8).reshape(-1).copy()

    def put_image_data(self, data):
        data = np.asarray(data, dtype=np.uint8)
        expected = self.width * self.height * 4
        if data.size != expected:
            raise ValueError(f"Pixel buffer has {data.size} bytes, expected {expected}")
        self.image.paste(Image.fromarray(data.reshape(self.height, self.width, 4)))

    def to_image(self):
        return self.image

    def to_png_bytes(self):
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        buf.seek(0)
        return buf.getvalue()


def create_surface(width, height, max_side=4096):
    """Acquire a blank surface, or raise SurfaceUnavailable."""
    if width <= 0 or height <= 0:
        raise SurfaceUnavailable(f"Surface must have a positive size, got {width}x{height}")
    if width > max_side or height > max_side:
        raise SurfaceUnavailable(f"Surface {width}x{height} exceeds the {max_side}px limit")
    try:
        return RasterSurface(width, height)
    except (MemoryError, ValueError) as e:
        logger.error("Could not allocate a %dx%d surface: %s", width, height, e)
        raise SurfaceUnavailable(f"Could not allocate a {width}x{height} surface") from e


__all__ = ['RasterSurface', 'create_surface']
