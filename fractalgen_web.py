import logging
import time

from fractal_gradient import parse_hex_color, recolor
from fractal_surface import create_surface
from fractal_turtle import interpret

logger = logging.getLogger(__name__)


def render(catalog, fractal_id, iterations, color_start, color_end, surface):
    """Draw one fractal onto `surface` and apply the color gradient.

    Runs expansion, turtle drawing and recoloring to completion. Any failure
    raises one of the fractal_errors types and leaves no recolored pixels
    behind, since the buffer is only written back at the very end.
    """
    started = time.perf_counter()
    definition = catalog.get(fractal_id)
    sequence = definition.expand(iterations)
    # Colors are validated before anything is drawn
    parse_hex_color(color_start)
    parse_hex_color(color_end)

    surface.clear()
    interpret(sequence, definition, iterations, surface)

    data = surface.get_image_data()
    recolor(data, surface.width, surface.height, color_start, color_end)
    surface.put_image_data(data)

    logger.debug(
        "Rendered %s (iterations=%d, %d symbols) on %dx%d in %.1f ms",
        definition.name, iterations, len(sequence),
        surface.width, surface.height, (time.perf_counter() - started) * 1000,
    )
    return surface


def draw_fractal_web(catalog, fractal_id=1, iterations=4, color_start="#4DFE44", color_end="#1B95EC",
                     img_size=(800, 600), max_side=4096):
    width, height = img_size
    surface = create_surface(width, height, max_side=max_side)
    render(catalog, fractal_id, iterations, color_start, color_end, surface)
    return surface.to_image()


def draw_fractal_web_bytes(catalog, fractal_id=1, iterations=4, color_start="#4DFE44", color_end="#1B95EC",
                           img_size=(800, 600), max_side=4096):
    """
    Render a fractal and return it as PNG bytes (for web API)
    """
    width, height = img_size
    surface = create_surface(width, height, max_side=max_side)
    render(catalog, fractal_id, iterations, color_start, color_end, surface)
    return surface.to_png_bytes()


__all__ = ['render', 'draw_fractal_web', 'draw_fractal_web_bytes']
