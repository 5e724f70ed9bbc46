import re

import numpy as np

from fractal_errors import InvalidColor

_HEX_COLOR = re.compile(r"#?[0-9a-fA-F]{6}")


def parse_hex_color(hex_color):
    """'#4DFE44' or '4dfe44' -> (77, 254, 68)"""
    if not isinstance(hex_color, str) or not _HEX_COLOR.fullmatch(hex_color):
        raise InvalidColor(hex_color)
    hex_color = hex_color.lstrip('#')
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return (r, g, b)


def recolor(buffer, width, height, color_start, color_end):
    """Replace the color of every drawn pixel with a two color gradient.

    `buffer` is a flat RGBA uint8 array of width*height*4 bytes and is changed
    in place. A pixel counts as drawn when its alpha byte is non-zero. The
    gradient position is the alpha byte's offset in the whole buffer, so the
    colors follow raster scan order rather than the curve.
    """
    start = np.array(parse_hex_color(color_start), dtype=np.float32)
    end = np.array(parse_hex_color(color_end), dtype=np.float32)

    total = width * height * 4
    if buffer.size != total:
        raise ValueError(f"Pixel buffer has {buffer.size} bytes, expected {total}")
    if not buffer.flags.c_contiguous:
        # reshape would return a copy and the writes would never reach the caller
        raise ValueError("Pixel buffer must be C-contiguous")

    pixels = buffer.reshape(-1, 4)
    drawn = np.flatnonzero(pixels[:, 3])
    if drawn.size == 0:
        return buffer

    fraction = (drawn * 4 + 3).astype(np.float32) / np.float32(total)
    rgb = start + (end - start) * fraction[:, None]
    # Truncate like an integer cast; the interpolation never leaves [0, 255]
    pixels[drawn, :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    return buffer


__all__ = ['parse_hex_color', 'recolor']
