"""
SVG rasterization for icon entries.
Requires: cairosvg, Pillow
"""

import logging
import struct
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# PNG IHDR colour type -> channels per pixel
PNG_CHANNELS = {0: 1, 2: 3, 3: 1, 4: 2, 6: 4}

# Pillow mode -> bits per pixel, for non-PNG payloads
MODE_BIT_DEPTHS = {
    '1': 1,
    'L': 8,
    'P': 8,
    'LA': 16,
    'I;16': 16,
    'RGB': 24,
    'RGBA': 32,
    'I': 32,
    'F': 32,
}


class RasterizeError(Exception):
    """The SVG could not be rendered or the result is not a usable PNG."""


def load_svg(path) -> bytes:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f'File not found. {path}')
    return path.read_bytes()


def render_png(svg: bytes, width: int, height: int = None) -> bytes:
    """Render an SVG document to PNG bytes at width x height (square by default)."""
    import cairosvg

    if height is None:
        height = width
    logger.debug(f'Rendering SVG at {width}x{height}')
    try:
        return cairosvg.svg2png(bytestring=svg, output_width=width, output_height=height)
    except Exception as e:
        raise RasterizeError(f'Failed to render SVG at {width}x{height}: {e}') from e


def png_bit_depth(data: bytes) -> int:
    """Bits per pixel of an encoded image.

    For PNG this is the IHDR sample depth times the channel count, so a
    4-bit palette image gives 4 and 16-bit RGBA gives 64. Other formats
    fall back to the Pillow mode.
    """
    try:
        with Image.open(BytesIO(data)) as img:
            image_format = img.format
            mode = img.mode
    except UnidentifiedImageError as e:
        raise RasterizeError('Rendered payload is not a recognizable image') from e

    if image_format == 'PNG':
        # signature (8), chunk length (4), b'IHDR' (4), width (4), height (4)
        depth, color_type = struct.unpack_from('>BB', data, 24)
        return depth * PNG_CHANNELS[color_type]

    if mode not in MODE_BIT_DEPTHS:
        raise RasterizeError(f'Unsupported image mode {mode}')
    return MODE_BIT_DEPTHS[mode]
