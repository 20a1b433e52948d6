import struct
import zlib

import pytest


def make_png(width, height, pixel=(100, 150, 200, 255), bit_depth=8, palette=None):
    """Solid colour PNG. A 4-tuple pixel gives RGBA, a 1-tuple greyscale.

    With `palette` (a list of RGB tuples) the image is indexed and `pixel`
    is a 1-tuple palette index. 16-bit samples are written big-endian.
    """
    if palette is not None:
        color_type = 3
    else:
        color_type = {1: 0, 3: 2, 4: 6}[len(pixel)]

    def png_chunk(chunk_type, data):
        chunk = chunk_type + data
        crc = zlib.crc32(chunk) & 0xffffffff
        return struct.pack('>I', len(data)) + chunk + struct.pack('>I', crc)

    png_data = b'\x89PNG\r\n\x1a\n'
    png_data += png_chunk(b'IHDR', struct.pack('>IIBBBBB', width, height, bit_depth, color_type, 0, 0, 0))
    if palette is not None:
        png_data += png_chunk(b'PLTE', b''.join(bytes(rgb) for rgb in palette))

    if bit_depth == 16:
        samples = b''.join(struct.pack('>H', v * 257) for v in pixel) * width
    elif bit_depth < 8:
        per_byte = 8 // bit_depth
        byte = 0
        for i in range(per_byte):
            byte |= pixel[0] << (8 - bit_depth * (i + 1))
        samples = bytes([byte]) * ((width + per_byte - 1) // per_byte)
    else:
        samples = bytes(pixel) * width
    row = b'\x00' + samples  # filter type: None
    png_data += png_chunk(b'IDAT', zlib.compress(row * height, 9))
    png_data += png_chunk(b'IEND', b'')
    return png_data


@pytest.fixture
def png():
    return make_png


SVG = b"""<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect width="100" height="100" fill="#6496c8"/>
  <circle cx="50" cy="50" r="38" fill="#ffffff"/>
</svg>
"""


@pytest.fixture
def svg_file(tmp_path):
    path = tmp_path / 'logo.svg'
    path.write_bytes(SVG)
    return path
