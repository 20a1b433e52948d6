"""
Windows icon (.ico) container assembly.

ICO layout, all little-endian:

    header      6 bytes   reserved (0), image type (1 = icon, 2 = cursor), count
    directory  16 bytes   per image: width, height, colour count, reserved,
                          planes, bits per pixel, payload size, payload offset
    payloads              concatenated in directory order, no padding
"""

import logging
import struct
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from svg2ico.icon_image import IconImage, check_dimension

logger = logging.getLogger(__name__)

HEADER_SIZE = 6
ENTRY_SIZE = 16

ICON_TYPE = 1
CURSOR_TYPE = 2

HEADER_FORMAT = '<HHH'
ENTRY_FORMAT = '<BBBBHHII'


class IconFormatError(ValueError):
    """Raised when bytes do not form a valid icon container."""


@dataclass(frozen=True)
class DirectoryEntry:
    """One 16-byte directory record, as written to disk."""

    width: int
    height: int
    color_count: int
    reserved: int
    planes: int
    bits_per_pixel: int
    size: int
    offset: int

    def pack(self) -> bytes:
        return struct.pack(
            ENTRY_FORMAT,
            self.width,
            self.height,
            self.color_count,
            self.reserved,
            self.planes,
            self.bits_per_pixel,
            self.size,
            self.offset,
        )

    @property
    def pixel_width(self) -> int:
        """Width in pixels; a zero byte means 256."""
        return self.width or 256

    @property
    def pixel_height(self) -> int:
        return self.height or 256

    @classmethod
    def unpack(cls, raw: bytes) -> 'DirectoryEntry':
        return cls(*struct.unpack(ENTRY_FORMAT, raw))


class IconFile:
    """Ordered collection of icon images, serialized as one .ico file."""

    def __init__(self) -> None:
        self._images: List[IconImage] = []

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[IconImage]:
        return iter(self._images)

    @property
    def images(self) -> Tuple[IconImage, ...]:
        return tuple(self._images)

    def add_image(self, image: IconImage) -> None:
        self._images.append(image)
        logger.debug(f'Added {image!r} as entry {len(self._images) - 1}')

    def add_svg(self, svg: bytes, width: int, bits_per_pixel: Optional[int] = None) -> IconImage:
        """Rasterize `svg` at width x width and append the PNG as a new entry.

        When `bits_per_pixel` is not given it is read from the rendered PNG.
        """
        from svg2ico import rasterize

        check_dimension('width', width)
        png_data = rasterize.render_png(svg, width)
        if bits_per_pixel is None:
            bits_per_pixel = rasterize.png_bit_depth(png_data)
        image = IconImage(width, bits_per_pixel, png_data)
        self.add_image(image)
        return image

    def header(self) -> bytes:
        return struct.pack(HEADER_FORMAT, 0, ICON_TYPE, len(self._images))

    def layout(self) -> List[DirectoryEntry]:
        """Directory entries with payload offsets for the current images."""
        offset = HEADER_SIZE + ENTRY_SIZE * len(self._images)
        entries = []
        for image in self._images:
            entries.append(DirectoryEntry(
                width=image.width,
                height=image.height,
                color_count=0,  # no palette
                reserved=0,
                planes=1,
                bits_per_pixel=image.bits_per_pixel,
                size=image.size,
                offset=offset,
            ))
            offset += image.size
        logger.debug(f'Laid out {len(entries)} entries, {offset} bytes total')
        return entries

    def to_bytes(self) -> bytes:
        if not self._images:
            return b''

        parts = [self.header()]
        parts.extend(entry.pack() for entry in self.layout())
        parts.extend(image.data for image in self._images)
        return b''.join(parts)

    def save(self, path) -> None:
        """Write the container to `path`. Does nothing if there are no images."""
        if not self._images:
            logger.debug(f'No images, not writing {path}')
            return

        ico_data = self.to_bytes()
        with open(path, 'wb') as f:
            f.write(ico_data)
        logger.debug(f'Wrote {len(ico_data)} bytes to {path}')


def read_icon(data: bytes) -> Tuple[int, List[DirectoryEntry], List[bytes]]:
    """Parse an icon container into (image type, directory, payloads)."""
    if len(data) < HEADER_SIZE:
        raise IconFormatError(f'Truncated header: {len(data)} bytes')

    reserved, image_type, count = struct.unpack_from(HEADER_FORMAT, data, 0)
    if reserved != 0:
        raise IconFormatError(f'Reserved header field is {reserved}, expected 0')
    if image_type not in (ICON_TYPE, CURSOR_TYPE):
        raise IconFormatError(f'Unknown image type {image_type}')

    directory_end = HEADER_SIZE + ENTRY_SIZE * count
    if len(data) < directory_end:
        raise IconFormatError(
            f'Truncated directory: {count} entries need {directory_end} bytes, got {len(data)}'
        )

    entries = []
    payloads = []
    for i in range(count):
        start = HEADER_SIZE + ENTRY_SIZE * i
        entry = DirectoryEntry.unpack(data[start:start + ENTRY_SIZE])
        if entry.offset < directory_end or entry.offset + entry.size > len(data):
            raise IconFormatError(
                f'Entry {i} payload [{entry.offset}, {entry.offset + entry.size}) '
                f'lies outside the file'
            )
        entries.append(entry)
        payloads.append(data[entry.offset:entry.offset + entry.size])

    return image_type, entries, payloads
