"""Build Windows .ico files from SVG images."""

from svg2ico.icon_file import (
    CURSOR_TYPE,
    ENTRY_SIZE,
    HEADER_SIZE,
    ICON_TYPE,
    DirectoryEntry,
    IconFile,
    IconFormatError,
    read_icon,
)
from svg2ico.icon_image import IconImage, InvalidDimension

__version__ = '1.0.0'

__all__ = [
    'CURSOR_TYPE',
    'ENTRY_SIZE',
    'HEADER_SIZE',
    'ICON_TYPE',
    'DirectoryEntry',
    'IconFile',
    'IconFormatError',
    'IconImage',
    'InvalidDimension',
    'read_icon',
]
