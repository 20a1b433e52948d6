#!/usr/bin/env python3
"""
svg2ico

Creates a multi-size .ico file from an SVG source file.

Usage:
    svg2ico <input_svg> <output_ico> [--sizes 16,32,48,64] [--list] [-v]
"""

import argparse
import logging
from pathlib import Path

from svg2ico import __version__
from svg2ico.icon_file import IconFile, read_icon
from svg2ico.rasterize import load_svg

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (16, 32, 48, 64)


def parse_sizes(value):
    try:
        sizes = [int(s) for s in value.split(',') if s.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid size list: {value!r}')
    if not sizes:
        raise argparse.ArgumentTypeError('at least one size is required')
    return sizes


def build_parser():
    parser = argparse.ArgumentParser(
        prog='svg2ico',
        description='Create a .ico file from an SVG source file',
    )
    parser.add_argument('input', help='File path to the input SVG file')
    parser.add_argument('output', help='File path to the icon file to be generated')
    parser.add_argument(
        '--sizes',
        type=parse_sizes,
        default=list(DEFAULT_SIZES),
        help='Comma separated icon sizes in pixels (default: %(default)s)',
    )
    parser.add_argument('--list', action='store_true', help='Print the icon directory after writing')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def create_ico(input_path, output_path, sizes=DEFAULT_SIZES):
    svg = load_svg(input_path)
    icon = IconFile()
    for size in sizes:
        icon.add_svg(svg, size)
    icon.save(output_path)
    return icon


def print_directory(path):
    _, entries, _ = read_icon(Path(path).read_bytes())
    for i, entry in enumerate(entries):
        print(
            f'  [{i}] {entry.pixel_width}x{entry.pixel_height} {entry.bits_per_pixel}bpp '
            f'{entry.size} bytes @ {entry.offset}'
        )


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    input_path = Path(args.input).resolve()
    output_path = Path(args.output).resolve()
    if not input_path.is_file():
        print(f'ERROR: File not found. {args.input}')
        return 1

    try:
        create_ico(input_path, output_path, args.sizes)
        print(f'Converted {input_path.name} to {output_path.name}')
        if args.list:
            print_directory(output_path)
    except Exception as e:
        logger.debug('Conversion failed', exc_info=True)
        print(f'ERROR: {e}')
        return 1
    return 0
