"""
One rasterized image inside an icon container.

The payload is opaque: usually a PNG, but the container never looks inside.
"""

from dataclasses import dataclass
from typing import Optional, Union

MAX_DIMENSION = 255
MAX_BITS_PER_PIXEL = 0xFFFF


class InvalidDimension(ValueError):
    """Width or height does not fit the one-byte directory field."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(
            f'Invalid {name} {value!r}: must be an integer in 1..{MAX_DIMENSION}'
        )


def check_dimension(name, value):
    """Raise InvalidDimension unless `value` is an int in 1..255."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimension(name, value)
    if not 1 <= value <= MAX_DIMENSION:
        raise InvalidDimension(name, value)


@dataclass(frozen=True, init=False)
class IconImage:
    """Immutable metadata plus encoded payload for one icon entry.

    Fields:
        width: Pixel width, 1..255.
        height: Pixel height, 1..255. Equal to width unless given.
        bits_per_pixel: Colour depth written to the directory entry.
        data: Encoded image bytes.
    """

    width: int
    height: int
    bits_per_pixel: int
    data: bytes

    def __init__(
        self,
        width: int,
        bits_per_pixel: int,
        data: Union[bytes, bytearray, memoryview],
        height: Optional[int] = None,
    ) -> None:
        if height is None:
            height = width
        check_dimension('width', width)
        check_dimension('height', height)
        if isinstance(bits_per_pixel, bool) or not isinstance(bits_per_pixel, int):
            raise ValueError(f'bits_per_pixel must be an integer, got {bits_per_pixel!r}')
        if not 0 <= bits_per_pixel <= MAX_BITS_PER_PIXEL:
            raise ValueError(f'bits_per_pixel {bits_per_pixel} does not fit in 16 bits')

        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, 'width', width)
        object.__setattr__(self, 'height', height)
        object.__setattr__(self, 'bits_per_pixel', bits_per_pixel)
        object.__setattr__(self, 'data', bytes(data))

    @classmethod
    def square(cls, width: int, bits_per_pixel: int, data) -> 'IconImage':
        return cls(width, bits_per_pixel, data)

    @property
    def size(self) -> int:
        """Length of the encoded payload in bytes."""
        return len(self.data)

    def __repr__(self):
        return (
            f'IconImage(width={self.width}, height={self.height}, '
            f'bits_per_pixel={self.bits_per_pixel}, size={self.size})'
        )
