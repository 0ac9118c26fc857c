"""Invert every channel: c -> 255 - c.

Applying the filter twice returns the original pixel.

Example:
    registry.get('invert').run((0, 128, 255))  # -> (255, 127, 0)
"""

from photoship.core.pixels import invert
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='invert', help='Invert every channel (255 - c).')


@pixel_filter.apply
def apply(pixel: Pixel) -> Pixel:
    return invert(pixel)
