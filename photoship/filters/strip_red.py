"""Remove the red channel. The pixel shifts toward green/blue.

Example:
    registry.get('strip-red').run((200, 120, 40))  # -> (0, 120, 40)
"""

from photoship.core.pixels import strip_red
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='strip-red', help='Set the red channel to 0.')


@pixel_filter.apply
def apply(pixel: Pixel) -> Pixel:
    return strip_red(pixel)
