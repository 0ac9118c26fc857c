"""Keep one channel and zero the other two.

Requires keep='r', 'g' or 'b'.

Example:
    registry.get('color-channel').run((10, 20, 30), keep='g')  # -> (0, 20, 0)
"""

from photoship.core.pixels import color_channel
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='color-channel', help="Keep one channel (keep='r'|'g'|'b'), zero the others.")


@pixel_filter.apply
def apply(pixel: Pixel, keep: str) -> Pixel:
    return color_channel(pixel, keep)
