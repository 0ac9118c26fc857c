"""Add a brightness delta to every channel, clamped to [0, 255].

Positive delta brightens, negative darkens. delta defaults to 0.

Example:
    registry.get('brightness').run((250, 10, 0), delta=20)  # -> (255, 30, 20)
"""

from photoship.core.pixels import adjust_brightness
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='brightness', help='Add delta to every channel, clamped to [0, 255].')


@pixel_filter.apply
def apply(pixel: Pixel, delta: int = 0) -> Pixel:
    return adjust_brightness(pixel, delta)
