"""Remove the green channel. The pixel shifts toward red/blue."""

from photoship.core.pixels import strip_green
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='strip-green', help='Set the green channel to 0.')


@pixel_filter.apply
def apply(pixel: Pixel) -> Pixel:
    return strip_green(pixel)
