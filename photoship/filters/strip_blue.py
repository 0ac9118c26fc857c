"""Remove the blue channel. The pixel shifts toward red/green."""

from photoship.core.pixels import strip_blue
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='strip-blue', help='Set the blue channel to 0.')


@pixel_filter.apply
def apply(pixel: Pixel) -> Pixel:
    return strip_blue(pixel)
