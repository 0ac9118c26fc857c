"""Replace every channel with the truncated mean (R + G + B) // 3."""

from photoship.core.pixels import grayscale
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='grayscale', help='Set every channel to the channel mean.')


@pixel_filter.apply
def apply(pixel: Pixel) -> Pixel:
    return grayscale(pixel)
