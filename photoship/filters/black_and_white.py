"""Threshold the channel mean to pure black or pure white.

Mean below the threshold -> (0, 0, 0), otherwise (255, 255, 255).
The threshold defaults to PHOTOSHIP_BW_THRESHOLD (128 when unset);
pass threshold=N to override it for one call.

Example:
    registry.get('black-and-white').run((100, 150, 140))          # -> (255, 255, 255)
    registry.get('black-and-white').run((100, 150, 140), threshold=200)  # -> (0, 0, 0)
"""

from photoship.core.config import get_settings
from photoship.core.pixels import black_and_white
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(
    name='black-and-white',
    help='Black if the channel mean is below the threshold, otherwise white.',
)


@pixel_filter.apply
def apply(pixel: Pixel, threshold: int | None = None) -> Pixel:
    if threshold is None:
        threshold = get_settings().bw_threshold
    return black_and_white(pixel, threshold=threshold)
