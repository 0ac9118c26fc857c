"""Warm brownish sepia tone, as seen in old photographs.

Channels are truncated and capped at 255. Two modes:
  legacy    historical photoship output, kept bit for bit
  standard  textbook sepia matrix over the original (R, G, B)

Mode defaults to PHOTOSHIP_SEPIA_MODE (legacy when unset);
pass mode='standard' to override it for one call.

Example:
    registry.get('sepia').run((100, 50, 80))                   # -> (110, 101, 90)
    registry.get('sepia').run((100, 50, 80), mode='standard')  # -> (92, 82, 64)
"""

from photoship.core.config import get_settings
from photoship.core.pixels import sepia
from photoship.core.types import Filter, Pixel

pixel_filter = Filter(name='sepia', help='Sepia tone (legacy or standard mode), capped at 255.')


@pixel_filter.apply
def apply(pixel: Pixel, mode: str | None = None) -> Pixel:
    if mode is None:
        mode = get_settings().sepia_mode
    return sepia(pixel, mode=mode)
