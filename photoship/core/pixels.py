"""Pure transforms over a single RGB pixel.

Every function validates its input with as_pixel() and returns a new
(R, G, B) tuple. The input sequence is never modified.
"""

from collections.abc import Sequence

import numpy as np

from photoship.core.types import CHANNEL_MAX, CHANNEL_MIN, Pixel, UnknownChannelError, as_pixel

BW_THRESHOLD = 128

# Rows produce R', G', B' from (R, G, B)
SEPIA_COEFFICIENTS = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)
SEPIA_MATRIX = np.array(SEPIA_COEFFICIENTS)

SEPIA_MODES = ('legacy', 'standard')

_CHANNEL_INDEX = {'r': 0, 'g': 1, 'b': 2}


def _average(pixel: Pixel) -> int:
    return sum(pixel) // 3


def _strip(pixel: Sequence[int], index: int) -> Pixel:
    channels = list(as_pixel(pixel))
    channels[index] = 0
    r, g, b = channels
    return (r, g, b)


def strip_red(pixel: Sequence[int]) -> Pixel:
    """Set the red channel to 0."""
    return _strip(pixel, 0)


def strip_green(pixel: Sequence[int]) -> Pixel:
    """Set the green channel to 0."""
    return _strip(pixel, 1)


def strip_blue(pixel: Sequence[int]) -> Pixel:
    """Set the blue channel to 0."""
    return _strip(pixel, 2)


def invert(pixel: Sequence[int]) -> Pixel:
    """Replace each channel c with 255 - c. Bright becomes dark and vice versa."""
    r, g, b = as_pixel(pixel)
    return (CHANNEL_MAX - r, CHANNEL_MAX - g, CHANNEL_MAX - b)


def grayscale(pixel: Sequence[int]) -> Pixel:
    """Set all three channels to the truncated mean of the channels."""
    avg = _average(as_pixel(pixel))
    return (avg, avg, avg)


def black_and_white(pixel: Sequence[int], threshold: int = BW_THRESHOLD) -> Pixel:
    """Threshold the channel mean: below `threshold` is black, otherwise white."""
    avg = _average(as_pixel(pixel))
    value = CHANNEL_MIN if avg < threshold else CHANNEL_MAX
    return (value, value, value)


def color_channel(pixel: Sequence[int], keep: str) -> Pixel:
    """Keep only one channel ('r', 'g' or 'b'); zero the other two.

    Same result as stripping the two channels that are not `keep`.
    """
    key = keep.lower() if isinstance(keep, str) else None
    if key not in _CHANNEL_INDEX:
        raise UnknownChannelError(f"Unknown channel: {keep!r}. Expected one of 'r', 'g', 'b'")

    result = as_pixel(pixel)
    if key != 'r':
        result = strip_red(result)
    if key != 'b':
        result = strip_blue(result)
    if key != 'g':
        result = strip_green(result)
    return result


def sepia(pixel: Sequence[int], mode: str = 'legacy') -> Pixel:
    """Warm brownish tone from SEPIA_MATRIX, truncated and capped at 255.

    Modes:
      legacy    Historical photoship output, kept bit for bit. Green is read
                from index 2 and blue from index 1, and the rows are applied
                in order so G' sees the new R' and B' sees the new R' and G'.
                Each row is summed left to right on plain floats; a different
                summation order changes the truncated result for a few pixels.
      standard  Every row reads the original (R, G, B) in index order.

    Only the upper bound is clamped. The coefficients are all positive, so
    no valid pixel can produce a negative channel.
    """
    r, g, b = as_pixel(pixel)

    if mode == 'legacy':
        red, blue, green = float(r), float(g), float(b)
        (rr, rg, rb), (gr, gg, gb), (br, bg, bb) = SEPIA_COEFFICIENTS
        red = (rr * red) + (rg * green) + (rb * blue)
        green = (gr * red) + (gg * green) + (gb * blue)
        blue = (br * red) + (bg * green) + (bb * blue)
        values = (red, green, blue)
    elif mode == 'standard':
        values = SEPIA_MATRIX @ np.array([r, g, b], dtype=float)
    else:
        raise ValueError(f'Unknown sepia mode: {mode!r}. Available: {", ".join(SEPIA_MODES)}')

    # int() truncates toward zero
    nr, ng, nb = (min(int(v), CHANNEL_MAX) for v in values)
    return (nr, ng, nb)


def adjust_brightness(pixel: Sequence[int], delta: int) -> Pixel:
    """Add `delta` to every channel, clamped to [0, 255]."""
    delta = int(delta)
    nr, ng, nb = (max(CHANNEL_MIN, min(CHANNEL_MAX, c + delta)) for c in as_pixel(pixel))
    return (nr, ng, nb)
