"""Colour helpers: hex strings and CSS colour names to pixels."""

import re
from collections.abc import Sequence

from PIL import ImageColor

from photoship.core.types import InvalidPixelError, Pixel, as_pixel

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def hex_to_rgb(value: str) -> Pixel:
    """'#rrggbb', 'rrggbb' or '#rgb' to (r, g, b). Malformed input returns black."""
    m = _HEX_RE.match(value.strip())
    if not m:
        return (0, 0, 0)
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse_colour(value: str | Sequence[int]) -> Pixel:
    """Build a pixel from a channel sequence, a hex string, or a CSS colour name."""
    if not isinstance(value, str):
        return as_pixel(value)

    text = value.strip()
    if _HEX_RE.match(text):
        return hex_to_rgb(text)

    try:
        rgb = ImageColor.getrgb(text)
    except ValueError:
        raise InvalidPixelError(f'Unknown colour: {value!r}') from None
    return as_pixel(rgb[:3])
