"""Shared types for photoship: Pixel, the pixel error family, and Filter."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from numbers import Integral
from typing import Any

Pixel = tuple[int, int, int]

CHANNEL_MIN = 0
CHANNEL_MAX = 255


class PixelError(ValueError):
    """Base class for malformed pixel input."""


class InvalidPixelError(PixelError):
    """Not a sequence of exactly three integer channels in [0, 255]."""


class UnknownChannelError(PixelError):
    """Channel selector outside r/g/b."""


def as_pixel(value: Sequence[int]) -> Pixel:
    """Validate a 3-channel sequence and return it as a Pixel tuple."""
    try:
        channels = list(value)
    except TypeError:
        raise InvalidPixelError(f'Pixel must be a sequence of 3 channels, got {value!r}') from None

    if len(channels) != 3:
        raise InvalidPixelError(f'Pixel must have exactly 3 channels, got {len(channels)}: {value!r}')

    for c in channels:
        # bool is an Integral too; True/False are never channel values
        if isinstance(c, bool) or not isinstance(c, Integral):
            raise InvalidPixelError(f'Channel values must be integers, got {c!r} in {value!r}')
        if not CHANNEL_MIN <= c <= CHANNEL_MAX:
            raise InvalidPixelError(f'Channel value {c} outside [{CHANNEL_MIN}, {CHANNEL_MAX}] in {value!r}')

    r, g, b = (int(c) for c in channels)
    return (r, g, b)


class Filter:
    """A self-registering pixel filter.

    Usage in a filter module:

        pixel_filter = Filter(name='invert', help='Invert every channel')

        @pixel_filter.apply
        def apply(pixel, **params):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._apply_fn: Callable[..., Pixel] | None = None

    def apply(self, fn: Callable[..., Pixel]) -> Callable[..., Pixel]:
        """Decorator to register the apply function."""
        self._apply_fn = fn
        return fn

    def run(self, pixel: Sequence[int] | str, **params: Any) -> Pixel:
        """Run the filter's apply function on a pixel.

        `pixel` may be a channel sequence, a hex string ('#2563eb') or a CSS
        colour name ('red'); all are validated by palette.parse_colour().
        """
        from photoship.core.palette import parse_colour

        if self._apply_fn is None:
            raise RuntimeError(f'Filter {self.name} has no apply function')
        return self._apply_fn(parse_colour(pixel), **params)

    def __repr__(self) -> str:
        return f'Filter(name={self.name!r})'
