import math
import struct
from typing import Tuple

from starquads.patterns.modes import StarMode

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
MAGENTA: Color = (255, 0, 255)

DENSE_GREEN = 100


def _f32(x: float) -> float:
    """Round to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", x))[0]


def _channel(value: float) -> int:
    return int(_f32(_f32(value * 255.0) + 0.5))


def hsb_to_rgb(hue: float, saturation: float, brightness: float) -> Color:
    """
    Convert HSB (a.k.a. HSV) to an 8-bit RGB triple.

    Every step is rounded to single precision, the way java.awt.Color does
    it, so channels land on the same integers. Only the fractional part of
    the hue matters, so 1.0 wraps back to red.
    """
    hue, s, v = _f32(hue), _f32(saturation), _f32(brightness)
    if s == 0:
        gray = _channel(v)
        return (gray, gray, gray)
    h = _f32(_f32(hue - math.floor(hue)) * 6.0)
    f = _f32(h - math.floor(h))
    p = _f32(v * _f32(1.0 - s))
    q = _f32(v * _f32(1.0 - _f32(s * f)))
    t = _f32(v * _f32(1.0 - _f32(s * _f32(1.0 - f))))
    sector = int(h)
    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    return (_channel(rgb[0]), _channel(rgb[1]), _channel(rgb[2]))


def hue_for(i: int, line_count: int) -> float:
    return _f32(i / line_count)


def dense_color(i: int) -> Color:
    r = 150 + (i * 3 % 100)
    b = 255 - (i * 2 % 100)
    return (r, DENSE_GREEN, b)


def color_for(mode: StarMode, i: int, line_count: int) -> Color:
    """Pick the arm color for step i of a star drawn in the given mode."""
    if mode is StarMode.RAINBOW:
        return hsb_to_rgb(hue_for(i, line_count), 1.0, 1.0)
    if mode is StarMode.DENSE:
        return dense_color(i)
    if mode in (StarMode.CLASSIC, StarMode.SWIRL):
        return MAGENTA
    raise ValueError(f"No color rule for mode {mode!r}")
