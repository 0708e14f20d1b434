from __future__ import annotations

from contrast_fixer.color.model import HSVColor, RGBColor
from contrast_fixer.core.utils import clamp, round_half_up


def rgb_to_hsv(r: int, g: int, b: int) -> HSVColor:
    """
    8-bit RGB -> HSV.
    Hue is rounded to whole degrees (360 wraps to 0); saturation and value
    are percentages rounded to 2 decimals.
    """
    rn, gn, bn = r / 255, g / 255, b / 255
    v = max(rn, gn, bn)
    diff = v - min(rn, gn, bn)

    if diff == 0:
        # achromatic
        return HSVColor(h=0, s=0.0, v=round_half_up(v * 100, 2))

    def _sector(c: float) -> float:
        return (v - c) / 6 / diff + 1 / 2

    s = diff / v
    rr, gg, bb = _sector(rn), _sector(gn), _sector(bn)

    if rn == v:
        h = bb - gg
    elif gn == v:
        h = (1 / 3) + rr - bb
    else:
        h = (2 / 3) + gg - rr

    if h < 0:
        h += 1
    elif h > 1:
        h -= 1

    return HSVColor(
        h=int(round_half_up(h * 360)) % 360,
        s=round_half_up(s * 100, 2),
        v=round_half_up(v * 100, 2),
    )


def hsv_to_rgb(color: HSVColor) -> RGBColor:
    """
    HSV -> 8-bit RGB. Channels are clamped to [0, 255]; callers can rely on
    the result always being a valid RGBColor.
    """
    h = color.h
    s = color.s / 100.0
    v = color.v / 100.0

    def _channel(n: int) -> int:
        k = (n + h / 60) % 6
        f = v - v * s * max(min(k, 4 - k, 1), 0)
        return int(clamp(round_half_up(f * 255), 0, 255))

    return RGBColor(r=_channel(5), g=_channel(3), b=_channel(1))


def rgb_color_to_hsv(color: RGBColor) -> HSVColor:
    return rgb_to_hsv(color.r, color.g, color.b)
