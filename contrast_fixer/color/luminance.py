from __future__ import annotations

from contrast_fixer.color.model import RGBColor

# sRGB linearisation + Rec. 709 weights, as used by WCAG 2.x
_LINEAR_CUTOFF = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= _LINEAR_CUTOFF:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG relative luminance of an 8-bit sRGB color, in [0, 1]."""
    wr, wg, wb = _WEIGHTS
    return wr * _linearize(r) + wg * _linearize(g) + wb * _linearize(b)


def luminance_of(color: RGBColor) -> float:
    # alpha is ignored
    return relative_luminance(color.r, color.g, color.b)


def contrast_ratio(lum1: float, lum2: float) -> float:
    """Compute WCAG contrast ratio between two luminance levels."""
    l1, l2 = max(lum1, lum2), min(lum1, lum2)
    return (l1 + 0.05) / (l2 + 0.05)


def color_contrast(a: RGBColor, b: RGBColor) -> float:
    return contrast_ratio(luminance_of(a), luminance_of(b))
