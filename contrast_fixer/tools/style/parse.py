from __future__ import annotations

import re

from contrast_fixer.app.errors import InvalidColorInput
from contrast_fixer.color.model import RGBColor

# rgb(r, g, b) / rgba(r, g, b, a) as produced by getComputedStyle
RGB_PATTERN = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*(\d*\.?\d+)\s*)?\)$",
    flags=re.IGNORECASE,
)


def parse_css_color(value: str) -> RGBColor:
    """
    "rgb(12, 34, 56)" -> RGBColor(r=12, g=34, b=56)
    "rgba(12, 34, 56, 0.5)" -> RGBColor(..., a=0.5)
    Hex, named colors and hsl() are not supported.
    """
    txt = (value or "").strip()
    m = RGB_PATTERN.match(txt)
    if not m:
        raise InvalidColorInput(f"Unsupported color syntax: {value!r}")

    r, g, b = (int(m.group(i)) for i in (1, 2, 3))
    a = float(m.group(4)) if m.group(4) is not None else None

    if any(c > 255 for c in (r, g, b)):
        raise InvalidColorInput(f"Channel out of range in {value!r}")
    if a is not None and a > 1.0:
        raise InvalidColorInput(f"Alpha out of range in {value!r}")

    return RGBColor(r=r, g=g, b=b, a=a)


def is_transparent(value: str | None) -> bool:
    """True when a background-color value paints nothing."""
    txt = (value or "").strip().lower()
    if not txt or txt == "transparent":
        return True
    try:
        color = parse_css_color(txt)
    except InvalidColorInput:
        return False
    return color.a == 0


def format_css_rgb(color: RGBColor) -> str:
    return f"rgb({color.r}, {color.g}, {color.b})"
