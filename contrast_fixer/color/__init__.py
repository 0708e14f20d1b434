from __future__ import annotations

"""
Color model and luminance math:
- model: RGBColor / HSVColor value types
- convert: RGB <-> HSV
- luminance: WCAG relative luminance and contrast ratio
"""

from contrast_fixer.color import convert, luminance, model

__all__ = [
    "convert",
    "luminance",
    "model",
]
