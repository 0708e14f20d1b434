from __future__ import annotations

from contrast_fixer.tools.style import apply, background, contrast_wcag, element, parse

__all__ = [
    "apply",
    "background",
    "contrast_wcag",
    "element",
    "parse",
]
