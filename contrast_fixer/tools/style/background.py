from __future__ import annotations

from typing import Optional

from contrast_fixer.tools.style.element import ElementNode
from contrast_fixer.tools.style.parse import is_transparent

DEFAULT_BACKGROUND = "rgb(255, 255, 255)"


def find_ancestor_background_color(element: ElementNode) -> str:
    """
    Walk element -> parent -> ... and return the first painted background-color.
    Falls back to opaque white at the root.
    """
    current: Optional[ElementNode] = element
    while current is not None:
        value = current.get_style("background-color")
        if not is_transparent(value):
            return value.strip()  # type: ignore[union-attr]
        current = current.parent
    return DEFAULT_BACKGROUND
