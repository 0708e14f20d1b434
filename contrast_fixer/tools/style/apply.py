from __future__ import annotations

from contrast_fixer.resolver.schemas import ContrastResolution
from contrast_fixer.tools.style.element import ElementNode
from contrast_fixer.tools.style.parse import format_css_rgb


def apply_resolution(element: ElementNode, resolution: ContrastResolution) -> None:
    """Write the resolved pair onto the element's inline color / background-color."""
    element.set_style("color", format_css_rgb(resolution.text))
    element.set_style("background-color", format_css_rgb(resolution.background))
