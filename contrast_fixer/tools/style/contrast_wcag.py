from __future__ import annotations

from typing import Any, Dict, Optional

from contrast_fixer.resolver.resolver import DEFAULT_THRESHOLD, resolve_contrast
from contrast_fixer.resolver.search import DEFAULT_MAX_STEPS
from contrast_fixer.tools.style.background import DEFAULT_BACKGROUND
from contrast_fixer.tools.style.parse import format_css_rgb, parse_css_color


def contrast_wcag_fix(
    *,
    min_contrast_ratio: float = DEFAULT_THRESHOLD,
    bg: Optional[str] = None,
    fg: Optional[str] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Dict[str, Any]:
    """
    Check/fix one CSS color pair.
    bg defaults to white, fg to black (the browser defaults).
    Raises InvalidColorInput for strings that are not rgb()/rgba().
    """
    bg_css = bg or DEFAULT_BACKGROUND
    fg_css = fg or "rgb(0, 0, 0)"

    resolution = resolve_contrast(
        parse_css_color(bg_css).opaque(),
        parse_css_color(fg_css).opaque(),
        min_contrast_ratio,
        max_steps=max_steps,
    )

    if not resolution.changed:
        notes = "Contrast already sufficient; colors kept."
    elif resolution.satisfied:
        notes = f"Brightness adjusted in {resolution.steps} steps to reach {min_contrast_ratio}:1."
    else:
        notes = f"Could not reach {min_contrast_ratio}:1 by brightness alone; best effort returned."

    return {
        "op": "contrast_wcag",
        "params": {
            "min_contrast_ratio": min_contrast_ratio,
            "bg": bg_css,
            "fg": fg_css,
        },
        "result": {
            "bg": format_css_rgb(resolution.background),
            "fg": format_css_rgb(resolution.text),
            **resolution.summary(),
        },
        "notes": notes,
    }
