from __future__ import annotations

import logging

from contrast_fixer.color.convert import rgb_color_to_hsv
from contrast_fixer.color.luminance import color_contrast
from contrast_fixer.color.model import RGBColor
from contrast_fixer.resolver.schemas import ContrastResolution
from contrast_fixer.resolver.search import DEFAULT_MAX_STEPS, ContrastSearch

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 3.0


def resolve_contrast(
    background: RGBColor,
    text: RGBColor,
    threshold: float = DEFAULT_THRESHOLD,
    *,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> ContrastResolution:
    """
    Make sure text/background reach `threshold` contrast.

    - Already sufficient -> inputs returned untouched, changed=False.
    - Otherwise run ContrastSearch and return its final pair, changed=True.
      outcome tells whether the threshold was actually reached.
    """
    initial = color_contrast(background, text)

    if initial >= threshold:
        return ContrastResolution(
            background=background,
            text=text,
            changed=False,
            outcome="SATISFIED",
            threshold=threshold,
            initial_ratio=initial,
            contrast_ratio=initial,
        )

    search = ContrastSearch(
        rgb_color_to_hsv(background),
        rgb_color_to_hsv(text),
        threshold=threshold,
        max_steps=max_steps,
    )
    phase = search.run()

    resolution = ContrastResolution(
        background=search.background_rgb(),
        text=search.text_rgb(),
        changed=True,
        outcome="SATISFIED" if phase == "SATISFIED" else "EXHAUSTED",
        threshold=threshold,
        initial_ratio=initial,
        contrast_ratio=search.contrast_ratio,
        steps=search.steps,
        background_hsv=search.background,
        text_hsv=search.text,
    )

    if resolution.satisfied:
        logger.debug("contrast resolved", extra={"ctx": resolution.summary()})
    else:
        logger.warning("contrast target not reachable by brightness alone", extra={"ctx": resolution.summary()})
    return resolution
