from __future__ import annotations

from contrast_fixer.color.convert import hsv_to_rgb
from contrast_fixer.color.luminance import color_contrast
from contrast_fixer.color.model import HSVColor, RGBColor
from contrast_fixer.resolver.schemas import SearchPhase

MIDPOINT = 50.0
TEXT_START_VALUE = 50.0
STEP = 1.0
DEFAULT_MAX_STEPS = 200

_TERMINAL = {"SATISFIED", "EXHAUSTED"}


class ContrastSearch:
    """
    Brightness-only search over one text/background pair.

    Each step moves exactly one HSV value by STEP. Which one is decided from
    the live background value (light means strictly above MIDPOINT):

    - light background: darken text to 0, then lighten background to 100
    - dark background: lighten text to 100, then darken background to 0

    Hue and saturation are never touched.
    """

    def __init__(
        self,
        background: HSVColor,
        text: HSVColor,
        *,
        threshold: float,
        max_steps: int = DEFAULT_MAX_STEPS,
    ):
        self.background = background
        # text always starts from mid brightness
        self.text = text.with_value(TEXT_START_VALUE)
        self.threshold = float(threshold)
        self.max_steps = int(max_steps)
        self.steps = 0
        self.phase: SearchPhase = "ADJUSTING_TEXT"
        self.contrast_ratio = self._measure()

    # ---------- state ----------
    def background_is_light(self) -> bool:
        return self.background.v > MIDPOINT

    def is_done(self) -> bool:
        return self.phase in _TERMINAL

    def background_rgb(self) -> RGBColor:
        return self._background_rgb

    def text_rgb(self) -> RGBColor:
        return self._text_rgb

    def _measure(self) -> float:
        self._background_rgb = hsv_to_rgb(self.background)
        self._text_rgb = hsv_to_rgb(self.text)
        return color_contrast(self._background_rgb, self._text_rgb)

    # ---------- transitions ----------
    def step(self) -> SearchPhase:
        if self.is_done():
            return self.phase
        if self.steps >= self.max_steps:
            self.phase = "EXHAUSTED"
            return self.phase

        if self.background_is_light():
            if self.text.v > 0:
                self.phase = "ADJUSTING_TEXT"
                self.text = self.text.with_value(self.text.v - STEP)
            elif self.background.v < 100:
                self.phase = "ADJUSTING_BACKGROUND"
                self.background = self.background.with_value(self.background.v + STEP)
            else:
                self.phase = "EXHAUSTED"
                return self.phase
        else:
            if self.text.v < 100:
                self.phase = "ADJUSTING_TEXT"
                self.text = self.text.with_value(self.text.v + STEP)
            elif self.background.v > 0:
                self.phase = "ADJUSTING_BACKGROUND"
                self.background = self.background.with_value(self.background.v - STEP)
            else:
                self.phase = "EXHAUSTED"
                return self.phase

        self.steps += 1
        self.contrast_ratio = self._measure()
        if self.contrast_ratio >= self.threshold:
            self.phase = "SATISFIED"
        return self.phase

    def run(self) -> SearchPhase:
        while not self.is_done():
            self.step()
        return self.phase
