from __future__ import annotations

from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict

from contrast_fixer.color.model import HSVColor, RGBColor

Outcome = Literal["SATISFIED", "EXHAUSTED"]

SearchPhase = Literal[
    "ADJUSTING_TEXT",
    "ADJUSTING_BACKGROUND",
    "SATISFIED",
    "EXHAUSTED",
]


class ContrastResolution(BaseModel):
    """What resolve_contrast hands back to the caller.

    EXHAUSTED is a best-effort result: background/text hold the last pair the
    search reached, which is as far apart as value changes alone can push them.
    """
    model_config = ConfigDict(frozen=True)

    background: RGBColor
    text: RGBColor
    changed: bool
    outcome: Outcome
    threshold: float
    initial_ratio: float
    contrast_ratio: float
    steps: int = 0
    # working values of the search; None when no search ran
    background_hsv: Optional[HSVColor] = None
    text_hsv: Optional[HSVColor] = None

    @property
    def satisfied(self) -> bool:
        return self.outcome == "SATISFIED"

    def summary(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome,
            "changed": self.changed,
            "steps": self.steps,
            "initial_ratio": round(self.initial_ratio, 3),
            "contrast_ratio": round(self.contrast_ratio, 3),
            "threshold": self.threshold,
        }
