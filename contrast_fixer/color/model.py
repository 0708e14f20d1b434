from __future__ import annotations

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from contrast_fixer.core.utils import clamp, round_half_up

# -----------------------------
# RGB
# -----------------------------

class RGBColor(BaseModel):
    """sRGB color with 8-bit channels. Alpha is carried but never used in luminance math."""
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    def channels(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def opaque(self) -> "RGBColor":
        """Same color with alpha dropped."""
        if self.a is None:
            return self
        return RGBColor(r=self.r, g=self.g, b=self.b)

# -----------------------------
# HSV
# -----------------------------

class HSVColor(BaseModel):
    """
    Hue in whole degrees [0, 360), saturation and value as percentages [0, 100].

    Build with from_percent / from_unit_fraction so the scale of s and v is
    decided at the call site. A value of 1 means 1% for the former and 100%
    for the latter.
    """
    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, lt=360)
    s: float = Field(ge=0.0, le=100.0)
    v: float = Field(ge=0.0, le=100.0)

    @classmethod
    def from_percent(cls, h: float, s: float, v: float) -> "HSVColor":
        return cls(h=int(round_half_up(h)) % 360, s=s, v=v)

    @classmethod
    def from_unit_fraction(cls, h: float, s: float, v: float) -> "HSVColor":
        return cls(h=int(round_half_up(h)) % 360, s=s * 100.0, v=v * 100.0)

    def with_value(self, v: float) -> "HSVColor":
        """Copy with only the brightness changed; clamped to [0, 100]."""
        return HSVColor(h=self.h, s=self.s, v=clamp(v, 0.0, 100.0))
