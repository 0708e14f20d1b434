# contrast_fixer/resolver/policies.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ContrastPolicy:
    """
    Named threshold preset.
    Keep this deterministic + versioned.
    """
    name: str
    version: str
    description: str
    min_contrast_ratio: float


# Bar used by the browser extension this package grew out of.
LEGACY_MIN_3 = ContrastPolicy(
    name="legacy_min_3",
    version="1.0",
    description="Minimum ratio of 3:1 for any text.",
    min_contrast_ratio=3.0,
)

WCAG_AA_LARGE_TEXT = ContrastPolicy(
    name="wcag_aa_large_text",
    version="2.1",
    description="WCAG 2.1 SC 1.4.3, large-scale text (>= 18pt or 14pt bold).",
    min_contrast_ratio=3.0,
)

WCAG_AA_TEXT = ContrastPolicy(
    name="wcag_aa_text",
    version="2.1",
    description="WCAG 2.1 SC 1.4.3, normal text.",
    min_contrast_ratio=4.5,
)

WCAG_AAA_LARGE_TEXT = ContrastPolicy(
    name="wcag_aaa_large_text",
    version="2.1",
    description="WCAG 2.1 SC 1.4.6, large-scale text.",
    min_contrast_ratio=4.5,
)

WCAG_AAA_TEXT = ContrastPolicy(
    name="wcag_aaa_text",
    version="2.1",
    description="WCAG 2.1 SC 1.4.6, normal text.",
    min_contrast_ratio=7.0,
)


_POLICY_REGISTRY: Dict[str, ContrastPolicy] = {
    p.name: p
    for p in (LEGACY_MIN_3, WCAG_AA_LARGE_TEXT, WCAG_AA_TEXT, WCAG_AAA_LARGE_TEXT, WCAG_AAA_TEXT)
}


def get_policy(name: str) -> ContrastPolicy:
    """
    Fetch a policy by name. Raises KeyError if missing.
    """
    return _POLICY_REGISTRY[name]


def list_policies() -> List[str]:
    return sorted(_POLICY_REGISTRY.keys())


def maybe_get_policy(name: str) -> Optional[ContrastPolicy]:
    return _POLICY_REGISTRY.get(name)
