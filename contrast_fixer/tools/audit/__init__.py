from __future__ import annotations

from contrast_fixer.tools.audit import checks

__all__ = [
    "checks",
]
