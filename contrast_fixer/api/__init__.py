from __future__ import annotations

from contrast_fixer.api import runner

__all__ = [
    "runner",
]
