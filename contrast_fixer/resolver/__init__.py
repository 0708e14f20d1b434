from __future__ import annotations

"""
Contrast resolution:
- resolver: resolve_contrast entrypoint
- search: brightness search state machine
- policies: named threshold presets
- schemas: result types
"""

from contrast_fixer.resolver import policies, resolver, schemas, search

__all__ = [
    "policies",
    "resolver",
    "schemas",
    "search",
]
