from __future__ import annotations

"""
Tools package for contrast-fixer.

The I/O side around the resolver:
- style: CSS color parsing/formatting, element tree, background lookup, applying results
- audit: issue records and report status
"""

from contrast_fixer.tools import audit, style

__all__ = [
    "audit",
    "style",
]
