from __future__ import annotations

"""
This module provides core functionality for the application.

It includes small numeric and collection helpers shared by the color code.
"""

from contrast_fixer.core import utils

__all__ = [
    "utils"
]
