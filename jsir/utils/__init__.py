"""
Utility modules for jsir.

This package contains the rendering settings and text helpers used by the
node catalog.
"""

from .settings import Settings, DEFAULT_SETTINGS
from .text import indent

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
    "indent",
]
