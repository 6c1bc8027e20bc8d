"""Filesystem operations for iconharvest."""

from iconharvest.files.discover import accepts_icon
from iconharvest.files.discover import discover_icons

__all__ = [
    "accepts_icon",
    "discover_icons",
]
