"""High-level operations for iconharvest."""

from iconharvest.operations.paths import default_icons_dir
from iconharvest.operations.paths import normalize_icons_dir
from iconharvest.operations.read import read_package_icons

__all__ = [
    "default_icons_dir",
    "normalize_icons_dir",
    "read_package_icons",
]
