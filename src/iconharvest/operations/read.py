"""Reading all icons of a package."""

from pathlib import Path

from iconharvest.files import discover_icons
from iconharvest.models import Package
from iconharvest.models import SvgIcon
from iconharvest.operations.paths import default_icons_dir
from iconharvest.operations.paths import normalize_icons_dir


def read_package_icons(
    package: Package, icons_dir: Path | None = None
) -> list[SvgIcon]:
    """Read all icons under a package's icon directory.

    Either every icon is returned or the first error is raised; there is no
    partial result.

    Args:
        package: Package whose icons are read
        icons_dir: Root of the package's icon tree (will be resolved to
            absolute). Defaults to the package's cache location.

    Returns:
        List of icons with their feature names

    Raises:
        FileNotFoundError: If icons_dir does not exist
        NotADirectoryError: If icons_dir is not a directory
        IconReadError: If a directory or icon file cannot be read
        IconParseError: If an icon file is not a valid SVG
    """
    if icons_dir is None:
        icons_dir = default_icons_dir(package.short_name)
    icons_dir = normalize_icons_dir(icons_dir)

    return discover_icons(package, icons_dir)
