"""Discovery of icons in an icon package directory tree."""

import logging
from pathlib import Path

from iconharvest.exceptions import IconReadError
from iconharvest.icon import build_icon
from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.models import Package
from iconharvest.models import PackageType
from iconharvest.models import SearchDir
from iconharvest.models import SvgIcon
from iconharvest.naming.rules import has_direction_marker

logger = logging.getLogger(__name__)

ICON_SUFFIX = ".svg"
FLUENT_STYLE_SUFFIXES = ("20_regular", "20_filled")


def discover_icons(package: Package, icons_path: Path) -> list[SvgIcon]:
    """Discover and build all icons below a package's icon directory.

    Directories are searched depth-first. Every subdirectory inherits the
    categories and icon size of its parent; its own name may add a category
    (see PackageType.is_category) and, if no size was inherited yet, a size.

    Args:
        package: Package the icons belong to
        icons_path: Root directory of the package's icons

    Returns:
        List of icons in discovery order. The order depends on the order
        the filesystem lists directory entries in.

    Raises:
        IconReadError: If a directory or icon file cannot be read
        IconParseError: If an icon file is not a valid SVG
    """
    logger.info("Reading icons of %s from %s", package.short_name, icons_path)
    icons: list[SvgIcon] = []
    search_dirs = [SearchDir(path=icons_path)]

    while search_dirs:
        search_dir = search_dirs.pop()

        for entry_path, is_dir in _list_entries(search_dir.path):
            if is_dir:
                logger.debug("Found additional directory %s", entry_path)
                search_dirs.append(_child_search_dir(package, search_dir, entry_path))
                continue

            if not _is_icon_file(entry_path):
                continue

            if not accepts_icon(package.ty, search_dir.categories, entry_path.stem):
                logger.debug("Skipping %s, rejected by package filter", entry_path)
                continue

            icons.append(
                build_icon(
                    package, entry_path, search_dir.icon_size, search_dir.categories
                )
            )

    logger.info("Found %d icons in %s", len(icons), package.short_name)
    return icons


def accepts_icon(
    package_type: PackageType, categories: tuple[Category, ...], file_stem: str
) -> bool:
    """Check whether an SVG file is one of the package's icons.

    Fluent UI ships every icon in several sizes, styles and formats; only the
    20px regular and filled SVGs of the base (non-direction-variant) icon
    directories are used. Every SVG of other packages is an icon.

    Args:
        package_type: Package the file belongs to
        categories: Categories inherited by the file's directory
        file_stem: File name without extension

    Returns:
        True if the file should be built into an icon
    """
    if package_type is not PackageType.FLUENT_UI_SYSTEM_ICONS:
        return True
    if len(categories) != 2:
        return False
    if any(has_direction_marker(category) for category in categories):
        return False
    return file_stem.endswith(FLUENT_STYLE_SUFFIXES)


def _list_entries(path: Path) -> list[tuple[Path, bool]]:
    """List (entry path, is directory) for the immediate entries of a directory."""
    try:
        return [(entry, entry.is_dir()) for entry in path.iterdir()]
    except OSError as e:
        raise IconReadError(path) from e


def _child_search_dir(package: Package, parent: SearchDir, path: Path) -> SearchDir:
    dir_name = path.name

    # The first directory whose name is a size counts.
    icon_size = parent.icon_size or IconSize.try_parse(dir_name)

    categories = parent.categories
    if package.ty.is_category(dir_name):
        categories = (*categories, Category(dir_name))

    return SearchDir(path=path, categories=categories, icon_size=icon_size)


def _is_icon_file(path: Path) -> bool:
    suffix = path.suffix
    if not suffix:
        logger.warning("Found file without extension: %s. Ignoring it.", path)
        return False

    try:
        suffix.encode("utf-8")
    except UnicodeEncodeError:
        logger.warning(
            "Found file whose extension could not be decoded: %r. Ignoring it.", path
        )
        return False

    if suffix != ICON_SUFFIX:
        logger.debug("Found file without svg extension: %s. Ignoring it.", path)
        return False

    return True
