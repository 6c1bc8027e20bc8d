"""Icon directory location and validation."""

from pathlib import Path

from platformdirs import user_cache_path


def default_icons_dir(short_name: str) -> Path:
    """Get the cache location of a package's downloaded icons.

    Args:
        short_name: Short display name of the package

    Returns:
        Directory below the user cache dir, e.g.
        ~/.cache/iconharvest/packages/Ai on Linux
    """
    return user_cache_path("iconharvest") / "packages" / short_name


def normalize_icons_dir(icons_dir: Path) -> Path:
    """Normalize and validate an icon directory path.

    Args:
        icons_dir: Root directory of a package's icons

    Returns:
        Absolute path to the icon directory

    Raises:
        FileNotFoundError: If icons_dir does not exist
        NotADirectoryError: If icons_dir is not a directory
    """
    icons_dir = icons_dir.resolve()

    if not icons_dir.exists():
        raise FileNotFoundError(f"Icon directory does not exist: {icons_dir}")
    if not icons_dir.is_dir():
        raise NotADirectoryError(f"Icon path is not a directory: {icons_dir}")

    return icons_dir
