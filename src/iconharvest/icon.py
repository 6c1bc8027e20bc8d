"""Construction of a single icon from a file in an icon package."""

import logging
from collections.abc import Sequence
from pathlib import Path

from iconharvest.exceptions import IconParseError
from iconharvest.exceptions import IconReadError
from iconharvest.exceptions import MissingNameError
from iconharvest.exceptions import SvgParseError
from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.models import Package
from iconharvest.models import SvgIcon
from iconharvest.naming import feature_name
from iconharvest.naming import parse_raw_icon_name
from iconharvest.svg import ParsedSvg

logger = logging.getLogger(__name__)

TWOTONE = Category("twotone")


def build_icon(
    package: Package,
    path: Path,
    size: IconSize | None,
    categories: Sequence[Category],
) -> SvgIcon:
    """Read an icon file and derive its feature name.

    Args:
        package: Package the icon belongs to
        path: Path to the SVG file
        size: Size inherited from the directory structure, if any. A size
            found in the file name takes precedence.
        categories: Categories inherited from the directory structure. Not
            modified; the package rule works on a copy.

    Returns:
        SvgIcon with feature name and parsed SVG

    Raises:
        MissingNameError: If path has no file stem
        IconReadError: If the file cannot be read
        IconParseError: If the file content is not a valid SVG
    """
    file_stem = path.stem
    if not file_stem:
        raise MissingNameError(path)

    icon_categories = list(categories)
    raw_name, size_from_name = parse_raw_icon_name(
        package.ty, file_stem, icon_categories
    )
    name = feature_name(
        raw_name,
        size_from_name or size,
        icon_categories,
        package.short_name,
    )
    logger.debug("Building icon %s from %s", name, path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise IconReadError(path, name=name, package=package.short_name) from e

    try:
        svg = ParsedSvg.parse(data, twotone=TWOTONE in icon_categories)
    except SvgParseError as e:
        raise IconParseError(path, name=name, package=package.short_name) from e

    return SvgIcon(name=name, svg=svg)
