"""Data models for iconharvest."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Self

from iconharvest.exceptions import UnrecognizedSizeError
from iconharvest.svg import ParsedSvg


@dataclass(frozen=True, order=True)
class Category:
    """A style or variant grouping an icon belongs to (e.g. "fill", "twotone")."""

    value: str

    def __str__(self) -> str:
        return self.value


class IconSize(Enum):
    """Size tier an icon is drawn for."""

    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "xxl"

    @property
    def label(self) -> str:
        """Lowercase label used in feature names."""
        return self.value

    @property
    def numeral(self) -> str:
        """Pixel size numeral used in package file and directory names."""
        return _SIZE_NUMERALS[self]

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a pixel size numeral such as "24".

        Args:
            text: Numeral to parse, matched exactly

        Returns:
            The matching size tier

        Raises:
            UnrecognizedSizeError: If text is not one of the known numerals
        """
        try:
            return _NUMERAL_SIZES[text]
        except KeyError:
            raise UnrecognizedSizeError(text) from None

    @classmethod
    def try_parse(cls, text: str) -> Self | None:
        """Parse a pixel size numeral, returning None when it is unknown."""
        return _NUMERAL_SIZES.get(text)

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Look up a size tier by its lowercase label (e.g. "md").

        Raises:
            UnrecognizedSizeError: If label is not a known tier label
        """
        try:
            return cls(label)
        except ValueError:
            raise UnrecognizedSizeError(label) from None


_SIZE_NUMERALS = {
    IconSize.XS: "12",
    IconSize.SM: "16",
    IconSize.MD: "20",
    IconSize.LG: "24",
    IconSize.XL: "48",
    IconSize.XXL: "96",
}
_NUMERAL_SIZES = {numeral: size for size, numeral in _SIZE_NUMERALS.items()}


class PackageType(str, Enum):
    """Icon package family. Selects naming and directory rules."""

    ANT_DESIGN_ICONS = "ant-design-icons"
    FONT_AWESOME = "font-awesome"
    WEATHER_ICONS = "weather-icons"
    GITHUB_OCTICONS = "github-octicons"
    BOX_ICONS = "box-icons"
    ICO_MOON_FREE = "icomoon-free"
    REMIX_ICON = "remix-icon"
    HERO_ICONS = "hero-icons"
    FLUENT_UI_SYSTEM_ICONS = "fluentui-system-icons"
    OTHER = "other"

    def is_category(self, dir_name: str) -> bool:
        """Check whether a directory name marks a category for its contents.

        Args:
            dir_name: Bare name of a directory inside the package's icon tree

        Returns:
            True if icons below this directory belong to a category of that name
        """
        # Every directory level carries meaning in the Fluent UI tree
        # (icon name, then format, then optional language).
        if self is PackageType.FLUENT_UI_SYSTEM_ICONS:
            return True
        return dir_name in _CATEGORY_DIRS.get(self, frozenset())


_CATEGORY_DIRS: dict[PackageType, frozenset[str]] = {
    PackageType.ANT_DESIGN_ICONS: frozenset({"filled", "outlined", "twotone"}),
    PackageType.FONT_AWESOME: frozenset({"regular", "solid", "brands"}),
    PackageType.HERO_ICONS: frozenset({"outline", "solid"}),
}


@dataclass(frozen=True)
class Package:
    """Metadata of the icon package being read."""

    short_name: str  # Display prefix of every feature name, e.g. "Ai"
    ty: PackageType


@dataclass(frozen=True)
class SearchDir:
    """A directory still to be searched for icons.

    Carries the categories and icon size valid for everything inside it.
    """

    path: Path
    categories: tuple[Category, ...] = ()
    icon_size: IconSize | None = None


@dataclass(frozen=True)
class SvgIcon:
    """An icon with its feature name and parsed SVG content."""

    name: str
    svg: ParsedSvg
