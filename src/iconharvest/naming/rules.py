"""Per-package rules for stripping decorations from icon file names.

Each icon package embeds extra information in its file names: size suffixes,
style prefixes, numbering. A rule removes that decoration and returns the
remaining raw icon name, together with a size if the name contained one.
Rules never touch the filesystem.
"""

import string
from dataclasses import dataclass

from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.models import PackageType

FLUENT_LANGUAGES = frozenset(
    {
        "ar", "bg", "ca", "da", "de", "en", "es", "et", "eu", "fi", "fr", "gl",
        "gr", "he", "hu", "it", "ja", "kk", "ko", "lt", "lv", "ms", "no", "pt",
        "ru", "se", "sl", "sr", "sr-cyrl", "sr-latn", "sv", "tr", "uk", "zh",
        "LTR", "RTL",
    }
)  # fmt: skip
FLUENT_DIRECTION_MARKERS = ("Temp LTR", "Temp RTL")


class NamingRule:
    """Identity rule: the file stem is the raw name."""

    def parse(
        self, file_stem: str, categories: list[Category]
    ) -> tuple[str, IconSize | None]:
        """Split a file stem into raw icon name and size.

        Args:
            file_stem: File name without extension
            categories: Categories of the icon, which the rule may extend or
                filter in place

        Returns:
            Tuple of (raw name, size parsed from the name or None)
        """
        return file_stem, None


@dataclass(frozen=True)
class SizeSuffixRule(NamingRule):
    """Names end in a size numeral, e.g. "arrow-left-24"."""

    separator: str = "-"

    def parse(self, file_stem, categories):
        size = IconSize.try_parse(file_stem[-2:])
        name = file_stem.rstrip(string.digits).rstrip(self.separator)
        return name, size


@dataclass(frozen=True)
class PrefixRule(NamingRule):
    """Names start with one of several prefixes. The first match is removed."""

    prefixes: tuple[str, ...]

    def parse(self, file_stem, categories):
        for prefix in self.prefixes:
            if file_stem.startswith(prefix):
                return file_stem.removeprefix(prefix), None
        return file_stem, None


class LeadingNumeralRule(NamingRule):
    """Names are numbered, e.g. "001-home"."""

    def parse(self, file_stem, categories):
        return file_stem.lstrip(string.digits), None


@dataclass(frozen=True)
class SuffixCategoryRule(NamingRule):
    """Names end in a style suffix which becomes a category.

    Suffixes are checked in order and at most one is removed.
    """

    suffixes: tuple[tuple[str, str], ...]  # (suffix, category)

    def parse(self, file_stem, categories):
        for suffix, category in self.suffixes:
            if file_stem.endswith(suffix):
                categories.append(Category(category))
                return file_stem.removesuffix(suffix), None
        return file_stem, None


@dataclass(frozen=True)
class FluentRule(NamingRule):
    """Fluent UI names carry a prefix and only some directories are categories.

    Directory categories other than languages and text direction variants
    are dropped from the category list.
    """

    prefix: str = "ic_fluent_"

    def parse(self, file_stem, categories):
        categories[:] = [
            category for category in categories if is_fluent_category(category)
        ]
        return file_stem.removeprefix(self.prefix), None


def is_fluent_category(category: Category) -> bool:
    """Check if a Fluent UI directory category survives into the feature name."""
    return category.value in FLUENT_LANGUAGES or has_direction_marker(category)


def has_direction_marker(category: Category) -> bool:
    """Check if a category names a temporary text direction variant."""
    return category.value.endswith(FLUENT_DIRECTION_MARKERS)


DEFAULT_RULE = NamingRule()

RULES: dict[PackageType, NamingRule] = {
    PackageType.GITHUB_OCTICONS: SizeSuffixRule(),
    PackageType.WEATHER_ICONS: PrefixRule(prefixes=("wi-",)),
    PackageType.BOX_ICONS: PrefixRule(prefixes=("bxl-", "bx-", "bxs-")),
    PackageType.ICO_MOON_FREE: LeadingNumeralRule(),
    PackageType.REMIX_ICON: SuffixCategoryRule(
        suffixes=(("-fill", "fill"), ("-line", "line"))
    ),
    PackageType.FLUENT_UI_SYSTEM_ICONS: FluentRule(),
}


def rule_for(package_type: PackageType) -> NamingRule:
    """Get the naming rule of a package type. Unknown types use the identity rule."""
    return RULES.get(package_type, DEFAULT_RULE)


def parse_raw_icon_name(
    package_type: PackageType, file_stem: str, categories: list[Category]
) -> tuple[str, IconSize | None]:
    """Split a file stem into raw icon name and size using the package's rule.

    Args:
        package_type: Package the icon belongs to
        file_stem: File name without extension
        categories: Categories of the icon; may be extended or filtered in place

    Returns:
        Tuple of (raw name, size parsed from the name or None)
    """
    return rule_for(package_type).parse(file_stem, categories)
