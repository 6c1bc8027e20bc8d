"""Tests for per-package naming rules."""

import pytest

from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.models import PackageType
from iconharvest.naming import parse_raw_icon_name
from iconharvest.naming import rule_for
from iconharvest.naming.rules import DEFAULT_RULE


class TestSizeSuffixRule:
    """Tests for GitHub Octicons names like "alert-24"."""

    @pytest.mark.parametrize(
        ("stem", "name", "size"),
        [
            ("alert-24", "alert", IconSize.LG),
            ("alert-16", "alert", IconSize.SM),
            ("arrow-both-12", "arrow-both", IconSize.XS),
            ("north-star-96", "north-star", IconSize.XXL),
        ],
    )
    def test_strips_and_parses_size(self, stem, name, size):
        """Test that a known size suffix is parsed and removed."""
        assert parse_raw_icon_name(PackageType.GITHUB_OCTICONS, stem, []) == (
            name,
            size,
        )

    def test_unknown_size_suffix_yields_no_size(self):
        """Test that an unknown numeral is trimmed but is not an error."""
        raw_name, size = parse_raw_icon_name(PackageType.GITHUB_OCTICONS, "alert-32", [])

        assert size is None
        assert raw_name == "alert"

    def test_name_without_suffix(self):
        """Test that a name without numerals is unchanged."""
        assert parse_raw_icon_name(PackageType.GITHUB_OCTICONS, "alert", []) == (
            "alert",
            None,
        )

    def test_short_name(self):
        """Test that names shorter than a size suffix do not fail."""
        assert parse_raw_icon_name(PackageType.GITHUB_OCTICONS, "x", []) == ("x", None)


class TestPrefixRules:
    """Tests for prefix stripping packages."""

    def test_weather_icons_prefix(self):
        """Test that the "wi-" prefix is removed."""
        assert parse_raw_icon_name(PackageType.WEATHER_ICONS, "wi-day-sunny", []) == (
            "day-sunny",
            None,
        )

    def test_weather_icons_without_prefix(self):
        """Test that names without the prefix are kept."""
        assert parse_raw_icon_name(PackageType.WEATHER_ICONS, "day-sunny", []) == (
            "day-sunny",
            None,
        )

    @pytest.mark.parametrize(
        ("stem", "name"),
        [
            ("bxl-github", "github"),
            ("bx-home", "home"),
            ("bxs-home", "home"),
            ("home", "home"),
        ],
    )
    def test_box_icons_prefixes(self, stem, name):
        """Test that the first matching Box Icons prefix is removed."""
        assert parse_raw_icon_name(PackageType.BOX_ICONS, stem, []) == (name, None)

    def test_box_icons_removes_only_one_prefix(self):
        """Test that prefixes are not removed repeatedly."""
        raw_name, _ = parse_raw_icon_name(PackageType.BOX_ICONS, "bx-bxs-home", [])

        assert raw_name == "bxs-home"

    def test_icomoon_leading_numerals(self):
        """Test that IcoMoon numbering is removed."""
        raw_name, size = parse_raw_icon_name(PackageType.ICO_MOON_FREE, "001-home", [])

        assert raw_name == "-home"
        assert size is None


class TestSuffixCategoryRule:
    """Tests for Remix Icon "-fill"/"-line" suffixes."""

    def test_fill_suffix(self):
        """Test that "-fill" becomes the category "fill"."""
        categories = []

        raw_name, size = parse_raw_icon_name(
            PackageType.REMIX_ICON, "arrow-left-fill", categories
        )

        assert raw_name == "arrow-left"
        assert size is None
        assert categories == [Category("fill")]

    def test_line_suffix(self):
        """Test that "-line" becomes the category "line"."""
        categories = [Category("Arrows")]

        raw_name, _ = parse_raw_icon_name(
            PackageType.REMIX_ICON, "arrow-left-line", categories
        )

        assert raw_name == "arrow-left"
        assert categories == [Category("Arrows"), Category("line")]

    def test_no_suffix(self):
        """Test that names without a style suffix add no category."""
        categories = []

        raw_name, _ = parse_raw_icon_name(PackageType.REMIX_ICON, "arrow", categories)

        assert raw_name == "arrow"
        assert categories == []

    def test_only_one_suffix_applies(self):
        """Test that only the outermost style suffix is removed."""
        categories = []

        raw_name, _ = parse_raw_icon_name(
            PackageType.REMIX_ICON, "pen-line-fill", categories
        )

        assert raw_name == "pen-line"
        assert categories == [Category("fill")]


class TestFluentRule:
    """Tests for Fluent UI System Icons names."""

    def test_strips_prefix_and_filters_categories(self):
        """Test that only language and direction categories are kept."""
        categories = [
            Category("Text Bold"),
            Category("SVG"),
            Category("de"),
            Category("Text Direction Temp LTR"),
            Category("sr-latn"),
        ]

        raw_name, size = parse_raw_icon_name(
            PackageType.FLUENT_UI_SYSTEM_ICONS, "ic_fluent_text_bold_20_regular", categories
        )

        assert raw_name == "text_bold_20_regular"
        assert size is None
        assert categories == [
            Category("de"),
            Category("Text Direction Temp LTR"),
            Category("sr-latn"),
        ]

    def test_filters_in_place(self):
        """Test that the caller's list object is the one filtered."""
        categories = [Category("Access Time"), Category("SVG")]
        original = categories

        parse_raw_icon_name(
            PackageType.FLUENT_UI_SYSTEM_ICONS, "ic_fluent_access_time_20_filled", categories
        )

        assert original is categories
        assert categories == []


class TestDefaultRule:
    """Tests for packages without a naming rule."""

    def test_identity(self):
        """Test that the stem is returned unchanged."""
        categories = [Category("outline")]

        result = parse_raw_icon_name(PackageType.OTHER, "wi-001-home-24", categories)

        assert result == ("wi-001-home-24", None)
        assert categories == [Category("outline")]

    @pytest.mark.parametrize(
        "package_type",
        [PackageType.OTHER, PackageType.ANT_DESIGN_ICONS, PackageType.HERO_ICONS],
    )
    def test_rule_for_falls_back_to_default(self, package_type):
        """Test that package types without a rule get the identity rule."""
        assert rule_for(package_type) is DEFAULT_RULE
