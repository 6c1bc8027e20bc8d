"""Tests for feature name synthesis."""

import pytest

from iconharvest.models import Category
from iconharvest.models import IconSize
from iconharvest.naming import feature_name
from iconharvest.naming import pascal_case


class TestPascalCase:
    """Tests for pascal_case()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Foo bar fill line md", "FooBarFillLineMd"),
            ("Ai arrow-left twotone", "AiArrowLeftTwotone"),
            ("Fluent access_time_20_regular", "FluentAccessTime20Regular"),
            ("Im -home", "ImHome"),
            ("Fluent text sr-cyrl", "FluentTextSrCyrl"),
            ("Fluent text LTR", "FluentTextLtr"),
            ("Vs fileTypeXml", "VsFileTypeXml"),
            ("Xx XMLHttpRequest", "XxXmlHttpRequest"),
            ("Go arrow-2x", "GoArrow2x"),
        ],
    )
    def test_folds_words(self, text, expected):
        """Test that words are capitalized and joined."""
        assert pascal_case(text) == expected

    def test_empty(self):
        """Test that nothing folds to nothing."""
        assert pascal_case("  - ") == ""


class TestFeatureName:
    """Tests for feature_name()."""

    def test_joins_all_parts_in_order(self):
        """Test package, name, categories and size appear in that order."""
        name = feature_name(
            "bar", IconSize.MD, [Category("fill"), Category("line")], "Foo"
        )

        assert name == "FooBarFillLineMd"
        assert " " not in name

    def test_without_size_and_categories(self):
        """Test that optional parts are left out."""
        assert feature_name("arrow-left", None, [], "Ri") == "RiArrowLeft"

    def test_category_order_is_preserved(self):
        """Test that categories are not sorted."""
        name = feature_name("x", None, [Category("line"), Category("fill")], "Foo")

        assert name == "FooXLineFill"

    def test_is_deterministic(self):
        """Test that equal inputs give equal names."""
        args = ("home", IconSize.LG, [Category("outline")], "Hi")

        assert feature_name(*args) == feature_name(*args) == "HiHomeOutlineLg"
