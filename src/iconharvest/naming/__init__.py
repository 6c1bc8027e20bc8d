"""Feature name derivation for icons."""

from iconharvest.naming.feature import feature_name
from iconharvest.naming.feature import pascal_case
from iconharvest.naming.rules import parse_raw_icon_name
from iconharvest.naming.rules import rule_for

__all__ = [
    "feature_name",
    "parse_raw_icon_name",
    "pascal_case",
    "rule_for",
]
