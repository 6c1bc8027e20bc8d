"""Synthesis of feature names from parsed icon name parts."""

import re
from collections.abc import Sequence

from iconharvest.models import Category
from iconharvest.models import IconSize

# Runs of letters/digits. Everything else separates words.
ALNUM_RUN_RE = re.compile(r"[^\W_]+")
# Word boundaries inside a run: "fooBar" -> foo|Bar, "XMLHttp" -> XML|Http.
CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def pascal_case(text: str) -> str:
    """Fold text into PascalCase.

    Words are split at every non-alphanumeric character and at case
    boundaries; each word is capitalized and the words are concatenated.

    Args:
        text: Text to fold, e.g. "Ai arrow-left twotone md"

    Returns:
        Folded identifier, e.g. "AiArrowLeftTwotoneMd"
    """
    words = []
    for run in ALNUM_RUN_RE.findall(text):
        words.extend(CASE_BOUNDARY_RE.split(run))
    return "".join(word[:1].upper() + word[1:].lower() for word in words if word)


def feature_name(
    raw_name: str,
    size: IconSize | None,
    categories: Sequence[Category],
    package_short_name: str,
) -> str:
    """Build the feature name of an icon.

    Args:
        raw_name: Icon name with package-specific decorations removed
        size: Size from the file name if it had one, else the inherited size
        categories: Categories in accumulation order
        package_short_name: Display name of the package, e.g. "Ai"

    Returns:
        PascalCase name of the form <package><name><categories...><size>
    """
    tokens = [package_short_name, raw_name]
    tokens.extend(category.value for category in categories)
    if size is not None:
        tokens.append(size.label)
    return pascal_case(" ".join(tokens))
