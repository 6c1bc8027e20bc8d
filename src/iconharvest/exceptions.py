"""Custom exceptions for iconharvest."""

from pathlib import Path


class IconHarvestError(Exception):
    """Base exception for iconharvest."""


class UnrecognizedSizeError(IconHarvestError, ValueError):
    """Text does not name a known icon size."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Icon size '{value}' could not be recognized")


class MissingNameError(IconHarvestError):
    """Icon path has no file name to derive a feature name from."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Cannot derive an icon name from path: {path}")


class SvgParseError(IconHarvestError):
    """SVG markup is malformed or not an SVG document."""


class IconReadError(IconHarvestError):
    """Icon file or directory could not be read."""

    def __init__(
        self, path: Path, name: str | None = None, package: str | None = None
    ):
        self.path = path
        self.name = name
        self.package = package
        if name is None:
            message = f"Error reading {path}"
        else:
            message = (
                f"Error reading icon: {name} from package: {package}, "
                f"with path: {path}"
            )
        super().__init__(message)


class IconParseError(IconHarvestError):
    """Icon file was read but its SVG content could not be parsed."""

    def __init__(self, path: Path, name: str, package: str):
        self.path = path
        self.name = name
        self.package = package
        super().__init__(
            f"Error parsing icon: {name} from package: {package}, with path: {path}"
        )
