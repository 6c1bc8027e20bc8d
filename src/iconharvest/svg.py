"""Parsing of icon SVG markup."""

import re
from dataclasses import dataclass
from dataclasses import field
from typing import Self

from lxml import etree

from iconharvest.exceptions import SvgParseError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

LENGTH_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")

# Two-tone icons draw with one primary and one or more secondary colours.
TWOTONE_PRIMARY = frozenset({"#333", "#333333"})
TWOTONE_SECONDARY = frozenset({"#e6e6e6", "#d9d9d9"})
TWOTONE_SECONDARY_OPACITY = "0.2"


@dataclass(frozen=True)
class ParsedSvg:
    """Normalized SVG document: root attributes and inner markup."""

    view_box: str | None
    content: str  # Serialized children of the <svg> root, without namespaces
    attributes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, data: bytes, twotone: bool = False) -> Self:
        """Parse and normalize raw SVG bytes.

        Comments, elements from foreign namespaces (editor metadata) and
        namespaced attributes are dropped. A missing viewBox is derived from
        the root width and height.

        Args:
            data: Raw file content
            twotone: Rewrite two-tone fill colours to currentColor

        Returns:
            ParsedSvg for the document

        Raises:
            SvgParseError: If data is not well-formed XML or has no <svg> root,
                or if no viewBox can be determined
        """
        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise SvgParseError(f"Malformed SVG: {e}") from e

        qname = etree.QName(root)
        if qname.localname != "svg" or qname.namespace not in (None, SVG_NAMESPACE):
            raise SvgParseError(f"Expected <svg> root element, found <{root.tag}>")

        _strip_foreign(root)

        attributes = {
            name: value
            for name, value in root.attrib.items()
            if name not in ("width", "height", "viewBox")
        }
        view_box = root.get("viewBox") or _view_box_from_size(root)

        if twotone:
            _rewrite_twotone(root)

        content = "".join(
            etree.tostring(child, encoding="unicode") for child in root
        ).strip()
        return cls(view_box=view_box, content=content, attributes=attributes)


def _strip_foreign(root: etree._Element) -> None:
    """Remove non-SVG elements and attributes, then drop namespace prefixes."""
    for elem in list(root.iterdescendants()):
        if not isinstance(elem.tag, str):
            # Processing instructions and entity references
            elem.getparent().remove(elem)
            continue
        if etree.QName(elem).namespace not in (None, SVG_NAMESPACE):
            parent = elem.getparent()
            if parent is not None:
                parent.remove(elem)

    for elem in root.iter(etree.Element):
        for attr_name in list(elem.attrib.keys()):
            if "}" in attr_name:
                del elem.attrib[attr_name]
        elem.tag = etree.QName(elem).localname

    etree.cleanup_namespaces(root)


def _view_box_from_size(root: etree._Element) -> str:
    width = root.get("width")
    height = root.get("height")
    if not (width and height):
        raise SvgParseError("Neither viewBox nor width/height attributes found")

    width_match = LENGTH_RE.match(width)
    height_match = LENGTH_RE.match(height)
    if not (width_match and height_match):
        raise SvgParseError(f"Could not parse width/height ({width}, {height})")

    return f"0 0 {width_match.group(1)} {height_match.group(1)}"


def _rewrite_twotone(root: etree._Element) -> None:
    for elem in root.iter():
        fill = elem.get("fill")
        if fill is None:
            continue
        if fill.lower() in TWOTONE_PRIMARY:
            elem.set("fill", "currentColor")
        elif fill.lower() in TWOTONE_SECONDARY:
            elem.set("fill", "currentColor")
            elem.set("fill-opacity", TWOTONE_SECONDARY_OPACITY)
