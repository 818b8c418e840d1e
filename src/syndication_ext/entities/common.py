"""
Common object attributes (``xml:base`` and ``xml:lang``).

Many entity kinds across formats carry these two attributes; they are read,
written and compared the same way everywhere.
"""

from typing import Optional

from syndication_ext.comparison import ComparableMixin, ComparisonMode, compare_language, compare_uri
from syndication_ext.exceptions import require
from syndication_ext.scalars import parse_language, parse_uri
from syndication_ext.xml import XML_NAMESPACE, XmlNode, XmlOutput, get_attribute


class CommonObjectAttributes(ComparableMixin):
    """Base URI and content language shared by syndication entities."""

    def __init__(self, base_uri: Optional[str] = None, language: Optional[str] = None) -> None:
        self.base_uri = base_uri
        self.language = language

    @property
    def is_empty(self) -> bool:
        return self.base_uri is None and self.language is None

    def fill(self, node: XmlNode) -> bool:
        """Load ``xml:base`` and ``xml:lang`` from ``node``.

        A malformed value leaves its field unset.

        Returns:
            True if either attribute was loaded
        """
        require(node, "node")
        loaded = False

        base_uri = parse_uri(get_attribute(node, "base", XML_NAMESPACE), "xml:base")
        if base_uri is not None:
            self.base_uri = base_uri
            loaded = True

        language = parse_language(get_attribute(node, "lang", XML_NAMESPACE), "xml:lang")
        if language is not None:
            self.language = language
            loaded = True

        return loaded

    def write_to(self, output: XmlOutput) -> None:
        """Write the attributes onto the element currently open on ``output``."""
        require(output, "output")
        if self.base_uri is not None:
            output.attribute("base", self.base_uri, XML_NAMESPACE)
        if self.language is not None:
            output.attribute("lang", self.language, XML_NAMESPACE)

    def to_xml(self) -> str:
        output = XmlOutput()
        output.start_element("common")
        self.write_to(output)
        output.end_element()
        return output.to_string()

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_uri(self.base_uri, other.base_uri),
            compare_language(self.language, other.language),
        ]

    def __repr__(self) -> str:
        return f"<CommonObjectAttributes(base_uri={self.base_uri!r}, language={self.language!r})>"
