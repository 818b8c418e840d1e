"""Atom link entity (``atom:link``)."""

from typing import TYPE_CHECKING, Optional

from syndication_ext.comparison import (
    ComparableMixin,
    ComparisonMode,
    compare_language,
    compare_number,
    compare_text,
    compare_uri,
)
from syndication_ext.config import WriteSettings
from syndication_ext.entities.base import ExtensibleEntity
from syndication_ext.entities.common import CommonObjectAttributes
from syndication_ext.exceptions import require
from syndication_ext.extensions.writer import NamespaceWriter, write_extensions
from syndication_ext.scalars import parse_int, parse_language, parse_uri
from syndication_ext.xml import ATOM_NAMESPACE, XmlNode, XmlOutput, get_attribute

if TYPE_CHECKING:
    from syndication_ext.extensions.adapter import ExtensionAdapter


class AtomLink(ComparableMixin, ExtensibleEntity):
    """Reference from an Atom entry or feed to a Web resource."""

    def __init__(self, href: Optional[str] = None, relation: Optional[str] = None) -> None:
        super().__init__()
        self.common = CommonObjectAttributes()
        self.href = href
        self.relation = relation
        self.content_type = None
        self.content_language: Optional[str] = None
        self.title = None
        self._length: Optional[int] = None

    @property
    def base_uri(self) -> Optional[str]:
        return self.common.base_uri

    @base_uri.setter
    def base_uri(self, value: Optional[str]) -> None:
        self.common.base_uri = value

    @property
    def language(self) -> Optional[str]:
        return self.common.language

    @language.setter
    def language(self, value: Optional[str]) -> None:
        self.common.language = value

    @property
    def relation(self) -> str:
        return self._relation

    @relation.setter
    def relation(self, value: Optional[str]) -> None:
        self._relation = value.strip() if value else ""

    @property
    def content_type(self) -> str:
        """Advisory media type of the linked resource."""
        return self._content_type

    @content_type.setter
    def content_type(self, value: Optional[str]) -> None:
        self._content_type = value.strip() if value else ""

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self._title = value.strip() if value else ""

    @property
    def length(self) -> Optional[int]:
        """Advisory length of the linked content in octets."""
        return self._length

    @length.setter
    def length(self, value: Optional[int]) -> None:
        if value is not None and value < 0:
            raise ValueError(f"length must not be negative, got {value}")
        self._length = value

    def load(self, node: XmlNode, adapter: Optional["ExtensionAdapter"] = None) -> bool:
        """Load the link from an ``atom:link`` element.

        Args:
            node: The ``link`` element
            adapter: When given, extensions found on the element are attached too

        Returns:
            True if any link data was loaded
        """
        require(node, "node")
        loaded = self.common.fill(node)

        href = parse_uri(get_attribute(node, "href"), "href")
        if href is not None:
            self.href = href
            loaded = True

        relation = get_attribute(node, "rel")
        if relation:
            self.relation = relation
            loaded = True

        content_type = get_attribute(node, "type")
        if content_type:
            self.content_type = content_type
            loaded = True

        hreflang = parse_language(get_attribute(node, "hreflang"), "hreflang")
        if hreflang is not None:
            self.content_language = hreflang
            loaded = True

        title = get_attribute(node, "title")
        if title:
            self.title = title
            loaded = True

        length = parse_int(get_attribute(node, "length"), "length")
        if length is not None and length >= 0:
            self.length = length
            loaded = True

        if adapter is not None:
            adapter.fill_from_document(self, node)

        return loaded

    def required_namespaces(self) -> dict[str, Optional[str]]:
        return {ATOM_NAMESPACE: "atom"}

    def write_to(self, output: XmlOutput) -> None:
        """Write the link as an ``atom:link`` element."""
        require(output, "output")
        output.start_element("link", ATOM_NAMESPACE)
        self.common.write_to(output)
        output.attribute("href", self.href or "")

        if self.relation:
            output.attribute("rel", self.relation)
        if self.content_type:
            output.attribute("type", self.content_type)
        if self.content_language:
            output.attribute("hreflang", self.content_language)
        if self.title:
            output.attribute("title", self.title)
        if self.length is not None:
            output.attribute("length", str(self.length))

        write_extensions(self.extensions, output)
        output.end_element()

    def to_xml(self) -> str:
        """Serialize the link as a standalone element."""
        output = XmlOutput(
            default_namespace=ATOM_NAMESPACE,
            settings=WriteSettings(indent=True, xml_declaration=False),
        )
        NamespaceWriter().write(self, output)
        return output.to_string()

    def _comparison_fields(self, other: "AtomLink", mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_number(self.length, other.length),
            compare_text(self.content_type, other.content_type),
            compare_text(self.relation, other.relation),
            compare_language(self.content_language, other.content_language),
            compare_text(self.title, other.title),
            compare_uri(self.href, other.href),
            self.common.compare_to(other.common, mode=mode),
        ]

    def __repr__(self) -> str:
        return f"<AtomLink(href={self.href!r}, relation={self.relation!r})>"
