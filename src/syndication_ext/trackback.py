"""
Trackback auto-discovery metadata.

Weblog pages advertise their trackback ping endpoint in an embedded RDF
block, usually hidden inside an HTML comment::

    <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
             xmlns:dc="http://purl.org/dc/elements/1.1/"
             xmlns:trackback="http://madskills.com/public/xml/rss/module/trackback/">
      <rdf:Description rdf:about="..." dc:identifier="..." dc:title="..."
                       trackback:ping="..." />
    </rdf:RDF>
"""

import re
from typing import Optional

from syndication_ext.comparison import ComparableMixin, ComparisonMode, compare_text, compare_uri
from syndication_ext.config import WriteSettings
from syndication_ext.exceptions import XmlFormatError, require
from syndication_ext.extensions.trackback import TRACKBACK_NAMESPACE
from syndication_ext.extensions.writer import NamespaceScope
from syndication_ext.logger import get_logger
from syndication_ext.scalars import parse_uri
from syndication_ext.xml import (
    DUBLIN_CORE_NAMESPACE,
    RDF_NAMESPACE,
    XmlNode,
    XmlOutput,
    find_child,
    get_attribute,
    parse_xml,
    qualified_name,
)

logger = get_logger(__name__)

_RDF_BLOCK_RE = re.compile(r"<rdf:RDF\b.*?</rdf:RDF>", re.DOTALL | re.IGNORECASE)


class TrackbackDiscoveryMetadata(ComparableMixin):
    """Trackback endpoint advertised by a web page."""

    def __init__(
        self,
        about: Optional[str] = None,
        identifier: Optional[str] = None,
        ping_url: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        self.about = about
        self.identifier = identifier
        self.ping_url = ping_url
        self.title = title

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        self._title = value.strip() if value else ""

    @classmethod
    def discover(cls, content: str) -> list["TrackbackDiscoveryMetadata"]:
        """Extract every usable RDF block from an HTML page.

        Blocks that are not well-formed or carry no ping URL are skipped.

        Args:
            content: Page markup

        Returns:
            Metadata in page order
        """
        results = []
        for match in _RDF_BLOCK_RE.finditer(content or ""):
            try:
                node = parse_xml(match.group(0))
            except XmlFormatError as e:
                logger.debug(f"Skipping malformed trackback RDF block: {e}")
                continue

            metadata = cls()
            if metadata.load(node):
                results.append(metadata)
        return results

    def load(self, node: XmlNode) -> bool:
        """Load from an ``rdf:RDF`` element, or any element containing one.

        Returns:
            True if metadata was loaded; False when no ping URL is present
        """
        require(node, "node")

        if node.tag == qualified_name("RDF", RDF_NAMESPACE):
            description = find_child(node, "Description", RDF_NAMESPACE)
        else:
            description = node.find(f".//{qualified_name('RDF', RDF_NAMESPACE)}/{qualified_name('Description', RDF_NAMESPACE)}")

        if description is None or not description.attrib:
            return False

        ping = get_attribute(description, "ping", TRACKBACK_NAMESPACE)
        if not ping:
            return False

        loaded = False

        about = parse_uri(get_attribute(description, "about", RDF_NAMESPACE), "rdf:about")
        if about is not None:
            self.about = about
            loaded = True

        identifier = parse_uri(get_attribute(description, "identifier", DUBLIN_CORE_NAMESPACE), "dc:identifier")
        if identifier is not None:
            self.identifier = identifier
            loaded = True

        title = get_attribute(description, "title", DUBLIN_CORE_NAMESPACE)
        if title:
            self.title = title
            loaded = True

        ping_url = parse_uri(ping, "trackback:ping")
        if ping_url is not None:
            self.ping_url = ping_url
            loaded = True

        return loaded

    def required_namespaces(self) -> dict[str, Optional[str]]:
        return {
            RDF_NAMESPACE: "rdf",
            DUBLIN_CORE_NAMESPACE: "dc",
            TRACKBACK_NAMESPACE: "trackback",
        }

    def write_to(self, output: XmlOutput) -> None:
        """Write the ``rdf:RDF`` block."""
        require(output, "output")
        output.start_element("RDF", RDF_NAMESPACE)
        output.start_element("Description", RDF_NAMESPACE)
        output.attribute("about", self.about or "", RDF_NAMESPACE)
        output.attribute("identifier", self.identifier or "", DUBLIN_CORE_NAMESPACE)
        output.attribute("title", self.title, DUBLIN_CORE_NAMESPACE)
        output.attribute("ping", self.ping_url or "", TRACKBACK_NAMESPACE)
        output.end_element()
        output.end_element()

    def to_xml(self) -> str:
        output = XmlOutput(settings=WriteSettings(indent=True, xml_declaration=False))
        output.declare_namespaces(NamespaceScope.build([self.required_namespaces()]))
        self.write_to(output)
        return output.to_string()

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_uri(self.about, other.about),
            compare_uri(self.identifier, other.identifier),
            compare_uri(self.ping_url, other.ping_url),
            compare_text(self.title, other.title),
        ]

    def __repr__(self) -> str:
        return f"<TrackbackDiscoveryMetadata(ping_url={self.ping_url!r})>"
