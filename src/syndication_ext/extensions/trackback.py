"""Trackback module extension for RSS items."""

from typing import Optional

from syndication_ext.comparison import ComparisonMode, combine, compare_number, compare_uri
from syndication_ext.exceptions import require
from syndication_ext.extensions.base import SyndicationExtension
from syndication_ext.scalars import parse_uri
from syndication_ext.xml import (
    RDF_NAMESPACE,
    XmlNode,
    XmlOutput,
    find_child,
    find_children,
    get_attribute,
    get_text,
)

TRACKBACK_NAMESPACE = "http://madskills.com/public/xml/rss/module/trackback/"


class TrackbackExtension(SyndicationExtension):
    """Trackback ping endpoint of an item, and the resources it pinged."""

    namespace_uri = TRACKBACK_NAMESPACE
    root_name = "ping"
    prefix = "trackback"
    title = "Trackback"
    documentation = "http://madskills.com/public/xml/rss/module/trackback/"

    def __init__(self, ping: Optional[str] = None, about: Optional[list[str]] = None) -> None:
        self.ping = ping
        self.about: list[str] = list(about or [])

    def parse(self, node: XmlNode) -> bool:
        require(node, "node")
        loaded = False

        ping = find_child(node, "ping", self.namespace_uri)
        if ping is not None:
            uri = parse_uri(get_attribute(ping, "resource", RDF_NAMESPACE) or get_text(ping), "trackback:ping")
            if uri is not None:
                self.ping = uri
                loaded = True

        for about in find_children(node, "about", self.namespace_uri):
            uri = parse_uri(get_attribute(about, "resource", RDF_NAMESPACE) or get_text(about), "trackback:about")
            if uri is not None:
                self.about.append(uri)
                loaded = True

        return loaded

    def write_to(self, output: XmlOutput) -> None:
        require(output, "output")
        if self.ping is not None:
            output.element_string("ping", self.namespace_uri, self.ping)
        for uri in self.about:
            output.start_element("about", self.namespace_uri)
            output.attribute("resource", uri, RDF_NAMESPACE)
            output.end_element()

    def required_namespaces(self) -> dict[str, Optional[str]]:
        namespaces = super().required_namespaces()
        if self.about:
            namespaces[RDF_NAMESPACE] = "rdf"
        return namespaces

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        about = [compare_uri(first, second) for first, second in zip(self.about, other.about)]
        about.append(compare_number(len(self.about), len(other.about)))
        return [
            compare_uri(self.ping, other.ping),
            combine(about, mode),
        ]
