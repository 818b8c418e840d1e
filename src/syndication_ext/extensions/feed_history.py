"""
Feed Paging and Archiving extension (RFC 5005).

Marks a feed as complete or archived and carries the ``atom:link``
relations that tie archive documents together.
"""

from enum import Enum
from typing import Optional

from syndication_ext.comparison import (
    ComparableMixin,
    ComparisonMode,
    compare_bool,
    compare_sequences,
    compare_text,
    compare_uri,
)
from syndication_ext.exceptions import require
from syndication_ext.extensions.base import SyndicationExtension
from syndication_ext.scalars import parse_uri
from syndication_ext.xml import (
    ATOM_NAMESPACE,
    XmlNode,
    XmlOutput,
    find_child,
    find_children,
    get_attribute,
)

FEED_HISTORY_NAMESPACE = "http://purl.org/syndication/history/1.0"


class FeedHistoryLinkRelationType(str, Enum):
    """Link relations defined for feed history."""

    CURRENT = "current"
    NEXT_ARCHIVE = "next-archive"
    PREVIOUS_ARCHIVE = "prev-archive"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["FeedHistoryLinkRelationType"]:
        """Look up a relation by its ``rel`` value, case-insensitively."""
        if not name:
            return None
        name = name.strip().lower()
        for relation_type in cls:
            if relation_type.value == name:
                return relation_type
        return None


class FeedHistoryLinkRelation(ComparableMixin):
    """An ``atom:link`` pointing at another document of the logical feed."""

    def __init__(
        self,
        relation_type: Optional[FeedHistoryLinkRelationType] = None,
        uri: Optional[str] = None,
    ) -> None:
        self.relation_type = relation_type
        self.uri = uri

    def load(self, node: XmlNode) -> bool:
        """Load the relation from an ``atom:link`` element."""
        require(node, "node")
        loaded = False

        relation_type = FeedHistoryLinkRelationType.from_name(get_attribute(node, "rel"))
        if relation_type is not None:
            self.relation_type = relation_type
            loaded = True

        uri = parse_uri(get_attribute(node, "href"), "href")
        if uri is not None:
            self.uri = uri
            loaded = True

        return loaded

    def write_to(self, output: XmlOutput) -> None:
        require(output, "output")
        output.start_element("link", ATOM_NAMESPACE)
        if self.relation_type is not None:
            output.attribute("rel", self.relation_type.value)
        output.attribute("href", self.uri or "")
        output.end_element()

    def to_xml(self) -> str:
        output = XmlOutput()
        self.write_to(output)
        return output.to_string()

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_text(
                self.relation_type.value if self.relation_type else None,
                other.relation_type.value if other.relation_type else None,
            ),
            compare_uri(self.uri, other.uri),
        ]

    def __repr__(self) -> str:
        relation = self.relation_type.value if self.relation_type else None
        return f"<FeedHistoryLinkRelation(relation={relation!r}, uri={self.uri!r})>"


class FeedHistoryExtension(SyndicationExtension):
    """Feed history (``fh``) extension."""

    namespace_uri = FEED_HISTORY_NAMESPACE
    root_name = "complete"
    prefix = "fh"
    title = "Feed History"
    documentation = "http://www.ietf.org/rfc/rfc5005.txt"

    def __init__(
        self,
        is_complete: bool = False,
        is_archive: bool = False,
        relations: Optional[list[FeedHistoryLinkRelation]] = None,
    ) -> None:
        self.is_complete = is_complete
        self.is_archive = is_archive
        self.relations: list[FeedHistoryLinkRelation] = list(relations or [])

    def parse(self, node: XmlNode) -> bool:
        require(node, "node")
        loaded = False

        if find_child(node, "archive", self.namespace_uri) is not None:
            self.is_archive = True
            loaded = True

        if find_child(node, "complete", self.namespace_uri) is not None:
            self.is_complete = True
            loaded = True

        for link in find_children(node, "link", ATOM_NAMESPACE):
            if FeedHistoryLinkRelationType.from_name(get_attribute(link, "rel")) is None:
                continue
            relation = FeedHistoryLinkRelation()
            if relation.load(link):
                self.relations.append(relation)
                loaded = True

        return loaded

    def write_to(self, output: XmlOutput) -> None:
        require(output, "output")
        if self.is_archive:
            output.element_string("archive", self.namespace_uri)
        if self.is_complete:
            output.element_string("complete", self.namespace_uri)
        for relation in self.relations:
            relation.write_to(output)

    def required_namespaces(self) -> dict[str, Optional[str]]:
        namespaces = super().required_namespaces()
        if self.relations:
            namespaces[ATOM_NAMESPACE] = "atom"
        return namespaces

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_bool(self.is_archive, other.is_archive),
            compare_bool(self.is_complete, other.is_complete),
            compare_sequences(self.relations, other.relations, mode),
        ]
