"""Well-Formed Web comment API extension (``wfw``)."""

from typing import Optional

from syndication_ext.comparison import ComparisonMode, compare_uri
from syndication_ext.exceptions import require
from syndication_ext.extensions.base import SyndicationExtension
from syndication_ext.scalars import parse_uri
from syndication_ext.xml import XmlNode, XmlOutput, find_child, get_text

WFW_NAMESPACE = "http://wellformedweb.org/CommentAPI/"


class WellFormedWebCommentsExtension(SyndicationExtension):
    """Comment endpoints for a syndicated item.

    ``comment`` accepts posted comments; ``comment_rss`` is the feed of
    comments on the item.
    """

    namespace_uri = WFW_NAMESPACE
    root_name = "comment"
    prefix = "wfw"
    title = "Well-Formed Web Comment API"
    documentation = "http://wellformedweb.org/news/wfw_namespace_elements/"

    def __init__(self, comment: Optional[str] = None, comment_rss: Optional[str] = None) -> None:
        self.comment = comment
        self.comment_rss = comment_rss

    def parse(self, node: XmlNode) -> bool:
        require(node, "node")
        loaded = False

        comment = parse_uri(get_text(find_child(node, "comment", self.namespace_uri)), "wfw:comment")
        if comment is not None:
            self.comment = comment
            loaded = True

        # commentRSS is a common misspelling in the wild
        feed = find_child(node, "commentRss", self.namespace_uri)
        if feed is None:
            feed = find_child(node, "commentRSS", self.namespace_uri)
        comment_rss = parse_uri(get_text(feed), "wfw:commentRss")
        if comment_rss is not None:
            self.comment_rss = comment_rss
            loaded = True

        return loaded

    def write_to(self, output: XmlOutput) -> None:
        require(output, "output")
        if self.comment is not None:
            output.element_string("comment", self.namespace_uri, self.comment)
        if self.comment_rss is not None:
            output.element_string("commentRss", self.namespace_uri, self.comment_rss)

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        return [
            compare_uri(self.comment, other.comment),
            compare_uri(self.comment_rss, other.comment_rss),
        ]
