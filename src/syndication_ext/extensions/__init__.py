"""Syndication extension framework.

Extensions are discovered from the namespaces declared on a document,
attached to entities by :class:`ExtensionAdapter` and written back by
:class:`NamespaceWriter` with one namespace declaration per namespace in use.
"""

from syndication_ext.extensions.adapter import ExtensionAdapter
from syndication_ext.extensions.base import ExtensionDescriptor, SyndicationExtension
from syndication_ext.extensions.feed_history import (
    FEED_HISTORY_NAMESPACE,
    FeedHistoryExtension,
    FeedHistoryLinkRelation,
    FeedHistoryLinkRelationType,
)
from syndication_ext.extensions.registry import ExtensionRegistry, create_default_registry
from syndication_ext.extensions.trackback import TRACKBACK_NAMESPACE, TrackbackExtension
from syndication_ext.extensions.wfw import WFW_NAMESPACE, WellFormedWebCommentsExtension
from syndication_ext.extensions.writer import (
    NamespaceScope,
    NamespaceWriter,
    iter_entities,
    write_extensions,
)

__all__ = [
    "ExtensionAdapter",
    "ExtensionDescriptor",
    "ExtensionRegistry",
    "NamespaceScope",
    "NamespaceWriter",
    "SyndicationExtension",
    "create_default_registry",
    "iter_entities",
    "write_extensions",
    # Built-in extensions
    "FEED_HISTORY_NAMESPACE",
    "FeedHistoryExtension",
    "FeedHistoryLinkRelation",
    "FeedHistoryLinkRelationType",
    "TRACKBACK_NAMESPACE",
    "TrackbackExtension",
    "WFW_NAMESPACE",
    "WellFormedWebCommentsExtension",
]
