"""
Registry of known syndication extensions.

A registry is an ordinary object handed to the adapter and writer; build
one with :func:`create_default_registry` at startup and register custom
extensions on it before any parsing begins.

Registration is not synchronized. Concurrent lookups are safe, but
``register`` must not run while other threads parse with the same registry.
"""

from typing import Iterator, Optional

from syndication_ext.exceptions import require
from syndication_ext.extensions.base import ExtensionDescriptor, SyndicationExtension
from syndication_ext.logger import get_logger

logger = get_logger(__name__)


class ExtensionRegistry:
    """Catalog of extension descriptors keyed by namespace URI."""

    def __init__(self, descriptors: Optional[list[ExtensionDescriptor]] = None) -> None:
        """Initialize registry.

        Args:
            descriptors: Descriptors to register, in order
        """
        # dicts keep insertion order; replacing a key keeps its slot
        self._descriptors: dict[str, ExtensionDescriptor] = {}
        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: ExtensionDescriptor) -> None:
        """Add a descriptor, replacing any registered for the same namespace.

        Args:
            descriptor: Descriptor to register

        Note:
            Replacement is silent (last write wins) so host applications
            can override built-in extensions.
        """
        require(descriptor, "descriptor")

        if descriptor.namespace_uri in self._descriptors:
            logger.debug(f"Replacing extension registered for {descriptor.namespace_uri}")
        self._descriptors[descriptor.namespace_uri] = descriptor

    def register_type(self, extension_class: type[SyndicationExtension]) -> ExtensionDescriptor:
        """Register an extension class using its class-level metadata."""
        descriptor = extension_class.descriptor()
        self.register(descriptor)
        return descriptor

    def unregister(self, namespace_uri: str) -> bool:
        """Remove the descriptor registered for ``namespace_uri``.

        Returns:
            True if a descriptor was removed
        """
        return self._descriptors.pop(namespace_uri, None) is not None

    def lookup_by_namespace(self, namespace_uri: str) -> Optional[ExtensionDescriptor]:
        """Get the descriptor for a namespace (exact, case-sensitive match)."""
        if not namespace_uri:
            return None
        return self._descriptors.get(namespace_uri)

    def lookup_by_type(self, extension_class: type) -> Optional[ExtensionDescriptor]:
        """Get the descriptor whose factory is ``extension_class``."""
        for descriptor in self._descriptors.values():
            if descriptor.factory is extension_class:
                return descriptor
        return None

    def prefix_for(self, namespace_uri: str) -> Optional[str]:
        """Preferred prefix registered for a namespace, if any."""
        descriptor = self.lookup_by_namespace(namespace_uri)
        return descriptor.prefix if descriptor else None

    def descriptors(self) -> list[ExtensionDescriptor]:
        """All descriptors in registration order."""
        return list(self._descriptors.values())

    def namespaces(self) -> list[str]:
        """All registered namespace URIs in registration order."""
        return list(self._descriptors.keys())

    def __contains__(self, namespace_uri: str) -> bool:
        return namespace_uri in self._descriptors

    def __iter__(self) -> Iterator[ExtensionDescriptor]:
        return iter(self.descriptors())

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"<ExtensionRegistry(namespaces={self.namespaces()})>"


def create_default_registry() -> ExtensionRegistry:
    """Create a registry holding the built-in extensions.

    Returns:
        New registry; callers may register further extensions on it
    """
    from syndication_ext.extensions.feed_history import FeedHistoryExtension
    from syndication_ext.extensions.trackback import TrackbackExtension
    from syndication_ext.extensions.wfw import WellFormedWebCommentsExtension

    registry = ExtensionRegistry()
    for extension_class in (
        FeedHistoryExtension,
        TrackbackExtension,
        WellFormedWebCommentsExtension,
    ):
        registry.register_type(extension_class)
    return registry
