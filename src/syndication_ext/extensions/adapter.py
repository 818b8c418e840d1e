"""
Extension adapter: attaches registered extensions to parsed entities.

Discovery is driven purely by namespace declarations. An extension is only
asked to parse a node when its namespace is declared on the document, and
its instance is only attached when it actually found content there.
"""

from typing import TYPE_CHECKING, Iterable, Optional

from syndication_ext.config import LoadSettings, get_config
from syndication_ext.exceptions import require
from syndication_ext.extensions.base import ExtensionDescriptor, SyndicationExtension
from syndication_ext.extensions.registry import ExtensionRegistry
from syndication_ext.logger import get_logger
from syndication_ext.xml import XmlNode, collect_namespaces

if TYPE_CHECKING:
    from syndication_ext.entities import ExtensibleEntity

logger = get_logger(__name__)


class ExtensionAdapter:
    """Fills extensible entities with the extensions found on their nodes."""

    def __init__(
        self,
        registry: ExtensionRegistry,
        settings: Optional[LoadSettings] = None,
    ) -> None:
        """Initialize adapter.

        Args:
            registry: Extensions to look for
            settings: Load settings; defaults to the configured ``load`` section
        """
        self.registry = require(registry, "registry")
        self._settings = settings

    @property
    def settings(self) -> LoadSettings:
        """Load settings in effect, read from configuration unless given explicitly."""
        if self._settings is not None:
            return self._settings
        return get_config().load

    def matching_descriptors(self, ambient_namespaces: Iterable[str]) -> list[ExtensionDescriptor]:
        """Descriptors whose namespace is declared, in registry order.

        Namespaces with no registered extension are ignored.
        """
        declared = set(ambient_namespaces)
        return [d for d in self.registry.descriptors() if d.namespace_uri in declared]

    def fill(
        self,
        entity: "ExtensibleEntity",
        node: XmlNode,
        ambient_namespaces: Iterable[str],
    ) -> None:
        """Attach every registered extension found under ``node`` to ``entity``.

        Extensions are appended in registry order, not document order.
        Calling this twice for the same node attaches the extensions twice.

        Args:
            entity: Entity receiving the extensions
            node: Element the entity was loaded from
            ambient_namespaces: Namespace URIs declared on the document

        Raises:
            ExtensionArgumentError: If entity or node is None
        """
        require(entity, "entity")
        require(node, "node")

        if not self.settings.extensions_enabled:
            return

        for descriptor in self.matching_descriptors(ambient_namespaces or ()):
            extension = self._parse(descriptor, node)
            if extension is not None:
                entity.add_extension(extension)

    def fill_from_document(self, entity: "ExtensibleEntity", node: XmlNode) -> None:
        """Like :meth:`fill`, using the namespaces declared on the node's document."""
        require(node, "node")
        self.fill(entity, node, collect_namespaces(node))

    def _parse(self, descriptor: ExtensionDescriptor, node: XmlNode) -> Optional[SyndicationExtension]:
        """Parse one extension; any failure counts as no match.

        Instances reporting a namespace other than the descriptor's are
        discarded, so an attached extension always belongs to the namespace
        it was discovered under.
        """
        try:
            extension = descriptor.create_instance()
            if extension.namespace_uri != descriptor.namespace_uri:
                logger.warning(
                    f"Extension registered for {descriptor.namespace_uri} reports "
                    f"namespace {extension.namespace_uri}; skipping"
                )
                return None
            loaded = extension.parse(node)
        except Exception as e:
            logger.warning(
                f"Extension {descriptor.namespace_uri} failed to parse <{node.tag}>: {e}"
            )
            return None

        if not loaded:
            return None
        return extension
