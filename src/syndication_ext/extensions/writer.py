"""
Namespace writer: serializes entity graphs with minimal namespace declarations.

Before anything is written, the whole entity tree is walked to collect the
namespaces its entities and their extensions use. Exactly those namespaces
are declared once, on the root element; elements written later reuse the
root prefixes.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from syndication_ext.exceptions import require
from syndication_ext.extensions.base import SyndicationExtension
from syndication_ext.extensions.registry import ExtensionRegistry
from syndication_ext.logger import get_logger
from syndication_ext.xml import XmlOutput

if TYPE_CHECKING:
    from syndication_ext.entities import ExtensibleEntity

logger = get_logger(__name__)

_RESERVED_PREFIXES = frozenset({"xml", "xmlns"})


class NamespaceScope(Mapping):
    """Immutable namespace URI to prefix mapping for one serialization pass."""

    def __init__(self, prefixes: Optional[dict[str, str]] = None) -> None:
        self._prefixes = dict(prefixes or {})

    @classmethod
    def build(
        cls,
        namespace_maps: Iterable[dict[str, Optional[str]]],
        registry: Optional[ExtensionRegistry] = None,
    ) -> "NamespaceScope":
        """Assign a prefix to every distinct namespace URI.

        The registry's preferred prefix wins over the extension's own hint;
        namespaces with neither get ``ns1``, ``ns2``, ... Colliding prefixes
        get a numeric suffix (``ext``, ``ext1``, ``ext2``).

        Args:
            namespace_maps: Namespace URI to prefix hint mappings, in write order
            registry: Registry supplying preferred prefixes

        Returns:
            New scope; URIs keep the order they were first seen in
        """
        hints: dict[str, Optional[str]] = {}
        for namespace_map in namespace_maps:
            for uri, hint in namespace_map.items():
                if uri and uri not in hints:
                    hints[uri] = hint

        prefixes: dict[str, str] = {}
        taken: set[str] = set(_RESERVED_PREFIXES)
        generated = 0

        for uri, hint in hints.items():
            preferred = (registry.prefix_for(uri) if registry else None) or hint
            if not preferred:
                generated += 1
                preferred = f"ns{generated}"
                while preferred in taken:
                    generated += 1
                    preferred = f"ns{generated}"

            prefix = preferred
            suffix = 0
            while prefix in taken:
                suffix += 1
                prefix = f"{preferred}{suffix}"

            taken.add(prefix)
            prefixes[uri] = prefix

        return cls(prefixes)

    def prefix_for(self, namespace_uri: str) -> Optional[str]:
        """Prefix assigned to a namespace, or None if it is not in scope."""
        return self._prefixes.get(namespace_uri)

    @property
    def namespaces(self) -> list[str]:
        """Namespace URIs in scope."""
        return list(self._prefixes)

    def __getitem__(self, namespace_uri: str) -> str:
        return self._prefixes[namespace_uri]

    def __iter__(self) -> Iterator[str]:
        return iter(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"<NamespaceScope({self._prefixes})>"


def iter_entities(entity: "ExtensibleEntity") -> Iterator["ExtensibleEntity"]:
    """Yield ``entity`` and every descendant entity, depth first."""
    yield entity
    for child in entity.iter_children():
        yield from iter_entities(child)


def write_extensions(extensions: Iterable[SyndicationExtension], output: XmlOutput) -> None:
    """Write extensions, in order, into the element currently open on ``output``."""
    require(output, "output")
    for extension in extensions:
        extension.write_to(output)


class NamespaceWriter:
    """Writes entity graphs, declaring only the namespaces in use."""

    def __init__(self, registry: Optional[ExtensionRegistry] = None) -> None:
        """Initialize writer.

        Args:
            registry: Registry supplying preferred prefixes
        """
        self.registry = registry

    def collect_namespaces(self, entity: "ExtensibleEntity") -> list[dict[str, Optional[str]]]:
        """Namespaces required by every entity under ``entity`` and their extensions."""
        require(entity, "entity")
        namespace_maps = []
        for node in iter_entities(entity):
            namespace_maps.append(node.required_namespaces())
            namespace_maps.extend(extension.required_namespaces() for extension in node.extensions)
        return namespace_maps

    def build_scope(self, entity: "ExtensibleEntity") -> NamespaceScope:
        """Build the namespace scope for serializing ``entity``."""
        return NamespaceScope.build(self.collect_namespaces(entity), self.registry)

    def write(self, entity: "ExtensibleEntity", output: XmlOutput) -> NamespaceScope:
        """Serialize ``entity`` as the root of ``output``.

        Args:
            entity: Root of the entity tree to write
            output: Fresh output; nothing may have been written to it yet

        Returns:
            The namespace scope declared on the root element

        Raises:
            ExtensionArgumentError: If entity or output is None
            NamespaceScopeError: If output already holds a root element
        """
        require(entity, "entity")
        require(output, "output")

        scope = self.build_scope(entity)
        output.declare_namespaces(scope)
        logger.debug(f"Declaring {len(scope)} extension namespace(s) on {type(entity).__name__}")

        entity.write_to(output)
        return scope
