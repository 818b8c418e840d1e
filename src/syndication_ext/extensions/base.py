"""Abstract base extension and the descriptor used to register it."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from syndication_ext.comparison import ComparableMixin, ComparisonMode
from syndication_ext.exceptions import ExtensionArgumentError
from syndication_ext.xml import XmlNode, XmlOutput


class SyndicationExtension(ComparableMixin, ABC):
    """Abstract base class for syndication extensions.

    An extension owns one XML namespace and knows how to read its own
    elements from the node of the entity it extends and how to write them
    back. Subclasses set the class attributes below and implement
    :meth:`parse`, :meth:`write_to` and :meth:`_comparison_fields`.

    Subclasses must be constructible without arguments; the registry
    builds empty instances before parsing into them.
    """

    #: XML namespace owned by the extension
    namespace_uri: str = ""
    #: Element (or attribute) whose presence marks the extension
    root_name: str = ""
    #: Preferred namespace prefix
    prefix: Optional[str] = None
    #: Human readable name
    title: str = ""
    #: Address of the extension's documentation
    documentation: str = ""

    @abstractmethod
    def parse(self, node: XmlNode) -> bool:
        """Load extension content found under ``node``.

        Args:
            node: Element of the extended entity

        Returns:
            True if any extension content was found and loaded
        """
        ...

    @abstractmethod
    def write_to(self, output: XmlOutput) -> None:
        """Write extension content into the element currently open on ``output``."""
        ...

    def required_namespaces(self) -> dict[str, Optional[str]]:
        """Namespaces written by :meth:`write_to`, mapped to preferred prefixes.

        Returns:
            Mapping of namespace URI to prefix hint (None when there is none)
        """
        return {self.namespace_uri: self.prefix}

    @classmethod
    def match_by_type(cls, extension: "SyndicationExtension") -> bool:
        """Predicate for ``find_extension`` selecting instances of this class."""
        return isinstance(extension, cls)

    @classmethod
    def descriptor(cls) -> "ExtensionDescriptor":
        """Build the descriptor registering this extension class."""
        return ExtensionDescriptor(
            namespace_uri=cls.namespace_uri,
            root_name=cls.root_name,
            factory=cls,
            prefix=cls.prefix,
        )

    def to_xml(self) -> str:
        """Serialize the extension inside a placeholder element."""
        from syndication_ext.extensions.writer import NamespaceScope

        output = XmlOutput()
        output.declare_namespaces(NamespaceScope.build([self.required_namespaces()]))
        output.start_element("extension")
        self.write_to(output)
        output.end_element()
        return output.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(namespace_uri='{self.namespace_uri}')>"

    def _comparison_fields(self, other, mode: Optional[ComparisonMode] = None) -> list[int]:
        raise NotImplementedError


@dataclass(frozen=True)
class ExtensionDescriptor:
    """Immutable registration record for one extension kind.

    Attributes:
        namespace_uri: XML namespace owned by the extension; its identity
        root_name: Element or attribute name the extension looks for
        factory: Callable producing an empty extension instance
        prefix: Preferred namespace prefix, if any
    """

    namespace_uri: str
    root_name: str
    factory: Callable[[], SyndicationExtension]
    prefix: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.namespace_uri:
            raise ExtensionArgumentError("namespace_uri", "must not be empty")
        if self.factory is None:
            raise ExtensionArgumentError("factory")

    def create_instance(self) -> SyndicationExtension:
        """Return a fresh, empty extension instance."""
        return self.factory()
