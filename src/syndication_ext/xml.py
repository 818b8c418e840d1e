"""
XML reading and writing primitives built on lxml.

Reading works directly on ``lxml.etree`` elements. Writing goes through
:class:`XmlOutput`, a small element-at-a-time builder whose namespace
declarations are fixed when the root element is started.
"""

from typing import TYPE_CHECKING, BinaryIO, Iterator, Optional, Union

from lxml import etree

from syndication_ext.config import WriteSettings, get_config
from syndication_ext.exceptions import NamespaceScopeError, XmlFormatError, require_text
from syndication_ext.logger import get_logger

if TYPE_CHECKING:
    from syndication_ext.extensions.writer import NamespaceScope

logger = get_logger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
DUBLIN_CORE_NAMESPACE = "http://purl.org/dc/elements/1.1/"

XmlNode = etree._Element


def parse_xml(content: Union[str, bytes]) -> XmlNode:
    """Parse XML content into an element tree and return its root.

    Args:
        content: XML document text or bytes

    Returns:
        Root element

    Raises:
        XmlFormatError: If the content is not well-formed XML
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        return etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as e:
        raise XmlFormatError(f"Invalid XML: {e}") from e


def qualified_name(local_name: str, namespace: Optional[str] = None) -> str:
    """Return the Clark-notation name lxml uses for ``local_name``."""
    if namespace:
        return etree.QName(namespace, local_name).text
    return local_name


def collect_namespaces(node: XmlNode) -> set[str]:
    """Collect every namespace URI declared anywhere in the node's document.

    Args:
        node: Any element of the document

    Returns:
        Set of namespace URIs (the ambient namespace set)
    """
    root = node.getroottree().getroot()
    namespaces: set[str] = set()
    for element in root.iter():
        # Comments and processing instructions carry no declarations
        if not isinstance(element.tag, str):
            continue
        namespaces.update(uri for uri in element.nsmap.values() if uri)
    return namespaces


def find_child(node: XmlNode, local_name: str, namespace: Optional[str] = None) -> Optional[XmlNode]:
    """Return the first direct child named ``local_name`` in ``namespace``."""
    return node.find(qualified_name(local_name, namespace))


def find_children(node: XmlNode, local_name: str, namespace: Optional[str] = None) -> list[XmlNode]:
    """Return all direct children named ``local_name`` in ``namespace``."""
    return node.findall(qualified_name(local_name, namespace))


def iter_elements(node: XmlNode) -> Iterator[XmlNode]:
    """Iterate direct child elements, skipping comments and processing instructions."""
    for child in node:
        if isinstance(child.tag, str):
            yield child


def get_attribute(node: XmlNode, name: str, namespace: Optional[str] = None) -> str:
    """Return an attribute value, or an empty string when it is absent."""
    return node.get(qualified_name(name, namespace), "")


def get_text(node: Optional[XmlNode]) -> str:
    """Return the stripped text content of ``node``, or an empty string."""
    if node is None:
        return ""
    return "".join(node.itertext()).strip()


class XmlOutput:
    """Element-at-a-time XML builder.

    Namespace declarations are taken from the scope handed to
    :meth:`declare_namespaces` and placed on the root element only.
    Elements in a declared namespace are written with its prefix and
    never re-declare it.
    """

    def __init__(
        self,
        default_namespace: Optional[str] = None,
        settings: Optional[WriteSettings] = None,
    ) -> None:
        """Initialize output.

        Args:
            default_namespace: Namespace written as the root's default (unprefixed) namespace
            settings: Serialization settings; defaults to the configured ``write`` section
        """
        self.default_namespace = default_namespace
        self.settings = settings if settings is not None else get_config().write
        self._nsmap: dict[str, str] = {}
        self._root: Optional[XmlNode] = None
        self._stack: list[XmlNode] = []

    @property
    def root(self) -> Optional[XmlNode]:
        """Root element, or None before anything was written."""
        return self._root

    @property
    def started(self) -> bool:
        """Whether the root element has been started."""
        return self._root is not None

    @property
    def declared_namespaces(self) -> dict[str, str]:
        """Prefix to namespace URI mapping declared on the root."""
        return dict(self._nsmap)

    def declare_namespaces(self, scope: "NamespaceScope") -> None:
        """Fix the namespace declarations written on the root element.

        Raises:
            NamespaceScopeError: If the root element was already started
        """
        if self.started:
            raise NamespaceScopeError("Namespaces must be declared before the root element is written")
        self._nsmap = {
            prefix: uri
            for uri, prefix in scope.items()
            if uri != self.default_namespace
        }

    def start_element(self, local_name: str, namespace: Optional[str] = None) -> XmlNode:
        """Open a new element as a child of the current one."""
        require_text(local_name, "local_name")
        tag = qualified_name(local_name, namespace)

        if self._root is None:
            nsmap: dict = dict(self._nsmap)
            if self.default_namespace:
                nsmap[None] = self.default_namespace
            element = etree.Element(tag, nsmap=nsmap or None)
            self._root = element
        elif self._stack:
            element = etree.SubElement(self._stack[-1], tag)
        else:
            raise NamespaceScopeError("Document already has a closed root element")

        self._stack.append(element)
        return element

    def attribute(self, name: str, value: str, namespace: Optional[str] = None) -> None:
        """Set an attribute on the current element."""
        require_text(name, "name")
        self._current().set(qualified_name(name, namespace), "" if value is None else str(value))

    def text(self, value: str) -> None:
        """Append character data to the current element."""
        if not value:
            return
        element = self._current()
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + value
        else:
            element.text = (element.text or "") + value

    def element_string(self, local_name: str, namespace: Optional[str] = None, value: str = "") -> None:
        """Write a complete element holding only ``value`` as text."""
        self.start_element(local_name, namespace)
        self.text(value)
        self.end_element()

    def end_element(self) -> None:
        """Close the current element."""
        if not self._stack:
            raise NamespaceScopeError("No open element to close")
        self._stack.pop()

    def to_bytes(self) -> bytes:
        """Serialize the document using the configured settings."""
        if self._root is None:
            return b""
        return etree.tostring(
            self._root,
            pretty_print=self.settings.indent,
            xml_declaration=self.settings.xml_declaration,
            encoding=self.settings.encoding,
        )

    def to_string(self) -> str:
        """Serialize the document as text, without an XML declaration."""
        if self._root is None:
            return ""
        return etree.tostring(self._root, pretty_print=self.settings.indent, encoding="unicode")

    def write(self, stream: BinaryIO) -> None:
        """Write the serialized document to a binary stream.

        I/O errors raised by the stream propagate unchanged.
        """
        stream.write(self.to_bytes())

    def _current(self) -> XmlNode:
        if not self._stack:
            raise NamespaceScopeError("No open element")
        return self._stack[-1]
