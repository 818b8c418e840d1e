"""Extensible entity capability shared by syndication entities."""

from typing import Callable, Iterable, Optional

from syndication_ext.exceptions import require
from syndication_ext.extensions.base import SyndicationExtension
from syndication_ext.xml import XmlOutput

ExtensionPredicate = Callable[[SyndicationExtension], bool]


class ExtensibleEntity:
    """Entity that can carry syndication extensions.

    The extension sequence is owned by the entity: it keeps insertion order
    and is only changed through :meth:`add_extension` and
    :meth:`remove_extension`.
    """

    def __init__(self) -> None:
        self._extensions: list[SyndicationExtension] = []

    @property
    def extensions(self) -> tuple[SyndicationExtension, ...]:
        """Attached extensions, in insertion order."""
        return tuple(self._extensions)

    @property
    def has_extensions(self) -> bool:
        """Whether any extension is attached."""
        return len(self._extensions) > 0

    def add_extension(self, extension: SyndicationExtension) -> bool:
        """Append an extension.

        Returns:
            True once the extension was added
        """
        require(extension, "extension")
        self._extensions.append(extension)
        return True

    def remove_extension(self, extension: SyndicationExtension) -> bool:
        """Remove the first attached extension equal to ``extension``.

        Returns:
            True if an extension was removed
        """
        require(extension, "extension")
        for index, attached in enumerate(self._extensions):
            if attached is extension or attached == extension:
                del self._extensions[index]
                return True
        return False

    def find_extension(self, match: ExtensionPredicate) -> Optional[SyndicationExtension]:
        """Return the first attached extension satisfying ``match``."""
        require(match, "match")
        for extension in self._extensions:
            if match(extension):
                return extension
        return None

    def find_extensions(self, match: ExtensionPredicate) -> list[SyndicationExtension]:
        """Return every attached extension satisfying ``match``."""
        require(match, "match")
        return [extension for extension in self._extensions if match(extension)]

    def clear_extensions(self) -> None:
        """Detach all extensions."""
        self._extensions.clear()

    def iter_children(self) -> Iterable["ExtensibleEntity"]:
        """Extensible entities owned by this one, in write order."""
        return ()

    def required_namespaces(self) -> dict[str, Optional[str]]:
        """Namespaces the entity's own elements use, mapped to preferred prefixes.

        Entities written in the output's default namespace need not report it.
        """
        return {}

    def write_to(self, output: XmlOutput) -> None:
        """Write the entity, including its extensions, to ``output``."""
        raise NotImplementedError
