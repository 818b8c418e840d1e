"""Exception types raised by syndication_ext."""


class SyndicationError(Exception):
    """Base class for syndication_ext errors."""


class ExtensionArgumentError(SyndicationError, ValueError):
    """A required argument was missing or empty.

    Signals a bug in the caller; never recovered internally.
    """

    def __init__(self, name: str, message: str = "must not be None") -> None:
        self.name = name
        super().__init__(f"{name} {message}")


class NamespaceScopeError(SyndicationError, RuntimeError):
    """Namespace declarations were requested after the root element was written."""


def require(value, name: str):
    """Return ``value`` or raise ExtensionArgumentError when it is None."""
    if value is None:
        raise ExtensionArgumentError(name)
    return value


def require_text(value: str, name: str) -> str:
    """Return ``value`` or raise ExtensionArgumentError when it is None or empty."""
    if value is None:
        raise ExtensionArgumentError(name)
    if not value:
        raise ExtensionArgumentError(name, "must not be an empty string")
    return value


class XmlFormatError(SyndicationError, ValueError):
    """Raised when a resource is not well-formed XML."""
