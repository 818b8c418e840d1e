"""Extensible syndication entities."""

from syndication_ext.entities.atom_link import AtomLink
from syndication_ext.entities.base import ExtensibleEntity
from syndication_ext.entities.common import CommonObjectAttributes

__all__ = [
    "AtomLink",
    "CommonObjectAttributes",
    "ExtensibleEntity",
]
