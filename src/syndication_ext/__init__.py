"""
syndication_ext - namespace-driven extension support for syndication formats.

Discovers registered extensions from the XML namespaces a feed declares,
attaches them to the parsed entities and writes them back with exactly the
namespace declarations they need.
"""

__version__ = "0.1.0"
