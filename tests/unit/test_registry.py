"""Tests for the extension registry."""

import pytest

from sample_extensions import TEST_NAMESPACE, FlagExtension, PairExtension

from syndication_ext.exceptions import ExtensionArgumentError
from syndication_ext.extensions import (
    FEED_HISTORY_NAMESPACE,
    TRACKBACK_NAMESPACE,
    WFW_NAMESPACE,
    ExtensionDescriptor,
    ExtensionRegistry,
    FeedHistoryExtension,
    WellFormedWebCommentsExtension,
    create_default_registry,
)


class TestExtensionDescriptor:
    """Tests for ExtensionDescriptor."""

    def test_descriptor_from_class(self):
        """Test building a descriptor from class metadata."""
        descriptor = FlagExtension.descriptor()

        assert descriptor.namespace_uri == TEST_NAMESPACE
        assert descriptor.root_name == "flag"
        assert descriptor.prefix == "ext"

    def test_create_instance_returns_fresh_instances(self):
        """Test that every instance is new and empty."""
        descriptor = FlagExtension.descriptor()

        first = descriptor.create_instance()
        second = descriptor.create_instance()

        assert isinstance(first, FlagExtension)
        assert first is not second
        assert first.flag is None

    def test_descriptor_is_immutable(self):
        """Test that descriptors cannot be modified."""
        descriptor = FlagExtension.descriptor()

        with pytest.raises(AttributeError):
            descriptor.namespace_uri = "urn:changed"

    def test_empty_namespace_rejected(self):
        """Test that a descriptor needs a namespace."""
        with pytest.raises(ExtensionArgumentError):
            ExtensionDescriptor(namespace_uri="", root_name="flag", factory=FlagExtension)


class TestExtensionRegistry:
    """Tests for ExtensionRegistry."""

    def test_register_and_lookup(self):
        """Test looking up a registered extension by namespace."""
        registry = ExtensionRegistry()
        descriptor = registry.register_type(FlagExtension)

        assert registry.lookup_by_namespace(TEST_NAMESPACE) is descriptor
        assert TEST_NAMESPACE in registry
        assert len(registry) == 1

    def test_lookup_is_case_sensitive(self):
        """Test that namespace lookup is an exact match."""
        registry = ExtensionRegistry([FlagExtension.descriptor()])

        assert registry.lookup_by_namespace("URN:TEST:EXT") is None
        assert registry.lookup_by_namespace("") is None

    def test_lookup_unknown_namespace(self):
        """Test that unknown namespaces return None."""
        registry = ExtensionRegistry()
        assert registry.lookup_by_namespace("urn:unknown") is None

    def test_lookup_by_type(self):
        """Test looking up a descriptor by extension class."""
        registry = ExtensionRegistry([FlagExtension.descriptor(), PairExtension.descriptor()])

        assert registry.lookup_by_type(PairExtension).namespace_uri == PairExtension.namespace_uri
        assert registry.lookup_by_type(FeedHistoryExtension) is None

    def test_register_replaces_same_namespace(self):
        """Test that a second registration for a namespace wins."""
        registry = ExtensionRegistry()
        registry.register_type(FlagExtension)

        replacement = ExtensionDescriptor(
            namespace_uri=TEST_NAMESPACE,
            root_name="flag",
            factory=FlagExtension,
            prefix="flag",
        )
        registry.register(replacement)

        assert len(registry) == 1
        assert registry.lookup_by_namespace(TEST_NAMESPACE) is replacement
        assert registry.prefix_for(TEST_NAMESPACE) == "flag"

    def test_iteration_follows_registration_order(self):
        """Test that descriptors come back in registration order."""
        registry = ExtensionRegistry()
        registry.register_type(PairExtension)
        registry.register_type(FlagExtension)

        assert registry.namespaces() == [PairExtension.namespace_uri, TEST_NAMESPACE]

    def test_replacement_keeps_position(self):
        """Test that replacing a descriptor keeps its slot."""
        registry = ExtensionRegistry()
        registry.register_type(FlagExtension)
        registry.register_type(PairExtension)
        registry.register_type(FlagExtension)

        assert [d.namespace_uri for d in registry] == [TEST_NAMESPACE, PairExtension.namespace_uri]

    def test_unregister(self):
        """Test removing a descriptor."""
        registry = ExtensionRegistry([FlagExtension.descriptor()])

        assert registry.unregister(TEST_NAMESPACE) is True
        assert registry.unregister(TEST_NAMESPACE) is False
        assert len(registry) == 0

    def test_register_none(self):
        """Test that registering None is a caller error."""
        registry = ExtensionRegistry()
        with pytest.raises(ValueError):
            registry.register(None)

    def test_registries_are_independent(self):
        """Test that registries do not share state."""
        first = create_default_registry()
        second = create_default_registry()

        first.register_type(FlagExtension)

        assert TEST_NAMESPACE in first
        assert TEST_NAMESPACE not in second


class TestDefaultRegistry:
    """Tests for the built-in extension set."""

    def test_builtin_extensions_registered(self):
        """Test that built-in extensions are present."""
        registry = create_default_registry()

        assert registry.namespaces() == [FEED_HISTORY_NAMESPACE, TRACKBACK_NAMESPACE, WFW_NAMESPACE]

    def test_builtin_prefixes(self):
        """Test preferred prefixes of built-in extensions."""
        registry = create_default_registry()

        assert registry.prefix_for(FEED_HISTORY_NAMESPACE) == "fh"
        assert registry.prefix_for(TRACKBACK_NAMESPACE) == "trackback"
        assert registry.prefix_for(WFW_NAMESPACE) == "wfw"

    def test_builtin_can_be_overridden(self):
        """Test that host applications can replace a built-in extension."""
        registry = create_default_registry()

        class CustomComments(WellFormedWebCommentsExtension):
            prefix = "comments"

        registry.register_type(CustomComments)

        assert registry.lookup_by_namespace(WFW_NAMESPACE).factory is CustomComments
        assert registry.namespaces()[-1] == WFW_NAMESPACE
