"""Tests for extensible entities and common attributes."""

import pytest

from sample_extensions import TEST_NAMESPACE, FlagExtension, Item, PairExtension

from syndication_ext.comparison import ComparisonMode
from syndication_ext.entities import AtomLink, CommonObjectAttributes
from syndication_ext.exceptions import ExtensionArgumentError
from syndication_ext.extensions import ExtensionAdapter, ExtensionRegistry
from syndication_ext.xml import ATOM_NAMESPACE, parse_xml


class TestExtensibleEntity:
    """Tests for the extension collection operations."""

    def test_add_extension(self):
        """Test appending extensions keeps order."""
        entity = Item()
        flag = FlagExtension(True)
        pair = PairExtension("a", "b")

        assert entity.add_extension(flag) is True
        entity.add_extension(pair)

        assert entity.extensions == (flag, pair)
        assert entity.has_extensions is True

    def test_extensions_view_is_read_only(self):
        """Test that the exposed sequence cannot be mutated."""
        entity = Item()
        entity.add_extension(FlagExtension(True))

        with pytest.raises(AttributeError):
            entity.extensions.append(FlagExtension(False))
        with pytest.raises(AttributeError):
            entity.extensions = []

    def test_remove_extension(self):
        """Test removing an attached extension."""
        entity = Item()
        flag = FlagExtension(True)
        entity.add_extension(flag)

        assert entity.remove_extension(flag) is True
        assert entity.remove_extension(flag) is False
        assert entity.has_extensions is False

    def test_remove_equal_extension(self):
        """Test that removal matches equal values."""
        entity = Item()
        entity.add_extension(FlagExtension(True))

        assert entity.remove_extension(FlagExtension(True)) is True

    def test_find_extension(self):
        """Test predicate search."""
        entity = Item()
        flag = FlagExtension(True)
        entity.add_extension(PairExtension("a"))
        entity.add_extension(flag)

        assert entity.find_extension(FlagExtension.match_by_type) is flag
        assert entity.find_extension(lambda e: getattr(e, "first", None) == "z") is None
        assert entity.find_extensions(PairExtension.match_by_type)[0].first == "a"

    def test_none_arguments(self):
        """Test that None arguments are caller errors."""
        entity = Item()

        with pytest.raises(ExtensionArgumentError):
            entity.add_extension(None)
        with pytest.raises(ExtensionArgumentError):
            entity.remove_extension(None)
        with pytest.raises(ExtensionArgumentError):
            entity.find_extension(None)

    def test_clear_extensions(self):
        """Test detaching everything."""
        entity = Item()
        entity.add_extension(FlagExtension(True))
        entity.clear_extensions()

        assert entity.has_extensions is False


class TestCommonObjectAttributes:
    """Tests for xml:base and xml:lang handling."""

    def test_fill(self):
        """Test loading both attributes."""
        node = parse_xml('<entry xml:base="http://example.com/" xml:lang="EN-gb"/>')
        common = CommonObjectAttributes()

        assert common.fill(node) is True
        assert common.base_uri == "http://example.com/"
        assert common.language == "en-GB"

    def test_malformed_language_left_unset(self):
        """Test that a bad language tag does not stop the base URI loading."""
        node = parse_xml('<entry xml:base="http://example.com/" xml:lang="not a tag"/>')
        common = CommonObjectAttributes()

        assert common.fill(node) is True
        assert common.language is None
        assert common.base_uri == "http://example.com/"

    def test_fill_nothing(self):
        """Test an element without common attributes."""
        common = CommonObjectAttributes()

        assert common.fill(parse_xml("<entry/>")) is False
        assert common.is_empty

    def test_comparison(self):
        """Test comparing attribute bundles."""
        assert CommonObjectAttributes("http://a/", "en") == CommonObjectAttributes("HTTP://A/", "EN")
        assert CommonObjectAttributes("http://a/", "en") < CommonObjectAttributes("http://b/", "en")

    def test_xml(self):
        """Test serialized form."""
        xml = CommonObjectAttributes("http://a/", "en").to_xml()

        assert 'xml:base="http://a/"' in xml
        assert 'xml:lang="en"' in xml


class TestAtomLink:
    """Tests for AtomLink."""

    def test_load(self):
        """Test loading every link attribute."""
        node = parse_xml(
            f'<link xmlns="{ATOM_NAMESPACE}" xml:lang="en" href="http://example.com/a" rel="alternate" '
            'type="text/html" hreflang="en-us" title=" Example " length="1024"/>'
        )
        link = AtomLink()

        assert link.load(node) is True
        assert link.href == "http://example.com/a"
        assert link.relation == "alternate"
        assert link.content_type == "text/html"
        assert link.content_language == "en-US"
        assert link.title == "Example"
        assert link.length == 1024
        assert link.language == "en"

    def test_malformed_fields_skipped(self):
        """Test that malformed scalars leave their fields unset."""
        node = parse_xml(
            f'<link xmlns="{ATOM_NAMESPACE}" href="http://example.com/a" hreflang="??" length="big"/>'
        )
        link = AtomLink()

        assert link.load(node) is True
        assert link.content_language is None
        assert link.length is None
        assert link.href == "http://example.com/a"

    def test_negative_length_rejected(self):
        """Test the length setter guard."""
        with pytest.raises(ValueError):
            AtomLink().length = -1

    def test_to_xml(self):
        """Test standalone serialization."""
        link = AtomLink("http://example.com/a", "self")
        link.length = 10

        xml = link.to_xml()

        assert xml.startswith(f'<link xmlns="{ATOM_NAMESPACE}"')
        assert 'href="http://example.com/a"' in xml
        assert 'rel="self"' in xml
        assert 'length="10"' in xml

    def test_extensions_written_and_declared(self):
        """Test a link carrying an extension."""
        link = AtomLink("http://example.com/a")
        link.add_extension(FlagExtension(True))

        xml = link.to_xml()

        assert f'xmlns:ext="{TEST_NAMESPACE}"' in xml
        assert "<ext:flag>true</ext:flag>" in xml

    def test_load_with_adapter(self):
        """Test that loading through an adapter attaches extensions."""
        root = parse_xml(
            f'<feed xmlns="{ATOM_NAMESPACE}" xmlns:ext="{TEST_NAMESPACE}">'
            '<link href="http://example.com/a"><ext:flag>true</ext:flag></link>'
            "</feed>"
        )
        adapter = ExtensionAdapter(ExtensionRegistry([FlagExtension.descriptor()]))
        link = AtomLink()

        link.load(root[0], adapter)

        assert link.has_extensions is True
        assert link.extensions[0].flag is True

    def test_round_trip(self):
        """Test that a written link loads back equal."""
        link = AtomLink("http://example.com/a", "enclosure")
        link.content_type = "audio/mpeg"
        link.length = 4096
        link.title = "Episode"
        link.base_uri = "http://example.com/"

        loaded = AtomLink()
        loaded.load(parse_xml(link.to_xml()))

        assert loaded == link
        assert hash(loaded) == hash(link)

    def test_comparison_field_order(self):
        """Test that length is the most significant field."""
        short = AtomLink("http://example.com/z")
        short.length = 1
        long = AtomLink("http://example.com/a")
        long.length = 2

        assert short.compare_to(long, ComparisonMode.LEXICOGRAPHIC) == -1
        # Under OR composition the disagreeing href makes both sides "less"
        assert short.compare_to(long, ComparisonMode.BITWISE_OR) == -1
        assert long.compare_to(short, ComparisonMode.BITWISE_OR) == -1

    def test_not_equal_to_other_types(self):
        """Test equality against unrelated objects."""
        assert AtomLink("http://example.com/") != "http://example.com/"
