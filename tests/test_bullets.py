"""Tests for bullet glyph detection on pasted content."""

from reportquill.models.rich_text import ElementNode, TagKind, TextNode, element, paragraph
from reportquill.models.run import ListKind
from reportquill.parser.bullets import detect_list_glyph, normalize_list_glyph, strip_list_glyphs


class TestDetectListGlyph:
    """Test glyph classification."""

    def test_bullet_glyphs(self):
        """Test that bullet-like glyphs map to BULLET."""
        for text in ("• one", "○ two", "■ three", "   • indented"):
            assert detect_list_glyph(text) == ListKind.BULLET

    def test_dash(self):
        """Test that a leading dash maps to DASH."""
        assert detect_list_glyph("- item") == ListKind.DASH

    def test_plain_text(self):
        """Test that ordinary text is not a list item."""
        assert detect_list_glyph("Plain text") == ListKind.NONE
        assert detect_list_glyph("") == ListKind.NONE
        assert detect_list_glyph("a - b") == ListKind.NONE


class TestStripListGlyphs:
    """Test glyph removal."""

    def test_strip_keeps_following_text(self):
        """Test that only leading blanks and glyphs are removed."""
        assert strip_list_glyphs("  •• item - x") == " item - x"

    def test_strip_without_glyph(self):
        """Test that text without a glyph is unchanged."""
        assert strip_list_glyphs("item") == "item"


class TestNormalizeListGlyph:
    """Test rewriting of element trees."""

    def test_rewrites_first_leaf(self):
        """Test that the glyph is removed from the first non-blank leaf."""
        node = paragraph("• Hello ", element(TagKind.BOLD, "world"))
        new_node, kind = normalize_list_glyph(node)

        assert kind == ListKind.BULLET
        assert new_node.children[0] == TextNode(" Hello ")
        assert new_node.children[1] == node.children[1]

    def test_blank_leading_leaf_is_emptied(self):
        """Test that blank leaves before the glyph do not keep whitespace."""
        node = paragraph("  ", element(TagKind.BOLD, "- Bold item"))
        new_node, kind = normalize_list_glyph(node)

        assert kind == ListKind.DASH
        assert new_node.children[0] == TextNode("")
        bold = new_node.children[1]
        assert isinstance(bold, ElementNode)
        assert bold.children[0] == TextNode(" Bold item")

    def test_no_glyph_returns_same_node(self):
        """Test that elements without a glyph are returned untouched."""
        node = paragraph("Nothing to see")
        new_node, kind = normalize_list_glyph(node)

        assert kind == ListKind.NONE
        assert new_node is node
