"""
Parser module - rich text input to styled runs.
"""

from .bullets import detect_list_glyph, strip_list_glyphs, normalize_list_glyph
from .html_parser import clean_pasted_html, parse_html, parse_style_attribute, RichTextHTMLParser
from .run_parser import StyleRunParser, parse_runs

__all__ = [
    "detect_list_glyph",
    "strip_list_glyphs",
    "normalize_list_glyph",
    "clean_pasted_html",
    "parse_html",
    "parse_style_attribute",
    "RichTextHTMLParser",
    "StyleRunParser",
    "parse_runs",
]
