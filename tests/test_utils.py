"""Tests for text, color and logging helpers."""

import logging
from datetime import date, datetime

import pytest

from reportquill.engine.geometry import Size, mm_to_points, points_to_mm
from reportquill.utils.colors import hex_to_rgb, parse_color, rgb_to_hex
from reportquill.utils.logger import get_logger, setup_logging
from reportquill.utils.text import format_date_range, sanitize_text, strip_list_marker


class TestSanitizeText:
    """Test text clean-up before layout."""

    def test_newlines_and_tabs(self):
        """Test newline normalisation and tab replacement."""
        assert sanitize_text("a\r\nb\rc\td") == "a\nb\nc d"

    def test_dropped_characters(self):
        """Test removal of percent signs and unsupported glyphs."""
        assert sanitize_text("100% Ëdone") == "100 done"
        assert sanitize_text("check ✓ mark") == "check mark"

    def test_latin1_is_kept(self):
        """Test that Latin-1 characters survive."""
        assert sanitize_text("café déjà") == "café déjà"

    def test_empty(self):
        """Test empty input."""
        assert sanitize_text("") == ""
        assert sanitize_text(None) == ""


class TestStripListMarker:
    """Test removal of typed list markers."""

    @pytest.mark.parametrize("text", ["• item", "  - item", "* item", "→ item", "➤➤ item", " • item"])
    def test_markers(self, text):
        """Test that leading glyphs and spaces are removed."""
        assert strip_list_marker(text) == "item"

    def test_inner_glyphs_kept(self):
        """Test that glyphs after the start are kept."""
        assert strip_list_marker("a - b") == "a - b"


class TestFormatDateRange:
    """Test the date line."""

    def test_single_day(self):
        """Test equal start and end dates."""
        assert format_date_range("2024-03-01", "2024-03-01") == "2024-03-01"

    def test_range(self):
        """Test a date range from date objects."""
        assert format_date_range(date(2024, 1, 1), datetime(2024, 1, 7, 9, 30)) == "2024-01-01 to 2024-01-07"

    def test_missing_end(self):
        """Test a missing end date."""
        assert format_date_range("2024-01-01", "") == "2024-01-01"


class TestColors:
    """Test color parsing."""

    def test_hex(self):
        """Test short and long hex colors."""
        assert hex_to_rgb("#f00") == (255, 0, 0)
        assert parse_color("#1A2B3C") == (26, 43, 60)
        assert hex_to_rgb("#12") is None
        assert rgb_to_hex((26, 43, 60)) == "#1a2b3c"

    def test_rgb_functions(self):
        """Test rgb() and rgba() notation."""
        assert parse_color("rgb(10, 20, 30)") == (10, 20, 30)
        assert parse_color("rgba(10, 20, 30, 0.5)") == (10, 20, 30)
        assert parse_color("rgb(100%, 0%, 50%)") == (255, 0, 128)

    def test_names_and_tuples(self):
        """Test named colors and sequences."""
        assert parse_color("Red") == (255, 0, 0)
        assert parse_color((300, -5, 10)) == (255, 0, 10)

    @pytest.mark.parametrize("value", [None, "", "bogus", "#ggg", "rgb(1, 2)", (1, 2), 42])
    def test_invalid(self, value):
        """Test that unknown values resolve to None."""
        assert parse_color(value) is None


class TestGeometry:
    """Test unit conversions and sizes."""

    def test_conversions(self):
        """Test points and millimetres."""
        assert points_to_mm(72) == pytest.approx(25.4)
        assert mm_to_points(25.4) == pytest.approx(72.0)
        assert points_to_mm(None) == 0.0

    def test_size_scaling(self):
        """Test aspect-preserving scaling."""
        size = Size(400, 300)
        assert size.scaled_to_height(90).width == pytest.approx(120.0)
        assert size.scaled_to_width(60).height == pytest.approx(45.0)
        assert Size(10, 0).aspect == 0.0


class TestLogging:
    """Test logger helpers."""

    def test_get_logger_namespace(self):
        """Test that loggers are placed under the package namespace."""
        assert get_logger("layout").name == "reportquill.layout"
        assert get_logger("reportquill.parser").name == "reportquill.parser"

    def test_get_logger_invalid(self):
        """Test that empty names are rejected."""
        with pytest.raises(ValueError):
            get_logger("")

    def test_setup_logging_rich(self):
        """Test installing the rich handler."""
        from rich.logging import RichHandler

        logger = setup_logging(level="DEBUG")
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0], RichHandler)

    def test_setup_logging_plain(self):
        """Test the plain stream handler."""
        logger = setup_logging(level="info", use_rich=False)
        assert len(logger.handlers) == 1
        assert not type(logger.handlers[0]).__name__ == "RichHandler"

    def test_setup_logging_invalid_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError):
            setup_logging(level="LOUD")
