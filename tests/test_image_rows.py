"""Tests for image row geometry."""

import pytest

from reportquill.exceptions import LayoutError
from reportquill.layout.image_rows import ImageRowLayout, MeasuredImage
from reportquill.models.document import ImageEntry, ImageSize


@pytest.fixture
def layout(config, metrics):
    return ImageRowLayout(config, metrics)


def measured(width, height, caption="", image_id="img"):
    entry = ImageEntry(id=image_id, image_ref=image_id, natural_width=width, natural_height=height, caption=caption)
    return MeasuredImage(entry, entry.image_ref, float(width), float(height))


def assert_aspect_preserved(row):
    for placed in row.images:
        source = placed.image.width / placed.image.height
        assert placed.width / placed.height == pytest.approx(source)


def assert_no_overlap(row):
    for left, right in zip(row.images, row.images[1:]):
        assert left.x + left.width <= right.x + 1e-9


class TestColumnShare:
    """Test the per-image width share."""

    def test_shares(self, layout):
        """Test shares for one to three columns on the text width."""
        assert layout.column_share(1, 190.0) == 190.0
        assert layout.column_share(2, 190.0) == pytest.approx(93.5)
        assert layout.column_share(3, 190.0) == pytest.approx(184.0 / 3)


class TestOneAndTwoColumns:
    """Test target-height scaling with width fallback."""

    def test_portrait_pair_uses_target_height(self, layout):
        """Test that images narrower than their share keep the target height."""
        row = layout.layout_row([measured(300, 400), measured(300, 400)], 2, ImageSize.MEDIUM)

        assert [p.height for p in row.images] == [90.0, 90.0]
        assert [p.width for p in row.images] == [pytest.approx(67.5)] * 2
        assert row.images[0].x == pytest.approx(36.0)
        assert row.images[1].x == pytest.approx(106.5)
        assert row.total_height == pytest.approx(93.0)
        assert_no_overlap(row)

    def test_wide_image_falls_back_to_share(self, layout):
        """Test that a too-wide image is scaled to the column share."""
        row = layout.layout_row([measured(2000, 1000)], 1, ImageSize.LARGE)

        placed = row.images[0]
        assert placed.width == pytest.approx(190.0)
        assert placed.height == pytest.approx(95.0)
        assert placed.x == pytest.approx(10.0)

    def test_uneven_pair(self, layout):
        """Test a landscape and a portrait image in one row."""
        row = layout.layout_row([measured(400, 300), measured(300, 400)], 2, ImageSize.SMALL)

        landscape, portrait = row.images
        assert landscape.height == pytest.approx(60.0)
        assert landscape.width == pytest.approx(80.0)
        assert portrait.height == pytest.approx(60.0)
        assert portrait.width == pytest.approx(45.0)
        assert row.image_height == pytest.approx(60.0)
        assert_aspect_preserved(row)

    def test_lone_image_is_centered(self, layout):
        """Test that a lone image in a two-column grid is centered."""
        row = layout.layout_row([measured(300, 400)], 2, ImageSize.MEDIUM)

        placed = row.images[0]
        assert placed.height == 90.0
        assert placed.center_x == pytest.approx(105.0)


class TestThreeColumns:
    """Test row normalization for three columns."""

    def test_uneven_aspects_share_one_height(self, layout):
        """Test that aspects 2.0, 1.0 and 0.5 end up with equal heights."""
        images = [measured(200, 100), measured(100, 100), measured(100, 200)]
        row = layout.layout_row(images, 3, ImageSize.MEDIUM)
        share = layout.column_share(3, 190.0)

        heights = [p.height for p in row.images]
        assert heights == [pytest.approx(heights[0])] * 3
        for placed in row.images:
            assert placed.width <= share + 1e-9
        assert_aspect_preserved(row)
        assert_no_overlap(row)

    def test_reference_height_is_clamped(self, layout):
        """Test that a row of tall images is capped at the clamp maximum."""
        images = [measured(100, 400)] * 3
        row = layout.layout_row(images, 3, ImageSize.LARGE)

        assert row.image_height == pytest.approx(100.0)
        assert all(p.width == pytest.approx(25.0) for p in row.images)

    def test_square_images_fill_their_share(self, layout):
        """Test that square images take the height at which they fill the share."""
        row = layout.layout_row([measured(500, 500)] * 3, 3, ImageSize.SMALL)
        share = layout.column_share(3, 190.0)

        assert all(p.height == pytest.approx(share) for p in row.images)
        assert all(p.width == pytest.approx(share) for p in row.images)

    def test_size_class_is_ignored(self, layout):
        """Test that the reference height does not depend on the size class."""
        images = [measured(100, 200)] * 3
        small = layout.layout_row(images, 3, ImageSize.SMALL)
        large = layout.layout_row(images, 3, ImageSize.LARGE)

        assert small.image_height == pytest.approx(100.0)
        assert large.image_height == pytest.approx(100.0)
        assert all(p.width == pytest.approx(50.0) for p in small.images)

    def test_uneven_aspects_use_narrowest_fit(self, layout):
        """Test that the widest image sets the common height of the row."""
        images = [measured(200, 100), measured(100, 100), measured(100, 200)]
        row = layout.layout_row(images, 3, ImageSize.LARGE)

        assert row.image_height == pytest.approx(184.0 / 6)
        assert row.images[0].width == pytest.approx(184.0 / 3)

    def test_row_is_centered(self, layout):
        """Test that the row sits centered between the margins."""
        row = layout.layout_row([measured(500, 500)] * 3, 3, ImageSize.SMALL)

        left = row.images[0].x
        right = row.images[-1].x + row.images[-1].width
        assert left - 10.0 == pytest.approx(200.0 - right)


class TestCaptions:
    """Test caption wrapping and reservation."""

    def test_caption_reservation(self, layout):
        """Test that the row reserves the tallest caption block."""
        images = [measured(300, 400, "Front"), measured(300, 400)]
        row = layout.layout_row(images, 2, ImageSize.MEDIUM)

        assert row.images[0].caption_lines == ("Front",)
        assert row.images[1].caption_lines == ()
        assert row.caption_height == pytest.approx(6.0)
        assert row.total_height == pytest.approx(90.0 + 6.0 + 3.0)

    def test_long_caption_wraps_to_image_width(self, layout, metrics):
        """Test that captions wrap to the final image width."""
        caption = " ".join(["corroded"] * 20)
        row = layout.layout_row([measured(300, 400, caption)], 3, ImageSize.SMALL)

        placed = row.images[0]
        assert len(placed.caption_lines) > 1
        for line in placed.caption_lines:
            assert metrics.text_width(line, layout.caption_font) <= placed.width
        assert row.caption_height == pytest.approx(len(placed.caption_lines) * 4.0 + 2.0)

    def test_blank_caption(self, layout):
        """Test that whitespace captions reserve nothing."""
        row = layout.layout_row([measured(300, 400, "   ")], 1, ImageSize.SMALL)
        assert row.caption_height == 0.0


class TestEdgeCases:
    """Test degenerate input."""

    def test_empty_row(self, layout):
        """Test that an empty row has no height."""
        row = layout.layout_row([], 2, ImageSize.MEDIUM)
        assert row.images == ()
        assert row.total_height == 0.0

    def test_unsupported_columns(self, layout):
        """Test that column counts outside 1-3 are rejected."""
        with pytest.raises(LayoutError):
            layout.layout_row([measured(10, 10)], 4, ImageSize.MEDIUM)
