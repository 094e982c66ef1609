"""
Tests for Line and Container
==============================
Covers:
- Line read-only height, point accessors and serialisation
- Container layout: heights, thickness, baseline, spacing
- Rebuild on update, ordering helpers
"""
import pytest

from lines import Line, Container, Palette, DEFAULT_PALETTE


# =============================================================================
# Line
# =============================================================================

class TestLine:

    def test_height_is_read_only(self):
        line = Line((0, 10), 2, 5)
        with pytest.raises(AttributeError):
            line.height = 7
        assert line.height == 5

    def test_point_coordinates_are_floats(self):
        line = Line((3, 4), 1, 1)
        assert line.point == (3.0, 4.0)
        assert (line.x, line.y) == (3.0, 4.0)

    def test_default_color(self):
        assert Line((0, 0), 1, 1).color == DEFAULT_PALETTE.default

    def test_to_dict(self):
        line = Line((1, 2), 3, 4, "#abcdef")
        assert line.to_dict() == {"x": 1.0, "y": 2.0, "width": 3, "height": 4, "color": "#abcdef"}

    def test_equal_heights_are_distinct_lines(self):
        assert Line((0, 0), 1, 5) != Line((0, 0), 1, 5)

    def test_palette_defaults(self):
        assert Palette() == DEFAULT_PALETTE
        assert (DEFAULT_PALETTE.default, DEFAULT_PALETTE.swap, DEFAULT_PALETTE.animation) == (
            "#ffffff", "#ff0000", "#14ff09",
        )


# =============================================================================
# Container
# =============================================================================

class TestContainer:

    def make(self, count=50, margin=1):
        container = Container((800, 600), 15, count, margin)
        container.load()
        return container

    def test_load_builds_sorted_lines(self):
        container = self.make()
        heights = container.heights()

        assert len(container) == 50
        assert heights[0] == 1.0
        assert heights[-1] == pytest.approx(570.0)
        assert container.is_ordered()
        assert len(set(heights)) == 50

    def test_layout(self):
        container = self.make()
        thickness = (800 - 30 - 49) / 50

        assert all(line.width == pytest.approx(thickness) for line in container.lines)
        assert all(line.y == 585.0 for line in container.lines)
        assert container.lines[0].x == 15.0
        assert container.lines[1].x == pytest.approx(15 + thickness + 1)

    def test_thickness_never_below_one(self):
        container = self.make(count=500, margin=3)
        assert all(line.width == 1.0 for line in container.lines)

    def test_single_line_gets_full_height(self):
        container = self.make(count=1)
        assert container.heights() == [570.0]

    def test_zero_lines(self):
        container = self.make(count=0)
        assert container.lines == []
        assert container.is_ordered()

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            Container((800, 600), 15, -1, 1)
        container = self.make()
        with pytest.raises(ValueError):
            container.update((800, 600), -3, 1)

    def test_update_rebuilds_and_clears_sorted_flag(self):
        container = self.make()
        old = list(container.lines)
        container.is_sorted = True

        container.update((400, 300), 10, 2)

        assert len(container) == 10
        assert not any(line in old for line in container.lines)
        assert container.is_sorted is False
        assert container.heights()[-1] == pytest.approx(270.0)

    def test_is_ordered_detects_inversion(self):
        container = self.make(count=5)
        container.lines[0], container.lines[1] = container.lines[1], container.lines[0]
        assert not container.is_ordered()

    def test_to_dict(self):
        data = self.make(count=3).to_dict()
        assert data["resolution"] == [800, 600]
        assert data["lines_count"] == 3
        assert data["is_sorted"] is False
        assert len(data["lines"]) == 3
