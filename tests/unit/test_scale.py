"""
Unit tests for transcode_prep.core.scale module.

Tests aspect ratio reduction and aspect-preserving crop adjustment.
"""
import pytest
from transcode_prep.core.geometry import Point, Rectangle, ZR
from transcode_prep.core.scale import aspect, delta, scale

HD = Rectangle(0, 0, 1920, 1080)


class TestAspect:
    """Tests for aspect function"""

    def test_hd(self):
        """Test that 1920x1080 reduces to 16:9"""
        assert aspect(HD) == Point(16, 9)

    def test_square(self):
        assert aspect(Rectangle(0, 0, 500, 500)) == Point(1, 1)

    def test_portrait(self):
        assert aspect(Rectangle(0, 0, 1080, 1920)) == Point(9, 16)

    def test_coprime(self):
        """Test that coprime sizes are returned unchanged"""
        assert aspect(Rectangle(0, 0, 7, 5)) == Point(7, 5)

    def test_zero_width(self):
        """Test that a zero-width rectangle has no aspect ratio"""
        assert aspect(Rectangle(0, 0, 0, 1080)) == Point(0, 0)

    def test_zero_height(self):
        assert aspect(Rectangle(0, 0, 1920, 0)) == Point(0, 0)

    def test_zero_rectangle(self):
        assert aspect(ZR) == Point(0, 0)

    def test_inverted(self):
        """Test that inverted rectangles are measured by absolute size"""
        assert aspect(Rectangle(1920, 1080, 0, 0)) == Point(16, 9)


class TestDelta:
    """Tests for delta function"""

    def test_rounds_up(self):
        """Test that partial units count as whole units"""
        d = delta(Point(16, 9), HD, Rectangle(0, 0, 100, 100))
        assert d == Point(114, 109)

    def test_same_size(self):
        assert delta(Point(16, 9), HD, HD) == Point(0, 0)

    def test_zero_aspect(self):
        assert delta(Point(0, 0), HD, Rectangle(0, 0, 10, 10)) == Point(0, 0)


class TestScale:
    """Tests for scale function"""

    def assert_ratio(self, r: Rectangle, ar: Point):
        assert r.dx() * ar.y == r.dy() * ar.x

    def test_centered_square_crop(self):
        """Test a 100x100 crop in the middle of an HD frame"""
        crop = Rectangle(910, 490, 1010, 590)
        r = scale(HD, crop)

        self.assert_ratio(r, Point(16, 9))
        assert r.dx() <= crop.dx() and r.dy() <= crop.dy()
        assert r.in_(crop)
        cc, rc = crop.center(), r.center()
        assert abs(cc.x - rc.x) <= 1 and abs(cc.y - rc.y) <= 1
        assert r == Rectangle(912, 513, 1008, 567)

    def test_full_frame_unchanged(self):
        """Test that a crop already matching the source is kept"""
        assert scale(HD, HD) == HD

    def test_wide_crop_trimmed_horizontally(self):
        """Test that a crop too wide for 16:9 loses width"""
        crop = Rectangle(0, 0, 1920, 540)
        r = scale(HD, crop)
        assert r.dy() == 540
        assert r.dx() == 960
        self.assert_ratio(r, Point(16, 9))
        assert r.center() == crop.center()

    def test_tall_crop_trimmed_vertically(self):
        """Test that a crop too tall for 16:9 loses height"""
        crop = Rectangle(100, 0, 580, 1080)
        r = scale(HD, crop)
        assert r.dx() == 480
        assert r.dy() == 270
        assert r.in_(crop)

    def test_crop_outside_source_is_clipped(self):
        """Test that the crop is clipped to the source before scaling"""
        r = scale(HD, Rectangle(-500, -500, 1000, 1000))
        assert r.in_(HD)
        assert r.in_(Rectangle(0, 0, 1000, 1000))
        self.assert_ratio(r, Point(16, 9))

    def test_inverted_crop(self):
        """Test that inverted crops are canonicalized"""
        assert scale(HD, Rectangle(1010, 590, 910, 490)) == scale(HD, Rectangle(910, 490, 1010, 590))

    def test_tiny_crop_collapses(self):
        """Test that a crop smaller than one aspect unit becomes empty"""
        r = scale(HD, Rectangle(100, 100, 110, 105))
        assert r.empty()

    def test_zero_area_source_returns_clipped_crop(self):
        """Test that a source without area leaves the crop unscaled"""
        src = Rectangle(0, 0, 0, 1080)
        assert scale(src, Rectangle(0, 0, 100, 100)) == src.intersect(Rectangle(0, 0, 100, 100))

    def test_flat_source(self):
        """Test a zero-height source against a crop inside a normal frame"""
        src = Rectangle(0, 0, 1920, 1080)
        crop = Rectangle(10, 10, 50, 50)
        flat = Rectangle(0, 0, 1920, 0)
        assert scale(flat, crop) == ZR
        assert scale(src, crop).in_(crop)

    @pytest.mark.parametrize("source", [
        Rectangle(0, 0, 1920, 1080),
        Rectangle(0, 0, 1280, 720),
        Rectangle(0, 0, 720, 480),
        Rectangle(0, 0, 1080, 1920),
    ])
    @pytest.mark.parametrize("crop", [
        Rectangle(0, 0, 300, 300),
        Rectangle(37, 11, 711, 397),
        Rectangle(200, 0, 700, 480),
    ])
    def test_never_larger_than_crop(self, source, crop):
        """Test that the result fits in the clipped crop and keeps the source ratio"""
        r = scale(source, crop)
        clipped = crop.intersect(source)
        assert r.in_(clipped)
        self.assert_ratio(r, aspect(source))
