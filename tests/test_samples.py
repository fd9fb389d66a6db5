"""Tests for synthetic sample images."""

import pytest

from halftone.core.samples import SampleName, gradient, make_sample, radial


class TestGradient:
    def test_shape(self):
        img = gradient(10, 4)
        assert img.size == (10, 4)

    def test_ramp_endpoints(self):
        img = gradient(5, 2)
        for row in img.content:
            assert row[0] == 0.0
            assert row[-1] == 1.0
            assert list(row) == sorted(row)

    def test_single_column(self):
        assert gradient(1, 3).content == ((0.0,), (0.0,), (0.0,))


class TestRadial:
    def test_shape(self):
        assert radial(7, 5).size == (7, 5)

    def test_center_black_corner_white(self):
        img = radial(5, 5)
        assert img.content[2][2] == pytest.approx(1.0)
        assert img.content[0][0] == pytest.approx(0.0)

    def test_in_range(self):
        img = radial(12, 9)
        assert all(0.0 <= p <= 1.0 for p in img.pixels())

    def test_single_pixel(self):
        assert radial(1, 1).content == ((1.0,),)


class TestMakeSample:
    def test_by_name(self):
        assert make_sample("gradient", 3, 2) == gradient(3, 2)
        assert make_sample(SampleName.RADIAL, 3, 2) == radial(3, 2)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown sample"):
            make_sample("mona", 3, 2)

    @pytest.mark.parametrize("width, height", [(0, 2), (3, -1)])
    def test_non_positive_size(self, width, height):
        with pytest.raises(ValueError, match="positive"):
            make_sample("gradient", width, height)
