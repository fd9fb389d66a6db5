"""Tests for the processing pipeline."""

import numpy as np
import pytest

from halftone.core.dither import error_diffuse, invert, threshold
from halftone.core.image import GrayImage, create
from halftone.core.processor import Method, Settings, ink, process


def _make_test_image(width: int = 20, height: int = 10, gray: float = 0.4):
    """Create a uniform gray test image."""
    return GrayImage.from_array(np.full((height, width), gray))


class TestSettings:
    def test_default_settings(self):
        s = Settings()
        assert s.method == Method.NONE
        assert s.threshold == 0.5
        assert s.invert is False
        assert s.seed is None

    def test_method_values(self):
        assert Method("error-diffuse") is Method.ERROR_DIFFUSE
        assert Method("dither") is Method.DITHER


class TestProcess:
    def test_none_is_identity(self):
        img = GrayImage.from_array(np.random.rand(5, 6))
        assert process(img, Settings()) == img

    def test_invert_only(self):
        img = create(2, 1, [[0.25, 1.0]])
        assert process(img, Settings(invert=True)) == invert(img)

    def test_threshold(self):
        img = create(4, 1, [[0.0, 0.5, 0.5, 1.0]])
        result = process(img, Settings(method=Method.THRESHOLD, threshold=0.5))
        assert result.content == ((0.0, 0.0, 0.0, 1.0),)

    def test_invert_runs_before_halftone(self):
        img = create(2, 1, [[0.2, 0.9]])
        settings = Settings(method=Method.THRESHOLD, threshold=0.5, invert=True)
        assert process(img, settings) == threshold(0.5, invert(img))

    def test_error_diffuse(self):
        img = _make_test_image()
        result = process(img, Settings(method=Method.ERROR_DIFFUSE))
        assert result == error_diffuse(img)

    def test_dither_seeded(self):
        img = _make_test_image()
        settings = Settings(method=Method.DITHER, seed=7)
        assert process(img, settings) == process(img, settings)

    def test_halftone_output_is_binary(self):
        img = GrayImage.from_array(np.random.rand(8, 8))
        for method in (Method.THRESHOLD, Method.DITHER, Method.ERROR_DIFFUSE):
            result = process(img, Settings(method=method, seed=1))
            assert set(result.pixels()) <= {0.0, 1.0}


class TestInk:
    def test_uniform(self):
        assert ink(_make_test_image(gray=0.25)) == pytest.approx(0.25)

    def test_binary(self):
        assert ink(create(4, 1, [[1.0, 0.0, 1.0, 0.0]])) == 0.5
