"""Tests for nearest-neighbor sampling."""

import numpy as np
import pytest

from term_ascii_art import SourceImage, sample_row, source_index
from term_ascii_art.sampler import column_indices


def indexed_image(width, height):
    """Image whose red channel is the column and green channel the row."""
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :, 0] = np.arange(width, dtype=np.uint8)[np.newaxis, :]
    arr[:, :, 1] = np.arange(height, dtype=np.uint8)[:, np.newaxis]
    arr[:, :, 3] = 255
    return SourceImage(arr)


class TestSourceIndex:

    def test_downscale(self):
        assert [source_index(i, 4, 10) for i in range(4)] == [0, 2, 5, 7]

    def test_upscale(self):
        assert [source_index(i, 6, 3) for i in range(6)] == [0, 0, 1, 1, 2, 2]

    def test_flip(self):
        assert [source_index(i, 4, 10, flip=True) for i in range(4)] == [7, 5, 2, 0]

    @pytest.mark.parametrize("out_size, src_size", [(1, 1), (7, 3), (230, 10000), (50, 49)])
    def test_always_in_bounds(self, out_size, src_size):
        for flip in (False, True):
            indices = [source_index(i, out_size, src_size, flip) for i in range(out_size)]
            assert min(indices) >= 0
            assert max(indices) < src_size

    def test_column_indices_match_scalar(self):
        for flip in (False, True):
            expected = [source_index(i, 13, 40, flip) for i in range(13)]
            assert column_indices(13, 40, flip).tolist() == expected


class TestSampleRow:

    def test_row_values(self):
        image = indexed_image(10, 6)
        row = sample_row(image, 1, 5, 3)
        assert row.shape == (5, 4)
        assert row[:, 0].tolist() == [0, 2, 4, 6, 8]
        assert set(row[:, 1].tolist()) == {2}

    def test_flip_x_reverses_columns(self):
        image = indexed_image(10, 6)
        plain = sample_row(image, 0, 5, 3)
        flipped = sample_row(image, 0, 5, 3, flip_x=True)
        assert flipped[:, 0].tolist() == plain[::-1, 0].tolist()

    def test_flip_y_takes_mirrored_row(self):
        image = indexed_image(10, 6)
        assert sample_row(image, 0, 5, 3, flip_y=True)[0, 1] == sample_row(image, 2, 5, 3)[0, 1]


class TestSourceImage:

    def test_from_rgb_array_adds_alpha(self):
        image = SourceImage.from_array(np.zeros((3, 4, 3), dtype=np.uint8))
        assert image.size == (4, 3)
        assert image.pixels.shape == (3, 4, 4)
        assert (image.pixels[:, :, 3] == 255).all()

    def test_from_grayscale_array(self):
        image = SourceImage.from_array(np.full((2, 5), 128, dtype=np.uint8))
        assert image.pixels[0, 0].tolist() == [128, 128, 128, 255]

    def test_from_pil(self):
        from PIL import Image
        image = SourceImage.from_pil(Image.new('L', (7, 3), 200))
        assert image.size == (7, 3)
        assert image.pixels[1, 1].tolist() == [200, 200, 200, 255]

    def test_pixels_are_read_only(self):
        image = SourceImage.from_array(np.zeros((2, 2, 4), dtype=np.uint8))
        with pytest.raises(ValueError):
            image.pixels[0, 0, 0] = 1

    def test_caller_array_stays_writable(self):
        arr = np.zeros((2, 2, 4), dtype=np.uint8)
        SourceImage(arr)
        arr[0, 0, 0] = 1

    @pytest.mark.parametrize("shape", [(0, 4, 4), (4, 0, 4), (4, 4, 2), (4, 4)])
    def test_invalid_shapes(self, shape):
        with pytest.raises(ValueError):
            SourceImage(np.zeros(shape, dtype=np.uint8))
