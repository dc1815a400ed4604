#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Sampler
===========================================
Nearest-neighbor lookup of the source pixel behind each output cell.
"""

import numpy as np

from term_ascii_art.image import SourceImage


def source_index(index: int, out_size: int, src_size: int, flip: bool = False) -> int:
    """
    Map an output cell index to a source pixel index along one axis.

    Args:
        index: Output row or column
        out_size: Output grid size along this axis
        src_size: Source image size along this axis
        flip: Mirror the axis before mapping

    Returns:
        Source pixel index in [0, src_size - 1]
    """
    if flip:
        index = out_size - 1 - index
    return index * src_size // out_size


def column_indices(out_width: int, src_width: int, flip: bool = False) -> np.ndarray:
    """Source column for every output column, in output order."""
    columns = np.arange(out_width, dtype=np.int64)
    if flip:
        columns = out_width - 1 - columns
    return columns * src_width // out_width


def sample_row(image: SourceImage, row: int, out_width: int, out_height: int,
               flip_x: bool = False, flip_y: bool = False) -> np.ndarray:
    """
    Sample the source pixels for one output row.

    Returns:
        ``(out_width, 4)`` uint8 RGBA array, in output column order
    """
    src_y = source_index(row, out_height, image.height, flip_y)
    return image.pixels[src_y, column_indices(out_width, image.width, flip_x)]
