#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Resizer
===========================================
Computes the character grid dimensions for a source image.
"""

import math
from typing import Tuple

from term_ascii_art.constants import ResizingDimension, MAX_TARGET_SIZE
from term_ascii_art.options import ConversionOptions


def round_half_up(value: float) -> int:
    """Round half away from zero; ``round()`` would turn 8.5 into 8."""
    return int(math.floor(value + 0.5))


def clamp_size(size: int) -> int:
    return max(1, min(MAX_TARGET_SIZE, size))


def compute_dimensions(source_width: int, source_height: int,
                       options: ConversionOptions) -> Tuple[int, int]:
    """
    Calculate output grid size maintaining the aspect ratio.

    Character cells are taller than they are wide, so the axis that is not
    fixed by the target size is corrected by ``options.scale``.

    Args:
        source_width: Source image width in pixels
        source_height: Source image height in pixels
        options: Conversion options (target size, axis and scale)

    Returns:
        Tuple of (width, height) in characters, each in [1, MAX_TARGET_SIZE]
    """
    target = options.target_size

    if options.dimension == ResizingDimension.HEIGHT:
        target_height = target
        if options.scale > 0:
            target_width = round_half_up(target * source_width / source_height / options.scale)
        else:
            target_width = MAX_TARGET_SIZE
    else:
        target_width = target
        target_height = round_half_up(target * source_height / source_width * options.scale)

    return clamp_size(target_width), clamp_size(target_height)
