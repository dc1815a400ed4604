#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Density Mapping
===================================================
Brightness calculation and brightness-to-character mapping.
"""

import math

# ITU-R BT.601 luma weights in thousandths, as used by PIL's convert('L')
LUMA_WEIGHTS = (299, 587, 114)


def luma(r: int, g: int, b: int) -> float:
    """Perceived brightness of an RGB pixel, normalized to [0, 1]."""
    wr, wg, wb = LUMA_WEIGHTS
    # Integer sum keeps white at exactly 1.0
    return (wr * int(r) + wg * int(g) + wb * int(b)) / 255000


def density_index(brightness: float, length: int, invert: bool = False) -> int:
    """
    Map a normalized brightness to an index into a density alphabet.

    Args:
        brightness: Brightness in [0, 1]
        length: Alphabet length (at least 1)
        invert: Count from the other end of the alphabet

    Returns:
        Index in [0, length - 1]
    """
    last = length - 1
    index = int(math.floor(brightness * last))
    index = max(0, min(last, index))
    if invert:
        index = last - index
    return index


def brightness_to_char(brightness: float, density: str, invert: bool = False) -> str:
    """Pick the density character for a brightness value."""
    return density[density_index(brightness, len(density), invert)]
