#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Colorizer
=============================================
ANSI escape sequences for colored cells, with a 16-color fallback for
terminals without truecolor support.
"""

from typing import NamedTuple, Optional, Tuple

import numpy as np

from term_ascii_art.constants import ANSI_16_PALETTE
from term_ascii_art.options import ConversionOptions


class Cell(NamedTuple):
    """One rendered grid cell."""
    char: str
    foreground: Optional[str] = None
    background: Optional[str] = None

    @property
    def colored(self) -> bool:
        return self.foreground is not None or self.background is not None


class AnsiColorFormatter:
    """Build ANSI SGR color codes."""

    PALETTE = np.array(ANSI_16_PALETTE, dtype=np.int64)

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 24-bit ANSI color code (true color)."""
        code = 38 if foreground else 48
        return f"\033[{code};2;{r};{g};{b}m"

    @classmethod
    def nearest_16(cls, r: int, g: int, b: int) -> int:
        """Index of the closest palette entry by squared RGB distance."""
        diff = cls.PALETTE - np.array([r, g, b], dtype=np.int64)
        return int(np.argmin(np.sum(diff * diff, axis=1)))

    @staticmethod
    def palette_to_ansi_16(index: int, foreground: bool = True) -> str:
        """Convert a 16-color palette index to its ANSI code."""
        base = 30 if foreground else 40
        if index >= 8:
            base += 60
            index -= 8
        return f"\033[{base + index}m"

    @classmethod
    def rgb_to_ansi_16(cls, r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to the nearest 16-color ANSI code."""
        return cls.palette_to_ansi_16(cls.nearest_16(r, g, b), foreground)


class Colorizer:
    """
    Attach color escape data to cells according to the conversion options.

    With color disabled cells carry only their character. With truecolor the
    pixel's RGB is used directly, optionally for the background as well;
    without it the color is reduced to the 16-color palette and the
    background flag is ignored.
    """

    def __init__(self, options: ConversionOptions):
        self.enabled = options.color
        self.truecolor = options.truecolor
        self.background = options.uses_background

    def colors(self, rgb: Tuple[int, int, int]) -> Tuple[Optional[str], Optional[str]]:
        """(foreground, background) escape codes for a pixel."""
        if not self.enabled:
            return None, None

        r, g, b = (int(c) for c in rgb)
        if not self.truecolor:
            return AnsiColorFormatter.rgb_to_ansi_16(r, g, b), None

        foreground = AnsiColorFormatter.rgb_to_ansi_24bit(r, g, b)
        background = AnsiColorFormatter.rgb_to_ansi_24bit(r, g, b, foreground=False) if self.background else None
        return foreground, background

    def cell(self, char: str, rgb: Tuple[int, int, int]) -> Cell:
        foreground, background = self.colors(rgb)
        return Cell(char, foreground, background)
