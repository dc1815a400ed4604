#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Options
===========================================
Immutable conversion configuration and the builder used to assemble it.

The builder never mutates itself: every setter returns a new builder, and
``build()`` produces a frozen ``ConversionOptions`` value. Out-of-range sizes
and scales are clamped here so that the conversion engine can trust its
inputs.
"""

from dataclasses import dataclass, replace
from typing import Optional

from term_ascii_art.constants import (
    CharacterSet,
    ResizingDimension,
    DEFAULT_SCALE,
    DEFAULT_TARGET_SIZE,
    DEFAULT_THREAD_COUNT,
    MAX_SCALE,
    MAX_TARGET_SIZE,
    MIN_SCALE,
    MIN_TARGET_SIZE,
)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class ConversionOptions:
    """Configuration for a single conversion."""

    # Density alphabet, index 0 is used for the darkest pixels
    density: str = CharacterSet.DEFAULT

    # Size parameters
    dimension: ResizingDimension = ResizingDimension.WIDTH
    target_size: int = DEFAULT_TARGET_SIZE   # [20, 230]
    scale: float = DEFAULT_SCALE             # [0, 1], aspect ratio correction

    # Worker threads
    thread_count: int = DEFAULT_THREAD_COUNT

    # Character mapping
    invert: bool = False                     # Invert brightness mapping

    # Color settings
    color: bool = False                      # Emit ANSI color codes
    truecolor: bool = True                   # Terminal supports 24-bit color
    on_background: bool = False              # Also color the cell background

    # Layout
    border: bool = False
    flip_x: bool = False
    flip_y: bool = False

    @property
    def uses_background(self) -> bool:
        """Whether background colors will actually be emitted."""
        return self.color and self.truecolor and self.on_background


def clamp(value, low, high):
    return max(low, min(high, value))


class ConversionOptionsBuilder:
    """Step-by-step construction of a ``ConversionOptions`` value."""

    def __init__(self, options: Optional[ConversionOptions] = None):
        self._options = options or ConversionOptions()

    def _with(self, **changes) -> 'ConversionOptionsBuilder':
        return ConversionOptionsBuilder(replace(self._options, **changes))

    def density(self, density: str) -> 'ConversionOptionsBuilder':
        """Set the density alphabet; raises ``ValueError`` when it is empty."""
        if not density:
            raise ValueError("Density alphabet must contain at least one character")
        return self._with(density=density)

    def dimension(self, dimension: ResizingDimension) -> 'ConversionOptionsBuilder':
        return self._with(dimension=dimension)

    def target_size(self, target_size: int) -> 'ConversionOptionsBuilder':
        """Set the target size, clamped to [20, 230]."""
        return self._with(target_size=int(clamp(target_size, MIN_TARGET_SIZE, MAX_TARGET_SIZE)))

    def scale(self, scale: float) -> 'ConversionOptionsBuilder':
        """Set the aspect ratio correction, clamped to [0, 1]."""
        return self._with(scale=float(clamp(scale, MIN_SCALE, MAX_SCALE)))

    def thread_count(self, thread_count: int) -> 'ConversionOptionsBuilder':
        if thread_count < 1:
            raise ValueError(f"Thread count must be at least 1, got {thread_count}")
        return self._with(thread_count=int(thread_count))

    def invert(self, invert: bool) -> 'ConversionOptionsBuilder':
        return self._with(invert=bool(invert))

    def color(self, color: bool) -> 'ConversionOptionsBuilder':
        return self._with(color=bool(color))

    def truecolor(self, truecolor: bool) -> 'ConversionOptionsBuilder':
        return self._with(truecolor=bool(truecolor))

    def on_background(self, on_background: bool) -> 'ConversionOptionsBuilder':
        return self._with(on_background=bool(on_background))

    def border(self, border: bool) -> 'ConversionOptionsBuilder':
        return self._with(border=bool(border))

    def flip_x(self, flip_x: bool) -> 'ConversionOptionsBuilder':
        return self._with(flip_x=bool(flip_x))

    def flip_y(self, flip_y: bool) -> 'ConversionOptionsBuilder':
        return self._with(flip_y=bool(flip_y))

    def build(self) -> ConversionOptions:
        return self._options
