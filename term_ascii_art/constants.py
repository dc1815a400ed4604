#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Constants
=============================================
Enums, density presets, size limits and the ANSI palette shared by the
conversion engine and the command line interface.
"""

from enum import Enum, auto
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class ResizingDimension(Enum):
    """Axis the target size applies to."""
    WIDTH = auto()
    HEIGHT = auto()


# =============================================================================
# CHARACTER SETS
# =============================================================================

class CharacterSet:
    """Predefined density alphabets (heaviest ink first)."""

    SHORT: str = "Ñ@#W$9876543210?!abc;:+=-,._ "
    FLAT: str = "MWNXK0Okxdolc:;,'...   "
    LONG: str = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

    DEFAULT: str = FLAT

    # Matched case-sensitively, "S" is a valid one-character custom alphabet
    PRESETS: Dict[str, str] = {
        'short': SHORT, 's': SHORT, '0': SHORT,
        'flat': FLAT, 'f': FLAT, '1': FLAT,
        'long': LONG, 'l': LONG, '2': LONG,
    }

    @classmethod
    def get_preset(cls, name: str) -> str:
        """
        Resolve a preset name or alias to its alphabet.

        Unknown names are returned unchanged so that a custom alphabet can be
        passed through the same argument.
        """
        return cls.PRESETS.get(name, name)

    @classmethod
    def is_preset(cls, name: str) -> bool:
        return name in cls.PRESETS


# =============================================================================
# LIMITS
# =============================================================================

MIN_TARGET_SIZE = 20     # anything smaller is barely recognizable
MAX_TARGET_SIZE = 230    # wider output tends to wrap in common terminals
DEFAULT_TARGET_SIZE = 80

MIN_SCALE = 0.0
MAX_SCALE = 1.0
DEFAULT_SCALE = 0.43     # width/height of a typical monospace cell

DEFAULT_THREAD_COUNT = 4


# =============================================================================
# ANSI
# =============================================================================

RESET = "\033[0m"

# xterm defaults; index i < 8 maps to SGR 30+i, index i >= 8 to SGR 90+(i-8)
ANSI_16_PALETTE: List[Tuple[int, int, int]] = [
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
]

# Box drawing characters for the optional frame
BORDER_CHARS: Dict[str, str] = {
    'horizontal': '═',
    'vertical': '║',
    'top_left': '╔',
    'top_right': '╗',
    'bottom_left': '╚',
    'bottom_right': '╝',
}
