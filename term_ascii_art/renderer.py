#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Renderer
============================================
Assembles grid cells into the final text block.
"""

import re
from typing import List, Optional, Sequence, Tuple

from term_ascii_art.colorizer import Cell
from term_ascii_art.constants import BORDER_CHARS, RESET

ANSI_ESCAPE = re.compile(r'\033\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences."""
    return ANSI_ESCAPE.sub('', text)


def visible_width(line: str) -> int:
    """Number of printed characters in a line, ignoring escapes."""
    return len(strip_ansi(line))


def render_row(cells: Sequence[Cell]) -> str:
    """
    Join one row of cells into a line.

    Color codes are only written when the color changes; the previous color
    is reset first so that background colors never leak into the next cell,
    and a colored line always ends with a reset.
    """
    output = ""
    active: Optional[Tuple[Optional[str], Optional[str]]] = None

    for cell in cells:
        colors = (cell.foreground, cell.background) if cell.colored else None
        if colors != active:
            if active is not None:
                output += RESET
            if colors is not None:
                output += ''.join(code for code in colors if code)
            active = colors
        output += cell.char

    if active is not None:
        output += RESET
    return output


def add_border(lines: List[str], width: int) -> List[str]:
    """Frame lines of the given visible width with a one character border."""
    horizontal = BORDER_CHARS['horizontal'] * width
    vertical = BORDER_CHARS['vertical']

    framed = [BORDER_CHARS['top_left'] + horizontal + BORDER_CHARS['top_right']]
    framed.extend(f"{vertical}{line}{vertical}" for line in lines)
    framed.append(BORDER_CHARS['bottom_left'] + horizontal + BORDER_CHARS['bottom_right'])
    return framed


def render(grid: Sequence[Sequence[Cell]], border: bool = False) -> str:
    """
    Render a grid of cells as newline separated text.

    Args:
        grid: Rows of cells, all rows the same length
        border: Wrap the block in a box drawing frame

    Returns:
        The rendered text block
    """
    lines = [render_row(row) for row in grid]
    if border:
        width = len(grid[0]) if grid else 0
        lines = add_border(lines, width)
    return '\n'.join(lines)
