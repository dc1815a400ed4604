#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Terminal Probes
===================================================
Facts about the attached terminal, resolved before a conversion starts.
"""

import os
import shutil
from typing import Mapping, Optional, Tuple


def supports_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check ``COLORTERM`` for 24-bit color support."""
    environ = os.environ if environ is None else environ
    return environ.get('COLORTERM', '').lower() in ('truecolor', '24bit')


def terminal_size(fallback: Tuple[int, int] = (80, 24)) -> Tuple[int, int]:
    """(columns, lines) of the terminal, or ``fallback`` when unknown."""
    size = shutil.get_terminal_size(fallback)
    return size.columns, size.lines
