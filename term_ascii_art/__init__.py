#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter
=================================
Render images as density based ASCII art sized for a terminal, optionally
colored with truecolor or 16-color ANSI codes.
"""

from term_ascii_art.colorizer import AnsiColorFormatter, Cell, Colorizer
from term_ascii_art.constants import CharacterSet, ResizingDimension
from term_ascii_art.converter import RowConverter, convert_image
from term_ascii_art.density import brightness_to_char, density_index, luma
from term_ascii_art.dispatcher import dispatch_rows, partition_rows
from term_ascii_art.exceptions import ConversionError
from term_ascii_art.image import SourceImage
from term_ascii_art.options import ConversionOptions, ConversionOptionsBuilder
from term_ascii_art.renderer import render, render_row, strip_ansi, visible_width
from term_ascii_art.resizer import compute_dimensions
from term_ascii_art.sampler import sample_row, source_index
from term_ascii_art.terminal import supports_truecolor, terminal_size

__version__ = "0.1.0"

__all__ = [
    # Main entry point
    'convert_image',

    # Configuration
    'ConversionOptions',
    'ConversionOptionsBuilder',
    'ResizingDimension',
    'CharacterSet',

    # Data
    'SourceImage',
    'Cell',

    # Engine parts
    'compute_dimensions',
    'luma',
    'density_index',
    'brightness_to_char',
    'source_index',
    'sample_row',
    'Colorizer',
    'AnsiColorFormatter',
    'partition_rows',
    'dispatch_rows',
    'RowConverter',
    'render',
    'render_row',
    'strip_ansi',
    'visible_width',

    # Terminal probes
    'supports_truecolor',
    'terminal_size',

    # Errors
    'ConversionError',
]
