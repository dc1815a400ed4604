#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Conversion Engine
=====================================================
Entry point tying together resizing, sampling, density mapping,
colorization, threaded row computation and rendering.

The engine does not read the environment, touch files or configure logging.
Terminal facts (truecolor support, terminal size) are resolved by the caller
and passed in through ``ConversionOptions``.
"""

import logging
from typing import List, Optional, Union

from PIL import Image

from term_ascii_art.colorizer import Cell, Colorizer
from term_ascii_art.density import brightness_to_char, luma
from term_ascii_art.dispatcher import dispatch_rows
from term_ascii_art.image import SourceImage
from term_ascii_art.options import ConversionOptions
from term_ascii_art.renderer import render
from term_ascii_art.resizer import compute_dimensions
from term_ascii_art.sampler import sample_row

logger = logging.getLogger(__name__)


class RowConverter:
    """Computes the cells of a single output row; safe to share across threads."""

    def __init__(self, image: SourceImage, options: ConversionOptions,
                 width: int, height: int):
        self.image = image
        self.options = options
        self.width = width
        self.height = height
        self.colorizer = Colorizer(options)

    def __call__(self, row: int) -> List[Cell]:
        pixels = sample_row(self.image, row, self.width, self.height,
                            self.options.flip_x, self.options.flip_y)
        density = self.options.density
        invert = self.options.invert

        cells = []
        for r, g, b, _ in pixels:
            char = brightness_to_char(luma(r, g, b), density, invert)
            cells.append(self.colorizer.cell(char, (r, g, b)))
        return cells


def convert_image(image: Union[SourceImage, Image.Image],
                  options: Optional[ConversionOptions] = None,
                  log: Optional[logging.Logger] = None) -> str:
    """
    Convert an image to (optionally colored) ASCII art.

    Args:
        image: Decoded source image, or a PIL image to wrap
        options: Conversion options (defaults if None)
        log: Logger receiving diagnostics (defaults to this module's logger)

    Returns:
        The rendered text block

    Raises:
        ConversionError: if computing any part of the grid failed
    """
    options = options or ConversionOptions()
    log = log or logger

    if isinstance(image, Image.Image):
        image = SourceImage.from_pil(image)

    width, height = compute_dimensions(image.width, image.height, options)
    log.debug("Source size: %dx%d, output size: %dx%d",
              image.width, image.height, width, height)

    if options.color and not options.truecolor and options.on_background:
        log.warning("Background color is ignored, since truecolor is not supported")

    row_converter = RowConverter(image, options, width, height)
    grid = dispatch_rows(height, options.thread_count, row_converter, log)
    return render(grid, options.border)
