#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter
=================================
Command line interface for converting images to ASCII art sized for the
terminal.

Features:
- Density-based ASCII art with preset or custom character sets
- Sizing by character count, terminal width or terminal height
- Truecolor output with an automatic 16-color fallback
- Optional background coloring, border and axis flipping
- Multi-threaded conversion
"""

import logging
import sys
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from term_ascii_art import (
    CharacterSet,
    ConversionError,
    ConversionOptionsBuilder,
    ResizingDimension,
    SourceImage,
    convert_image,
    supports_truecolor,
    terminal_size,
)
from term_ascii_art.constants import DEFAULT_SCALE, DEFAULT_TARGET_SIZE, DEFAULT_THREAD_COUNT

LOG = logging.getLogger("term_ascii_art")

# sysexits.h
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70
EX_CANTCREAT = 73
EX_IOERR = 74

VERBOSITY_LEVELS = {
    'trace': logging.DEBUG,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


class FatalError(Exception):
    """Error that ends the program with the given exit code."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.exit_code = exit_code


# =============================================================================
# LOGGING
# =============================================================================

def setup_logging(verbosity: str = 'warn') -> None:
    level = VERBOSITY_LEVELS.get(verbosity, logging.WARNING)
    LOG.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    LOG.handlers[:] = [handler]
    LOG.propagate = False


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================

def create_argument_parser():
    """Create command line argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Convert images to ASCII art for the terminal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Basic conversion
  %(prog)s image.png -s 120                   # 120 characters wide
  %(prog)s image.png -w                       # Fit terminal width
  %(prog)s image.png -c long --border         # Detailed characters, framed
  %(prog)s image.png --no-color -o art.txt    # Plain text file output
        """
    )

    # Input/Output
    parser.add_argument('input', help='Input image file')
    parser.add_argument('-o', '--output-file', help='Write the ASCII art to this file (disables color)')

    # Character set options
    parser.add_argument('-c', '--characters', default='flat',
                        help='Character set: short (s, 0), flat (f, 1), long (l, 2), '
                             'or a custom string (darkest first)')
    parser.add_argument('--invert-density', action='store_true',
                        help='Invert the character density mapping')

    # Size options
    size = parser.add_mutually_exclusive_group()
    size.add_argument('-s', '--size', default=str(DEFAULT_TARGET_SIZE),
                      help='Output width in characters (20-230)')
    size.add_argument('-w', '--width', action='store_true',
                      help='Use the terminal width as output width')
    size.add_argument('--height', action='store_true',
                      help='Use the terminal height as output height')
    parser.add_argument('-r', '--ratio', default=str(DEFAULT_SCALE),
                        help='Character aspect ratio correction (0-1)')

    # Performance
    parser.add_argument('-t', '--threads', default=str(DEFAULT_THREAD_COUNT),
                        help='Number of threads used for the conversion')

    # Color options
    parser.add_argument('--no-color', action='store_true', help='Disable color output')
    parser.add_argument('--background', action='store_true',
                        help='Color the background instead of only the characters '
                             '(requires truecolor)')

    # Layout
    parser.add_argument('--border', action='store_true', help='Draw a border around the image')
    parser.add_argument('-x', '--flipX', action='store_true', help='Flip the image horizontally')
    parser.add_argument('-y', '--flipY', action='store_true', help='Flip the image vertically')

    parser.add_argument('--verbose', choices=list(VERBOSITY_LEVELS), default='warn',
                        help='Log level')

    return parser


def load_image(path: str) -> SourceImage:
    """Decode the first frame of an image file."""
    try:
        with Image.open(path) as image:
            image.load()
            return SourceImage.from_pil(image)
    except FileNotFoundError:
        raise FatalError(f"File {path} does not exist", EX_NOINPUT)
    except IsADirectoryError:
        raise FatalError(f"{path} is not a file", EX_NOINPUT)
    except (UnidentifiedImageError, OSError) as e:
        raise FatalError(str(e), EX_NOINPUT)


def parse_number(value: str, kind, name: str):
    try:
        return kind(value)
    except ValueError:
        raise FatalError(f"Could not work with {name} input value", EX_DATAERR)


def build_options(args, truecolor: bool):
    """Translate parsed arguments into conversion options."""
    builder = ConversionOptionsBuilder()

    if CharacterSet.is_preset(args.characters):
        LOG.info("Using preset characters")
    else:
        LOG.info("Using user provided characters")
    density = CharacterSet.get_preset(args.characters)
    LOG.debug('Characters used: "%s"', density)
    try:
        builder = builder.density(density)
    except ValueError as e:
        raise FatalError(str(e), EX_DATAERR)

    if args.height:
        LOG.debug("Using terminal height as target size")
        builder = builder.dimension(ResizingDimension.HEIGHT)
        target_size = terminal_size()[1]
    elif args.width:
        LOG.debug("Using terminal width as target size")
        target_size = terminal_size()[0]
    else:
        LOG.debug("Using user input size as target size")
        target_size = parse_number(args.size, int, 'size')
    builder = builder.target_size(target_size)

    builder = builder.scale(parse_number(args.ratio, float, 'ratio'))

    threads = parse_number(args.threads, int, 'thread')
    try:
        builder = builder.thread_count(threads)
    except ValueError as e:
        raise FatalError(str(e), EX_DATAERR)

    if not args.no_color and args.output_file:
        LOG.warning("Output-file flag is present, ignoring colors")

    color = not (args.no_color or args.output_file)
    if color:
        LOG.info("Using colored ascii")
        if not truecolor:
            LOG.warning("Truecolor is not supported. Using ansi color")
        else:
            LOG.info("Using truecolor ascii")
    else:
        LOG.info("Using non-colored ascii")

    builder = (builder
               .invert(args.invert_density)
               .color(color)
               .truecolor(truecolor)
               .on_background(args.background)
               .border(args.border)
               .flip_x(args.flipX)
               .flip_y(args.flipY))

    options = builder.build()
    LOG.debug("Options: %s", options)
    return options


def write_output(path: str, output: str) -> int:
    """Write the art to a file and return the number of bytes written."""
    data = output.encode('utf-8')
    try:
        f = open(path, 'wb')
    except OSError:
        raise FatalError("Could not create file", EX_CANTCREAT)
    with f:
        try:
            return f.write(data)
        except OSError:
            raise FatalError("Could not write to file", EX_IOERR)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        image = load_image(args.input)
        LOG.info("Loaded image: %s", args.input)
        LOG.debug("Size: %s", image.size)

        options = build_options(args, supports_truecolor())

        LOG.info("Converting the img: %s", args.input)
        try:
            output = convert_image(image, options, LOG)
        except ConversionError as e:
            raise FatalError(str(e), EX_SOFTWARE)

        if args.output_file:
            LOG.info("Writing output to output file")
            written = write_output(args.output_file, output)
            print(f"Written {written} bytes to {args.output_file}")
        else:
            print(output)
    except FatalError as e:
        LOG.error("%s", e)
        return e.exit_code

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    raise SystemExit(main())
