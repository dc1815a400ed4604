#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Exceptions
==============================================
"""

from typing import List, Optional


class ConversionError(RuntimeError):
    """
    Raised when any part of a conversion fails.

    A conversion is all-or-nothing: when one worker fails the whole call
    fails and no partial output is returned. Every worker failure is kept in
    ``errors`` in row order; the first one is also chained as ``__cause__``.
    """

    def __init__(self, message: str, errors: Optional[List[BaseException]] = None):
        super().__init__(message)
        self.errors: List[BaseException] = list(errors or [])
