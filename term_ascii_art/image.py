#!/usr/bin/env python3
"""
Image to Terminal ASCII Converter - Source Image
================================================
Read-only RGBA pixel buffer consumed by the conversion engine.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image


@dataclass(frozen=True, eq=False)
class SourceImage:
    """
    Decoded image as a ``(height, width, 4)`` uint8 RGBA array.

    The array is flagged non-writeable so worker threads can share it
    without synchronization.
    """

    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected an (height, width, 4) array, got shape {self.pixels.shape}")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError("Image must have a non-zero width and height")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixel data, got {self.pixels.dtype}")
        # Read-only view; the caller's own array keeps its flags
        view = self.pixels.view()
        view.flags.writeable = False
        object.__setattr__(self, 'pixels', view)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), following PIL's convention."""
        return self.width, self.height

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'SourceImage':
        """
        Build a source image from a numpy array.

        Args:
            array: ``(h, w)`` grayscale, ``(h, w, 3)`` RGB or ``(h, w, 4)`` RGBA
                values in 0-255

        Returns:
            SourceImage holding a private RGBA copy of the data
        """
        arr = np.asarray(array)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, np.newaxis], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Unsupported array shape {arr.shape}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        return cls(np.array(arr, dtype=np.uint8, copy=True))

    @classmethod
    def from_pil(cls, image: Image.Image) -> 'SourceImage':
        """Build a source image from any PIL image mode."""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        return cls(np.array(image, dtype=np.uint8))
