"""
Pytest configuration for term-ascii-art tests.

Adds the project root to sys.path so that 'term_ascii_art' and 'main' import
without installation, and defines shared image fixtures.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from term_ascii_art import ConversionOptionsBuilder, SourceImage


# =============================================================================
# Image fixtures
# =============================================================================

def make_gradient(width: int = 64, height: int = 32) -> SourceImage:
    """Horizontal gray ramp with a red-to-blue vertical tint."""
    x = np.linspace(0, 255, width, dtype=np.float64)
    y = np.linspace(0, 255, height, dtype=np.float64)
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :, 0] = np.clip(x[np.newaxis, :] * 0.5 + (255 - y[:, np.newaxis]) * 0.5, 0, 255)
    arr[:, :, 1] = x[np.newaxis, :].astype(np.uint8)
    arr[:, :, 2] = np.clip(x[np.newaxis, :] * 0.5 + y[:, np.newaxis] * 0.5, 0, 255)
    arr[:, :, 3] = 255
    return SourceImage(arr)


def make_noise(width: int = 97, height: int = 61, seed: int = 7) -> SourceImage:
    rng = np.random.default_rng(seed)
    arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return SourceImage(arr)


def make_solid(rgb, width: int = 40, height: int = 20) -> SourceImage:
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[:, :, :3] = rgb
    arr[:, :, 3] = 255
    return SourceImage(arr)


@pytest.fixture
def gradient_image():
    return make_gradient()


@pytest.fixture
def noise_image():
    return make_noise()


@pytest.fixture
def builder():
    return ConversionOptionsBuilder().target_size(40).thread_count(1)
