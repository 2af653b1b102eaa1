"""
Pytest configuration and shared fixtures for Image Manipulator tests.

This module provides shared test fixtures and helpers
used across multiple test modules.
"""

import pytest

from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer


def make_buffer(rows):
    """
    Build an ImageBuffer from a list of rows of (r, g, b) tuples.

    rows[y][x] is the pixel at (x, y).
    """
    height = len(rows)
    width = len(rows[0])
    buffer = ImageBuffer(width, height)
    for y, row in enumerate(rows):
        for x, pixel in enumerate(row):
            buffer.set_pixel(x, y, pixel)
    return buffer


@pytest.fixture
def sample_rgb_colors():
    """
    Provide a list of sample RGB color tuples for testing.

    Returns:
        List of (R, G, B) tuples with common test colors
    """
    return [
        (255, 0, 0),      # Red
        (0, 255, 0),      # Green
        (0, 0, 255),      # Blue
        (255, 255, 255),  # White
        (0, 0, 0),        # Black
        (128, 128, 128),  # Gray
        (200, 120, 40),   # Orange
        (17, 99, 201),    # Muted blue
    ]


@pytest.fixture
def primaries_image():
    """2x2 image: red, green / blue, white."""
    return make_buffer([
        [(255, 0, 0), (0, 255, 0)],
        [(0, 0, 255), (255, 255, 255)],
    ])


@pytest.fixture
def gradient_image():
    """3x2 image with a distinct color at every coordinate."""
    return make_buffer([
        [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
        [(100, 110, 120), (130, 140, 150), (160, 170, 180)],
    ])


@pytest.fixture
def buffer_factory():
    """Provide make_buffer to tests that build their own images."""
    return make_buffer
