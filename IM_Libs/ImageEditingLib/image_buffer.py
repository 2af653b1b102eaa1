"""
Image buffer for Image Manipulator.

An ImageBuffer is a width x height grid of RGB pixels addressed by (x, y).
Pixels are stored as signed integers so channel values produced by the
filters outside 0-255 are kept as-is in memory. They are clipped to 0-255
only when the buffer is encoded to a file.

Classes:
    ImageBuffer: Pixel grid with get/set access, load and save

Example:
    >>> buffer = ImageBuffer.load("photo.png")
    >>> pixel = buffer.get_pixel(0, 0)
    >>> buffer.set_pixel(0, 0, RGB(255, 0, 0))
    >>> buffer.save("photo_out.jpg")
"""

import logging
from pathlib import Path
from typing import Any, Iterator, Tuple, Union

import numpy as np

from IM_Libs.constants import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    DEFAULT_OUTPUT_FORMAT,
    EXTENSION_FORMATS,
)
from IM_Libs.ImageEditingLib.color_models import RGB
from IM_Libs.pillow_compat import Image, ImageClass

logger = logging.getLogger(__name__)

PixelLike = Union[RGB, Tuple[int, int, int]]


class ImageBuffer:
    """
    Width x height grid of RGB pixels.

    A blank buffer is created by passing explicit dimensions; every pixel
    starts black. Use ImageBuffer.load() to decode a file.

    Args:
        width: Number of columns (must be > 0)
        height: Number of rows (must be > 0)

    Raises:
        ValueError: If width or height is not positive
    """

    def __init__(self, width: int, height: int):
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")

        # Row-major storage: _pixels[y, x] = (r, g, b)
        self._pixels = np.zeros((height, width, 3), dtype=np.int64)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} image"
            )

    def get_pixel(self, x: int, y: int) -> RGB:
        """
        Get the pixel at (x, y).

        Returns:
            A new RGB instance; changing it does not affect the buffer

        Raises:
            IndexError: If (x, y) is outside the image
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return RGB(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, pixel: PixelLike) -> None:
        """
        Set the pixel at (x, y).

        Args:
            x: Column
            y: Row
            pixel: RGB instance or (r, g, b) tuple; values are stored unclamped

        Raises:
            IndexError: If (x, y) is outside the image
        """
        self._check_bounds(x, y)
        if isinstance(pixel, RGB):
            pixel = pixel.as_tuple()
        r, g, b = pixel
        self._pixels[y, x] = (int(r), int(g), int(b))

    def iter_coordinates(self) -> Iterator[Tuple[int, int]]:
        """Yield every (x, y), outer loop over width and inner over height."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def copy(self) -> "ImageBuffer":
        clone = ImageBuffer(self.width, self.height)
        clone._pixels = self._pixels.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImageBuffer):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._pixels, other._pixels))

    def __repr__(self) -> str:
        return f"ImageBuffer(width={self.width}, height={self.height})"

    # ------------------------------------------------------------------
    # Pillow bridge
    # ------------------------------------------------------------------

    @classmethod
    def from_pil(cls, image: Any) -> "ImageBuffer":
        """
        Build a buffer from a PIL Image.

        Args:
            image: PIL Image in any mode; it is converted to RGB

        Raises:
            TypeError: If image is not a PIL Image
        """
        if not isinstance(image, ImageClass):
            raise TypeError(f"Expected PIL Image, got {type(image)}")

        if image.mode != "RGB":
            image = image.convert("RGB")

        buffer = cls(image.width, image.height)
        buffer._pixels = np.asarray(image, dtype=np.int64).copy()
        return buffer

    def to_pil(self) -> Any:
        """
        Convert to an RGB PIL Image.

        Channel values outside 0-255 are clipped, since 8-bit images cannot
        hold them.
        """
        clipped = np.clip(self._pixels, CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)
        return Image.fromarray(clipped)

    # ------------------------------------------------------------------
    # Codec
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ImageBuffer":
        """
        Decode an image file into a new buffer.

        Args:
            path: Path to the image file

        Returns:
            ImageBuffer with the decoded pixels

        Raises:
            FileNotFoundError: If the file does not exist
            IOError: If the file cannot be decoded
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image file not found: {path}")

        try:
            with Image.open(path) as img:
                img.load()
                buffer = cls.from_pil(img)
        except OSError as e:
            raise IOError(f"Failed to load image from {path}: {e}") from e

        logger.debug(f"Loaded {buffer.width}x{buffer.height} image from {path}")
        return buffer

    def save(self, path: Union[str, Path]) -> Path:
        """
        Encode the buffer to a file.

        The format is inferred from the file extension; unknown extensions
        fall back to PNG.

        Args:
            path: Destination path

        Returns:
            The path written

        Raises:
            IOError: If the file cannot be written
        """
        path = Path(path)
        save_format = EXTENSION_FORMATS.get(path.suffix.lower(), DEFAULT_OUTPUT_FORMAT)

        try:
            self.to_pil().save(path, format=save_format)
        except (OSError, ValueError) as e:
            raise IOError(f"Failed to save image to {path}: {e}") from e

        logger.debug(f"Saved {self.width}x{self.height} image to {path} as {save_format}")
        return path
