"""
Tests for the ImageBuffer pixel grid.

Tests cover:
- Blank buffer creation and validation
- Pixel get/set and bounds checking
- Unclamped channel storage
- Copy and equality
- Pillow bridge
- Loading and saving files
"""

import tempfile
import unittest
from pathlib import Path

from PIL import Image

from IM_Libs.ImageEditingLib.color_models import RGB
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer


class TestImageBufferCreation(unittest.TestCase):
    """Test blank buffer creation."""

    def test_dimensions(self):
        buffer = ImageBuffer(4, 3)

        self.assertEqual(buffer.width, 4)
        self.assertEqual(buffer.height, 3)
        self.assertEqual(buffer.size, (4, 3))

    def test_blank_buffer_is_black(self):
        buffer = ImageBuffer(2, 2)

        for x, y in buffer.iter_coordinates():
            self.assertEqual(buffer.get_pixel(x, y).as_tuple(), (0, 0, 0))

    def test_zero_width_raises_error(self):
        with self.assertRaises(ValueError):
            ImageBuffer(0, 5)

    def test_negative_height_raises_error(self):
        with self.assertRaises(ValueError):
            ImageBuffer(5, -1)


class TestImageBufferPixels(unittest.TestCase):
    """Test pixel access."""

    def setUp(self):
        self.buffer = ImageBuffer(3, 2)

    def test_set_and_get_rgb(self):
        self.buffer.set_pixel(2, 1, RGB(1, 2, 3))

        self.assertEqual(self.buffer.get_pixel(2, 1), RGB(1, 2, 3))

    def test_set_accepts_tuple(self):
        self.buffer.set_pixel(0, 1, (9, 8, 7))

        self.assertEqual(self.buffer.get_pixel(0, 1).as_tuple(), (9, 8, 7))

    def test_x_indexes_columns(self):
        self.buffer.set_pixel(2, 0, (255, 0, 0))

        self.assertEqual(self.buffer.get_pixel(0, 0).as_tuple(), (0, 0, 0))
        self.assertEqual(self.buffer.get_pixel(2, 0).as_tuple(), (255, 0, 0))

    def test_get_pixel_returns_copy(self):
        """Mutating a returned pixel leaves the buffer unchanged."""
        pixel = self.buffer.get_pixel(0, 0)
        pixel.red = 200

        self.assertEqual(self.buffer.get_pixel(0, 0).red, 0)

    def test_values_are_not_clamped(self):
        self.buffer.set_pixel(1, 1, (344, 306, -12))

        self.assertEqual(self.buffer.get_pixel(1, 1).as_tuple(), (344, 306, -12))

    def test_out_of_bounds_get_raises_error(self):
        with self.assertRaises(IndexError):
            self.buffer.get_pixel(3, 0)
        with self.assertRaises(IndexError):
            self.buffer.get_pixel(0, 2)

    def test_negative_index_raises_error(self):
        """Negative coordinates do not wrap around."""
        with self.assertRaises(IndexError):
            self.buffer.get_pixel(-1, 0)
        with self.assertRaises(IndexError):
            self.buffer.set_pixel(0, -1, (1, 1, 1))

    def test_iter_coordinates_order(self):
        """Outer loop over width, inner over height."""
        coordinates = list(self.buffer.iter_coordinates())

        self.assertEqual(
            coordinates,
            [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)],
        )


class TestImageBufferCopyAndEquality(unittest.TestCase):
    """Test copy() and ==."""

    def test_copy_is_equal_and_independent(self):
        buffer = ImageBuffer(2, 2)
        buffer.set_pixel(1, 1, (5, 6, 7))

        clone = buffer.copy()
        self.assertEqual(clone, buffer)
        self.assertIsNot(clone, buffer)

        clone.set_pixel(1, 1, (0, 0, 0))
        self.assertNotEqual(clone, buffer)

    def test_different_sizes_not_equal(self):
        self.assertNotEqual(ImageBuffer(2, 3), ImageBuffer(3, 2))

    def test_not_equal_to_other_types(self):
        self.assertNotEqual(ImageBuffer(1, 1), "not a buffer")


class TestImageBufferPillowBridge(unittest.TestCase):
    """Test conversion to and from PIL images."""

    def test_from_pil_reads_pixels(self):
        img = Image.new("RGB", (3, 2), (10, 20, 30))
        img.putpixel((2, 1), (200, 100, 50))

        buffer = ImageBuffer.from_pil(img)

        self.assertEqual(buffer.size, (3, 2))
        self.assertEqual(buffer.get_pixel(0, 0).as_tuple(), (10, 20, 30))
        self.assertEqual(buffer.get_pixel(2, 1).as_tuple(), (200, 100, 50))

    def test_from_pil_converts_rgba(self):
        img = Image.new("RGBA", (2, 2), (1, 2, 3, 128))

        buffer = ImageBuffer.from_pil(img)

        self.assertEqual(buffer.get_pixel(1, 1).as_tuple(), (1, 2, 3))

    def test_from_pil_rejects_non_image(self):
        with self.assertRaises(TypeError):
            ImageBuffer.from_pil("not_an_image")

    def test_to_pil_clips_channels(self):
        buffer = ImageBuffer(1, 1)
        buffer.set_pixel(0, 0, (344, 128, -20))

        img = buffer.to_pil()

        self.assertEqual(img.mode, "RGB")
        self.assertEqual(img.size, (1, 1))
        self.assertEqual(img.getpixel((0, 0)), (255, 128, 0))


class TestImageBufferFiles(unittest.TestCase):
    """Test load() and save()."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_save_and_load_png(self):
        buffer = ImageBuffer(2, 3)
        buffer.set_pixel(1, 2, (12, 34, 56))
        path = self.temp_path / "out.png"

        written = buffer.save(path)
        loaded = ImageBuffer.load(path)

        self.assertEqual(written, path)
        self.assertEqual(loaded, buffer)

    def test_save_infers_format_from_extension(self):
        path = self.temp_path / "out.jpg"

        ImageBuffer(4, 4).save(path)

        with Image.open(path) as img:
            self.assertEqual(img.format, "JPEG")

    def test_save_unknown_extension_uses_png(self):
        path = self.temp_path / "out.data"

        ImageBuffer(2, 2).save(path)

        with Image.open(path) as img:
            self.assertEqual(img.format, "PNG")

    def test_load_missing_file_raises_error(self):
        with self.assertRaises(FileNotFoundError):
            ImageBuffer.load(self.temp_path / "missing.png")

    def test_load_invalid_file_raises_ioerror(self):
        path = self.temp_path / "broken.png"
        path.write_bytes(b"this is not an image")

        with self.assertRaises(IOError):
            ImageBuffer.load(path)

    def test_save_to_missing_directory_raises_ioerror(self):
        with self.assertRaises(IOError):
            ImageBuffer(1, 1).save(self.temp_path / "nope" / "out.png")
