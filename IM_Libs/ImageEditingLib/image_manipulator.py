"""
Core image transformations for Image Manipulator.

Every transformation takes an ImageBuffer (plus numeric parameters for the
HSL adjustments) and returns an ImageBuffer. Integer channel results are
truncated toward zero, never rounded, and are not clamped to 0-255.

In-place vs. new buffer:
    All transformations mutate the buffer they receive and return that same
    object, except rotate_image, which returns a new buffer and leaves its
    input untouched.

Functions:
    load_image: Decode an image file into an ImageBuffer
    save_image: Encode an ImageBuffer, format inferred from the path
    convert_to_grayscale: Average the three channels of every pixel
    invert_image: Replace every channel c with 255 - c
    convert_to_sepia: Apply the sepia color matrix
    compute_median_luminance: Median luminance over the whole image
    convert_to_bw: Stylized black/white split at the median luminance
    rotate_image: Rotate 90 degrees clockwise (new buffer)
    apply_warm_filter: Boost red, reduce blue
    blend_images: Per-channel weighted average with an overlay image
    instagram_filter: Warm filter, halo blend, grain blend
    set_hue / set_saturation / set_lightness: HSL channel adjustments
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from IM_Libs.constants import (
    BLACK,
    CHANNEL_MAX,
    FILTER_BW,
    FILTER_GRAYSCALE,
    FILTER_HUE,
    FILTER_INSTAGRAM,
    FILTER_INVERT,
    FILTER_LIGHTNESS,
    FILTER_ROTATE,
    FILTER_SATURATION,
    FILTER_SEPIA,
    GRAIN_IMAGE_PATH,
    GRAIN_IMAGE_WEIGHT,
    HALO_IMAGE_PATH,
    HALO_IMAGE_WEIGHT,
    SEPIA_BLUE_WEIGHTS,
    SEPIA_GREEN_WEIGHTS,
    SEPIA_RED_WEIGHTS,
    WARM_BLUE_DIVISOR,
    WARM_RED_FACTOR,
    WHITE,
)
from IM_Libs.ImageEditingLib.color_models import HSL, RGB
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer

logger = logging.getLogger(__name__)


# ============================================================================
# Loading and saving
# ============================================================================

def load_image(path: Union[str, Path]) -> ImageBuffer:
    """
    Load the image at the given path.

    Raises:
        FileNotFoundError: If the file does not exist
        IOError: If the file cannot be decoded
    """
    return ImageBuffer.load(path)


def save_image(image: ImageBuffer, path: Union[str, Path]) -> Path:
    """
    Save the image to the given location.

    The output format follows the file extension (".png", ".jpg", ...).

    Raises:
        IOError: If the file cannot be written
    """
    return image.save(path)


# ============================================================================
# Per-pixel color transformations
# ============================================================================

def convert_to_grayscale(image: ImageBuffer) -> ImageBuffer:
    """
    Convert the image to grayscale in place.

    Each channel is set to the integer average (r + g + b) // 3.

    Args:
        image: ImageBuffer to transform

    Returns:
        The same ImageBuffer, mutated
    """
    for x, y in image.iter_coordinates():
        pixel = image.get_pixel(x, y)
        average = (pixel.red + pixel.green + pixel.blue) // 3
        image.set_pixel(x, y, RGB(average, average, average))

    logger.debug(f"Applied grayscale to {image}")
    return image


def invert_image(image: ImageBuffer) -> ImageBuffer:
    """
    Invert the image in place: every channel c becomes 255 - c.

    Returns:
        The same ImageBuffer, mutated
    """
    for x, y in image.iter_coordinates():
        pixel = image.get_pixel(x, y)
        image.set_pixel(
            x,
            y,
            RGB(
                CHANNEL_MAX - pixel.red,
                CHANNEL_MAX - pixel.green,
                CHANNEL_MAX - pixel.blue,
            ),
        )

    logger.debug(f"Applied invert to {image}")
    return image


def _weighted_channel(pixel: RGB, weights: Tuple[float, float, float]) -> int:
    wr, wg, wb = weights
    return int(pixel.red * wr + pixel.green * wg + pixel.blue * wb)


def convert_to_sepia(image: ImageBuffer) -> ImageBuffer:
    """
    Convert the image to sepia in place.

        r = .393r + .769g + .189b
        g = .349r + .686g + .168b
        b = .272r + .534g + .131b

    Results are truncated to int. Bright pixels exceed 255 (white becomes
    (344, 306, 238)) and are stored unclamped.

    Returns:
        The same ImageBuffer, mutated
    """
    for x, y in image.iter_coordinates():
        pixel = image.get_pixel(x, y)
        image.set_pixel(
            x,
            y,
            RGB(
                _weighted_channel(pixel, SEPIA_RED_WEIGHTS),
                _weighted_channel(pixel, SEPIA_GREEN_WEIGHTS),
                _weighted_channel(pixel, SEPIA_BLUE_WEIGHTS),
            ),
        )

    logger.debug(f"Applied sepia to {image}")
    return image


# ============================================================================
# Black/white stylization
# ============================================================================

def _median(values: List[float]) -> float:
    ordered = sorted(values)
    count = len(ordered)
    middle = count // 2
    if count % 2 == 1:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / 2


def compute_median_luminance(image: ImageBuffer) -> float:
    """
    Compute the median luminance over every pixel of the image.

    For an even pixel count the two middle values are averaged.
    """
    luminances = [image.get_pixel(x, y).luminance() for x, y in image.iter_coordinates()]
    return _median(luminances)


def convert_to_bw(image: ImageBuffer) -> ImageBuffer:
    """
    Create a stylized black/white image (no gray) in place.

    1) compute the luminance of each pixel: .299 r^2 + .587 g^2 + .114 b^2
    2) find the median luminance over the whole image
    3) pixels with luminance >= median become white, all others black

    The median is computed from a complete first pass before any pixel is
    written.

    Returns:
        The same ImageBuffer, mutated
    """
    median_luminance = compute_median_luminance(image)

    for x, y in image.iter_coordinates():
        if image.get_pixel(x, y).luminance() >= median_luminance:
            image.set_pixel(x, y, WHITE)
        else:
            image.set_pixel(x, y, BLACK)

    logger.debug(f"Applied black/white to {image} (median luminance {median_luminance:.2f})")
    return image


# ============================================================================
# Geometry
# ============================================================================

def rotate_image(image: ImageBuffer) -> ImageBuffer:
    """
    Rotate the image 90 degrees clockwise.

    The result has swapped dimensions; pixel (x, y) moves to
    (new_width - 1 - y, x).

    Returns:
        A NEW ImageBuffer. The input buffer is not modified.
    """
    rotated = ImageBuffer(image.height, image.width)
    for x, y in image.iter_coordinates():
        rotated.set_pixel(rotated.width - y - 1, x, image.get_pixel(x, y))

    logger.debug(f"Rotated {image} into {rotated}")
    return rotated


# ============================================================================
# Instagram filter
# ============================================================================

def apply_warm_filter(image: ImageBuffer) -> ImageBuffer:
    """
    Warm the image in place by increasing red and reducing blue.

        r = r * 1.2
        g = g
        b = b / 1.5

    Results are truncated to int and not clamped.

    Returns:
        The same ImageBuffer, mutated
    """
    for x, y in image.iter_coordinates():
        pixel = image.get_pixel(x, y)
        image.set_pixel(
            x,
            y,
            RGB(
                int(pixel.red * WARM_RED_FACTOR),
                pixel.green,
                int(pixel.blue / WARM_BLUE_DIVISOR),
            ),
        )
    return image


def blend_images(image: ImageBuffer, overlay: ImageBuffer, image_weight: float) -> ImageBuffer:
    """
    Blend an overlay into the image in place.

    Each channel becomes image_weight * image + (1 - image_weight) * overlay,
    truncated to int.

    Args:
        image: ImageBuffer to transform
        overlay: ImageBuffer with the same dimensions as image. A smaller
            overlay fails with IndexError on the first missing pixel.
        image_weight: Share of the subject image (0-1)

    Returns:
        The same ImageBuffer, mutated
    """
    overlay_weight = 1.0 - image_weight

    for x, y in image.iter_coordinates():
        pixel = image.get_pixel(x, y)
        other = overlay.get_pixel(x, y)
        image.set_pixel(
            x,
            y,
            RGB(
                int(pixel.red * image_weight + other.red * overlay_weight),
                int(pixel.green * image_weight + other.green * overlay_weight),
                int(pixel.blue * image_weight + other.blue * overlay_weight),
            ),
        )
    return image


def instagram_filter(
    image: ImageBuffer,
    halo: Optional[ImageBuffer] = None,
    grain: Optional[ImageBuffer] = None,
) -> ImageBuffer:
    """
    Apply an Instagram-like filter to the image in place.

    1) Warm filter: r = r * 1.2, b = b / 1.5
    2) Vignette: 65% of the image blended with 35% of a halo image
    3) Decorative grain: 95% of the image blended with 5% of a grain image

    Each pass completes over the whole image before the next begins.

    Args:
        image: ImageBuffer to transform
        halo: Halo overlay; loaded from resources/halo.png when omitted
        grain: Grain overlay; loaded from resources/decorative_grain.png
            when omitted

    Returns:
        The same ImageBuffer, mutated

    Raises:
        FileNotFoundError: If a default overlay file is missing
        IOError: If a default overlay file cannot be decoded
    """
    apply_warm_filter(image)

    if halo is None:
        halo = load_image(HALO_IMAGE_PATH)
    blend_images(image, halo, HALO_IMAGE_WEIGHT)

    if grain is None:
        grain = load_image(GRAIN_IMAGE_PATH)
    blend_images(image, grain, GRAIN_IMAGE_WEIGHT)

    logger.debug(f"Applied instagram filter to {image}")
    return image


# ============================================================================
# HSL adjustments
# ============================================================================

def _adjust_hsl(image: ImageBuffer, update: Callable[[HSL], None]) -> ImageBuffer:
    for x, y in image.iter_coordinates():
        hsl = image.get_pixel(x, y).to_hsl()
        update(hsl)
        image.set_pixel(x, y, hsl.to_rgb())
    return image


def set_hue(image: ImageBuffer, hue: float) -> ImageBuffer:
    """
    Set the hue of every pixel in place. Hue ranges from 0 to 360.

    Each pixel is converted to HSL, given the new hue, and converted back.
    The value is not validated.

    Returns:
        The same ImageBuffer, mutated
    """
    def update(hsl: HSL) -> None:
        hsl.hue = hue

    _adjust_hsl(image, update)
    logger.debug(f"Set hue {hue} on {image}")
    return image


def set_saturation(image: ImageBuffer, saturation: float) -> ImageBuffer:
    """
    Set the saturation of every pixel in place. Saturation ranges from 0 to 1.

    Returns:
        The same ImageBuffer, mutated
    """
    def update(hsl: HSL) -> None:
        hsl.saturation = saturation

    _adjust_hsl(image, update)
    logger.debug(f"Set saturation {saturation} on {image}")
    return image


def set_lightness(image: ImageBuffer, lightness: float) -> ImageBuffer:
    """
    Set the lightness of every pixel in place. Lightness ranges from 0 to 1.

    Returns:
        The same ImageBuffer, mutated
    """
    def update(hsl: HSL) -> None:
        hsl.lightness = lightness

    _adjust_hsl(image, update)
    logger.debug(f"Set lightness {lightness} on {image}")
    return image


# Filter name -> transformation
TRANSFORMATIONS: Dict[str, Callable[..., ImageBuffer]] = {
    FILTER_GRAYSCALE: convert_to_grayscale,
    FILTER_INVERT: invert_image,
    FILTER_SEPIA: convert_to_sepia,
    FILTER_BW: convert_to_bw,
    FILTER_ROTATE: rotate_image,
    FILTER_INSTAGRAM: instagram_filter,
    FILTER_HUE: set_hue,
    FILTER_SATURATION: set_saturation,
    FILTER_LIGHTNESS: set_lightness,
}
