"""
ImageEditingLib - Core image editing functionality

This module provides the color models, the image buffer and the
transformation engine for the Image Manipulator project.
"""

from IM_Libs.ImageEditingLib.color_models import HSL, RGB, RgbColor
from IM_Libs.ImageEditingLib.image_buffer import ImageBuffer
from IM_Libs.ImageEditingLib.image_manipulator import (
    TRANSFORMATIONS,
    apply_warm_filter,
    blend_images,
    compute_median_luminance,
    convert_to_bw,
    convert_to_grayscale,
    convert_to_sepia,
    instagram_filter,
    invert_image,
    load_image,
    rotate_image,
    save_image,
    set_hue,
    set_lightness,
    set_saturation,
)

__all__ = [
    "HSL",
    "RGB",
    "RgbColor",
    "ImageBuffer",
    "TRANSFORMATIONS",
    "apply_warm_filter",
    "blend_images",
    "compute_median_luminance",
    "convert_to_bw",
    "convert_to_grayscale",
    "convert_to_sepia",
    "instagram_filter",
    "invert_image",
    "load_image",
    "rotate_image",
    "save_image",
    "set_hue",
    "set_lightness",
    "set_saturation",
]
