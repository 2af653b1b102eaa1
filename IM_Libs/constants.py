"""
Constants and configuration values for Image Manipulator.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

from pathlib import Path

# Channel range
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Pure colors used by the black/white stylization
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Sepia matrix: output channel -> (red, green, blue) weights
SEPIA_RED_WEIGHTS = (0.393, 0.769, 0.189)
SEPIA_GREEN_WEIGHTS = (0.349, 0.686, 0.168)
SEPIA_BLUE_WEIGHTS = (0.272, 0.534, 0.131)

# Luminance weights (applied to squared channel values)
LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)

# Instagram filter: warm shift
WARM_RED_FACTOR = 1.2
WARM_BLUE_DIVISOR = 1.5

# Instagram filter: overlay blends (weight of the subject image)
HALO_IMAGE_WEIGHT = 0.65
GRAIN_IMAGE_WEIGHT = 0.95

# Instagram filter: overlay resources, relative to the working directory
RESOURCES_DIR = Path("resources")
HALO_IMAGE_PATH = RESOURCES_DIR / "halo.png"
GRAIN_IMAGE_PATH = RESOURCES_DIR / "decorative_grain.png"

# File formats
DEFAULT_OUTPUT_FORMAT = "PNG"
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}

# Extension -> Pillow format name
EXTENSION_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".bmp": "BMP",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
    ".webp": "WEBP",
}

# Filter names
FILTER_GRAYSCALE = "grayscale"
FILTER_INVERT = "invert"
FILTER_SEPIA = "sepia"
FILTER_BW = "bw"
FILTER_ROTATE = "rotate"
FILTER_INSTAGRAM = "instagram"
FILTER_HUE = "hue"
FILTER_SATURATION = "saturation"
FILTER_LIGHTNESS = "lightness"

# Node types
NODE_TYPE_IMAGE_IMPORT = "Image Import"
NODE_TYPE_FILTER = "Filter"
NODE_TYPE_OUTPUT = "Output"
