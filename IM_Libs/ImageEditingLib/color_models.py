"""
Color models for Image Manipulator.

This module defines the two pixel representations used by the transformation
engine and the conversions between them.

Classes:
    RGB: Integer red/green/blue pixel
    HSL: Hue (degrees), saturation and lightness (fractions) view of a pixel

Channel values are not validated. Arithmetic performed by the filters may
leave a channel outside 0-255 and the models carry such values unchanged.
"""

from colorsys import hls_to_rgb, rgb_to_hls
from dataclasses import dataclass
from typing import Tuple

from IM_Libs.constants import CHANNEL_MAX, LUMINANCE_WEIGHTS

RgbColor = Tuple[int, int, int]


@dataclass
class RGB:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_tuple(cls, color: Tuple[int, int, int]) -> "RGB":
        r, g, b = color
        return cls(int(r), int(g), int(b))

    def as_tuple(self) -> RgbColor:
        return (self.red, self.green, self.blue)

    def copy(self) -> "RGB":
        return RGB(self.red, self.green, self.blue)

    def luminance(self) -> float:
        """
        Perceptual brightness estimate used by the black/white stylization.

        Computed as 0.299*r^2 + 0.587*g^2 + 0.114*b^2. The square root is not
        taken; ordering between pixels is the same either way.
        """
        wr, wg, wb = LUMINANCE_WEIGHTS
        return (
            wr * (self.red * self.red)
            + wg * (self.green * self.green)
            + wb * (self.blue * self.blue)
        )

    def to_hsl(self) -> "HSL":
        """
        Convert this pixel to HSL.

        Channels are normalized to 0-1 before conversion. Hue is returned in
        degrees [0, 360); saturation is 0 for achromatic pixels.

        Returns:
            A new HSL instance
        """
        h, l, s = rgb_to_hls(
            self.red / CHANNEL_MAX,
            self.green / CHANNEL_MAX,
            self.blue / CHANNEL_MAX,
        )
        return HSL(hue=h * 360.0, saturation=s, lightness=l)


@dataclass
class HSL:
    hue: float = 0.0
    saturation: float = 0.0
    lightness: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.hue, self.saturation, self.lightness)

    def to_rgb(self) -> RGB:
        """
        Convert back to an integer RGB pixel.

        Hue wraps modulo 360. Saturation and lightness are used as given, so
        values outside 0-1 produce channels outside 0-255.

        Channels are rounded to the nearest integer, not truncated like the
        arithmetic filters, so an unmodified RGB -> HSL -> RGB round trip
        stays within 1 of the original channels.

        Returns:
            A new RGB instance with rounded channel values
        """
        r, g, b = hls_to_rgb(self.hue / 360.0, self.lightness, self.saturation)
        return RGB(
            int(round(r * CHANNEL_MAX)),
            int(round(g * CHANNEL_MAX)),
            int(round(b * CHANNEL_MAX)),
        )
