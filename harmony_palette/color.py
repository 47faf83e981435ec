import colorsys
import re
from collections import namedtuple

import numpy as np

Color = namedtuple("Color", ["hex", "rgb", "hsv", "luminance"])

HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

# CIE L*a*b* reference white (D65) and the piecewise constants of f(t)
LAB_WHITE = np.array([0.950470, 1.0, 1.088830])
LAB_T0 = 4 / 29
LAB_T2 = 3 * (6 / 29) ** 2
LAB_T3 = (6 / 29) ** 3

SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    if not is_hex_color(hex_color):
        raise ValueError(f"Not a #RRGGBB color: {hex_color!r}")
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def is_hex_color(value):
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def rgb_to_hsv(r, g, b):
    h, s, v = colorsys.rgb_to_hsv(r / 255, g / 255, b / 255)
    return (h * 360, s, v)


def hsv_to_rgb(h, s, v):
    """Convert hue in degrees and saturation/brightness in [0, 1] to 0-255 RGB."""
    r, g, b = colorsys.hsv_to_rgb((h % 360) / 360, s, v)
    return (round(r * 255), round(g * 255), round(b * 255))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def _clamp_unit(value):
    return max(0.0, min(1.0, value))


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsv=rgb_to_hsv(r, g, b),
        luminance=relative_luminance(r, g, b),
    )


def create_color_from_hsv(h, s, v):
    """Create a Color from HSV, keeping the requested HSV values.

    Saturation and brightness are clamped to [0, 1] before conversion, so
    scheme formulas that overshoot (monochromatic at high indices) still
    produce a valid color.

    Args:
        h: Hue in degrees, any value (normalized modulo 360)
        s: Saturation
        v: Brightness

    Returns:
        Color whose hsv field holds the normalized, clamped input
    """
    h = h % 360
    s, v = _clamp_unit(s), _clamp_unit(v)
    r, g, b = hsv_to_rgb(h, s, v)
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsv=(h, s, v),
        luminance=relative_luminance(r, g, b),
    )


def random_color(rand):
    """Fully random color: uniform hue, saturation and brightness."""
    h = rand() * 360
    s = rand()
    v = rand()
    return create_color_from_hsv(h, s, v)


def as_color(value):
    """Accept a Color or a hex string and return a Color."""
    if isinstance(value, Color):
        return value
    return create_color(*hex_to_rgb(value))


def rgb_to_lab(rgb):
    """Convert RGB array (0-255) to LAB color space.

    Accepts a single (r, g, b) triple or an (N, 3) array and returns an
    array of the same shape.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    rgb_norm = rgb / 255.0

    # sRGB companding
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    xyz = rgb_linear @ SRGB_TO_XYZ.T / LAB_WHITE
    f = np.where(xyz > LAB_T3, np.cbrt(xyz), xyz / LAB_T2 + LAB_T0)

    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    L = np.maximum(116 * fy - 16, 0)
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return np.stack([L, a, b], axis=-1)


def lab_distance(color1, color2):
    """CIE76 distance between two colors (Color or hex)."""
    labs = rgb_to_lab([as_color(color1).rgb, as_color(color2).rgb])
    return float(np.linalg.norm(labs[1] - labs[0]))
