"""
Colour-space conversion between 8-bit RGB, HSV and HSL.

Hue is in degrees [0, 360); saturation, value and lightness are in [0, 1];
RGB channels are integers in [0, 255]. Conversions back to RGB round to
the nearest integer (half to even), so an RGB -> HSV -> RGB round trip
reproduces every channel within ±1.
"""

import math
from typing import List

import numpy as np
from numpy.typing import NDArray

from ..core.types import HSL, HSV, Color
from ..core.validation import require_in_range


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _to_byte(unit_value: float) -> int:
    return min(255, max(0, int(round(unit_value * 255.0))))


# =============================================================================
# Channel Access
# =============================================================================

def to_list(color: Color, include_alpha: bool = False) -> List[float]:
    """Channels as [r, g, b] or [r, g, b, a]."""
    channels = [float(color.r), float(color.g), float(color.b)]
    if include_alpha:
        channels.append(float(color.a))
    return channels


def to_array(color: Color, include_alpha: bool = False) -> NDArray[np.float64]:
    return np.array(to_list(color, include_alpha), dtype=np.float64)


# =============================================================================
# RGB <-> HSV
# =============================================================================

def _hue(r: float, g: float, b: float, high: float, diff: float) -> float:
    """Hue in degrees from normalized channels; 0 for greys."""
    if diff <= 0.0:
        return 0.0
    if high == r:
        hue = 60.0 * math.fmod((g - b) / diff, 6.0)
    elif high == g:
        hue = 60.0 * ((b - r) / diff + 2.0)
    else:
        hue = 60.0 * ((r - g) / diff + 4.0)
    if hue < 0.0:
        hue += 360.0
    return hue


def _check_channels(red: float, green: float, blue: float) -> None:
    require_in_range(red, 0.0, 255.0, "red", label="Channel")
    require_in_range(green, 0.0, 255.0, "green", label="Channel")
    require_in_range(blue, 0.0, 255.0, "blue", label="Channel")


def rgb_to_hsv(red: float, green: float, blue: float) -> HSV:
    """
    Convert RGB channels (0-255) to HSV.

    Args:
        red, green, blue: Channel values in [0, 255]

    Returns:
        HSV(hue [0, 360), saturation [0, 1], value [0, 1])

    Raises:
        DomainError: If any channel lies outside [0, 255]
    """
    _check_channels(red, green, blue)
    r, g, b = red / 255.0, green / 255.0, blue / 255.0
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    hue = _hue(r, g, b, high, diff)
    saturation = diff / high if high != 0.0 else 0.0
    return HSV(hue, saturation, high)


def color_to_hsv(color: Color) -> HSV:
    return rgb_to_hsv(color.r, color.g, color.b)


def hsv_to_rgb(
    hue: float,
    saturation: float,
    value: float,
    include_alpha: bool = False,
    alpha: float = 1.0
) -> Color:
    """
    Convert HSV to an 8-bit colour.

    Hue is wrapped into [0, 360) (NaN is treated as 0); saturation, value
    and alpha are clamped to [0, 1].

    Args:
        hue: Hue in degrees, any real value
        saturation: Saturation
        value: Value (brightness)
        include_alpha: Use alpha for the alpha channel; otherwise opaque
        alpha: Opacity in [0, 1]

    Returns:
        Color with channels in [0, 255]
    """
    if math.isnan(hue):
        hue = 0.0
    hue = (hue % 360.0 + 360.0) % 360.0
    saturation = _clamp(saturation)
    value = _clamp(value)

    c = value * saturation
    x = c * (1.0 - abs((hue / 60.0) % 2.0 - 1.0))
    m = value - c

    if hue < 60.0:
        r1, g1, b1 = c, x, 0.0
    elif hue < 120.0:
        r1, g1, b1 = x, c, 0.0
    elif hue < 180.0:
        r1, g1, b1 = 0.0, c, x
    elif hue < 240.0:
        r1, g1, b1 = 0.0, x, c
    elif hue < 300.0:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    a = _to_byte(_clamp(alpha)) if include_alpha else 255
    return Color(_to_byte(r1 + m), _to_byte(g1 + m), _to_byte(b1 + m), a)


# =============================================================================
# RGB <-> HSL
# =============================================================================

def rgb_to_hsl(red: float, green: float, blue: float) -> HSL:
    """
    Convert RGB channels (0-255) to HSL.

    Lightness is the mid-range (max + min) / 2; saturation is 0 for greys.
    Channels are truncated to integers first.
    """
    _check_channels(red, green, blue)
    r, g, b = int(red) / 255.0, int(green) / 255.0, int(blue) / 255.0
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low
    lightness = (high + low) / 2.0

    if diff == 0.0:
        saturation = 0.0
    elif lightness <= 0.5:
        saturation = diff / (high + low)
    else:
        saturation = diff / (2.0 - high - low)
    return HSL(_hue(r, g, b, high, diff), saturation, lightness)


def color_to_hsl(color: Color) -> HSL:
    return rgb_to_hsl(color.r, color.g, color.b)


def hsl_to_hsv(hue: float, saturation: float, lightness: float) -> HSV:
    """
    HSL -> HSV by the closed-form identities.

        v = l + s_l min(l, 1 - l)
        s_v = 0 if v == 0 else 2 (1 - l / v)
    """
    value = lightness + saturation * min(lightness, 1.0 - lightness)
    saturation_v = 0.0 if value == 0.0 else 2.0 * (1.0 - lightness / value)
    return HSV(hue, saturation_v, value)


def hsv_to_hsl(hue: float, saturation: float, value: float) -> HSL:
    """
    HSV -> HSL by the closed-form identities.

        l = v (1 - s_v / 2)
        s_l = 0 if l in {0, 1} else (v - l) / min(l, 1 - l)
    """
    lightness = value * (1.0 - saturation / 2.0)
    if lightness == 0.0 or lightness == 1.0:
        saturation_l = 0.0
    else:
        saturation_l = (value - lightness) / min(lightness, 1.0 - lightness)
    return HSL(hue, saturation_l, lightness)


def hsl_to_rgb(
    hue: float,
    saturation: float,
    lightness: float,
    include_alpha: bool = False,
    alpha: float = 1.0
) -> Color:
    """HSL -> RGB, routed through HSV."""
    h, s, v = hsl_to_hsv(hue, saturation, lightness)
    return hsv_to_rgb(h, s, v, include_alpha, alpha)


# =============================================================================
# Channel Operations
# =============================================================================

def invert(color: Color) -> Color:
    """Negative image: 255 - channel for r, g, b; alpha unchanged."""
    return Color(255 - color.r, 255 - color.g, 255 - color.b, color.a)


def cut_red(color: Color) -> Color:
    return Color(0, color.g, color.b, color.a)


def cut_green(color: Color) -> Color:
    return Color(color.r, 0, color.b, color.a)


def cut_blue(color: Color) -> Color:
    return Color(color.r, color.g, 0, color.a)
