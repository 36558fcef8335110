"""Utilities: colour-space conversion and logging setup."""

from .colors import (
    to_list,
    to_array,
    rgb_to_hsv,
    color_to_hsv,
    hsv_to_rgb,
    rgb_to_hsl,
    color_to_hsl,
    hsl_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
    invert,
    cut_red,
    cut_green,
    cut_blue,
)
from .logging_config import setup_logging

__all__ = [
    # Colors
    "to_list",
    "to_array",
    "rgb_to_hsv",
    "color_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "color_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "invert",
    "cut_red",
    "cut_green",
    "cut_blue",
    # Logging
    "setup_logging",
]
