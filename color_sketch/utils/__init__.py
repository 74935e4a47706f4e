"""Utility functions for Color Sketch"""

from .color_utils import channel_to_int, int_to_channel, hex_to_rgb, rgb_to_hex
from .image_utils import qimage_to_array, count_painted_pixels, is_blank
from .logging_config import LoggingConfig

__all__ = [
    'channel_to_int',
    'int_to_channel',
    'hex_to_rgb',
    'rgb_to_hex',
    'qimage_to_array',
    'count_painted_pixels',
    'is_blank',
    'LoggingConfig',
]
