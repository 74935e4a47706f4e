"""Color conversion utilities

Conversions between normalized channel values (0-1), 8-bit channel
values (0-255) and hex strings.
"""

from typing import Tuple


def channel_to_int(value: float) -> int:
    """Convert a normalized channel value (0-1) to an 8-bit value

    Rounds half up and clamps to 0-255, so slider labels and stroke
    colors agree.

    Example:
        >>> channel_to_int(0.5)
        128
    """
    return max(0, min(255, int(value * 255 + 0.5)))


def int_to_channel(value: int) -> float:
    """Convert an 8-bit channel value (0-255) to normalized 0-1"""
    return value / 255.0


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    """Convert RGB tuple (0-255 range) to hex color string

    Example:
        >>> rgb_to_hex((255, 87, 51))
        "#ff5733"
    """
    return '#{:02x}{:02x}{:02x}'.format(rgb[0], rgb[1], rgb[2])


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex color to RGB tuple (0-255 range)

    Args:
        hex_color: Hex color string (e.g., '#AABBCC' or 'AABBCC')

    Returns:
        Tuple of (r, g, b) values in 0-255 range
    """
    hex_color = hex_color.lstrip('#')
    # Handle 3-digit hex codes
    if len(hex_color) == 3:
        hex_color = ''.join([c*2 for c in hex_color])
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


__all__ = ['channel_to_int', 'int_to_channel', 'rgb_to_hex', 'hex_to_rgb']
