"""
Image utilities for inspecting rasterized drawings

Converts QImage pixels to numpy arrays for blank checks and tests.
"""

import numpy as np
from PyQt6.QtGui import QImage


def qimage_to_array(image: QImage) -> np.ndarray:
    """
    Convert QImage to an RGBA numpy array

    Args:
        image: Any QImage

    Returns:
        uint8 array of shape (height, width, 4), channels in RGBA order
    """
    # Convert QImage to RGBA format first to ensure consistent handling
    if image.format() != QImage.Format.Format_RGBA8888:
        image = image.convertToFormat(QImage.Format.Format_RGBA8888)

    width = image.width()
    height = image.height()
    bytes_per_line = image.bytesPerLine()

    ptr = image.constBits()
    ptr.setsize(height * bytes_per_line)
    array = np.array(ptr, dtype=np.uint8).reshape((height, bytes_per_line // 4, 4))

    # Drop any scanline padding and detach from the QImage buffer
    return array[:, :width].copy()


def count_painted_pixels(image: QImage) -> int:
    """Count pixels with non-zero alpha"""
    return int(np.count_nonzero(qimage_to_array(image)[:, :, 3]))


def is_blank(image: QImage) -> bool:
    """Check if an image is fully transparent"""
    return count_painted_pixels(image) == 0


__all__ = ['qimage_to_array', 'count_painted_pixels', 'is_blank']
