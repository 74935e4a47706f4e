"""Drawing state models for Color Sketch"""

from .stroke import Point, RGBColor, Stroke, BLACK
from .canvas_state import CanvasState
from .color_mixer import Channel, ColorMixer

__all__ = [
    'Point',
    'RGBColor',
    'Stroke',
    'BLACK',
    'CanvasState',
    'Channel',
    'ColorMixer',
]
