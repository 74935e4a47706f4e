"""Core drawing logic: gesture routing and rasterization"""

from .gestures import DragStart, DragMove, DragEnd, GestureRouter
from .rasterizer import rasterize, paint_stroke, paint_points, paint_polyline

__all__ = [
    'DragStart',
    'DragMove',
    'DragEnd',
    'GestureRouter',
    'rasterize',
    'paint_stroke',
    'paint_points',
    'paint_polyline',
]
