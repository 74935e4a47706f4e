"""
Color Sketch

Single-screen drawing app: mix a color with RGB sliders, draw freehand
strokes and export the drawing as a PNG.
"""

__version__ = "1.0.0"

from .config import Config
from .events.event_bus import EventBus, get_event_bus

__all__ = [
    'Config',
    'EventBus',
    'get_event_bus',
]
