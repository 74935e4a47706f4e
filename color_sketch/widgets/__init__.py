"""UI Widgets for Color Sketch"""

from .main_window import MainWindow
from .color_picker import ColorPicker, ColorSlider
from .draw_canvas import DrawCanvas
from .brush_toolbar import BrushToolbar

__all__ = [
    'MainWindow',
    'ColorPicker',
    'ColorSlider',
    'DrawCanvas',
    'BrushToolbar',
]
