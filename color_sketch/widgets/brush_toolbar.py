"""
BrushToolbar - Bottom row with Clear, brush width and Save

Pattern: QWidget with horizontal layout
Layout:
    [Clear] [---- width ----] [Save]
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton, QSlider
from PyQt6.QtCore import Qt

from ..config import Config
from ..events.event_bus import EventBus, get_event_bus


# Slider positions: MIN..MAX split into STEPS + 1 intervals
WIDTH_SLIDER_MAX = Config.STROKE_WIDTH_STEPS + 1


def slider_to_width(position: int) -> float:
    """Map a slider position to a brush width."""
    span = Config.MAX_STROKE_WIDTH - Config.MIN_STROKE_WIDTH
    return Config.MIN_STROKE_WIDTH + span * position / WIDTH_SLIDER_MAX


def width_to_slider(width: float) -> int:
    """Map a brush width to the nearest slider position."""
    span = Config.MAX_STROKE_WIDTH - Config.MIN_STROKE_WIDTH
    position = round((width - Config.MIN_STROKE_WIDTH) / span * WIDTH_SLIDER_MAX)
    return max(0, min(WIDTH_SLIDER_MAX, position))


class BrushToolbar(QWidget):
    """
    Canvas actions and brush width

    All actions go through the event bus; the toolbar holds no drawing
    state of its own.
    """

    def __init__(self, parent: Optional[QWidget] = None, event_bus: Optional[EventBus] = None):
        super().__init__(parent)

        # Services (injectable for testing)
        self._event_bus = event_bus or get_event_bus()

        self._create_widgets()
        self._create_layout()
        self._connect_signals()

    def _create_widgets(self):
        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setToolTip("Remove all strokes")

        self._width_slider = QSlider(Qt.Orientation.Horizontal)
        self._width_slider.setRange(0, WIDTH_SLIDER_MAX)
        self._width_slider.setValue(width_to_slider(self._event_bus.get_stroke_width()))
        self._width_slider.setToolTip(
            f"Brush width ({Config.MIN_STROKE_WIDTH:g}-{Config.MAX_STROKE_WIDTH:g}px)"
        )

        self._save_btn = QPushButton("Save")
        self._save_btn.setToolTip("Export the drawing as PNG")

    def _create_layout(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(8)
        layout.addWidget(self._clear_btn)
        layout.addWidget(self._width_slider, 1)
        layout.addWidget(self._save_btn)

    def _connect_signals(self):
        self._clear_btn.clicked.connect(self._event_bus.request_clear)
        self._save_btn.clicked.connect(self._event_bus.request_export)
        self._width_slider.valueChanged.connect(self._on_width_slider_changed)

    def _on_width_slider_changed(self, position: int):
        self._event_bus.set_stroke_width(slider_to_width(position))

    @property
    def width_slider(self) -> QSlider:
        return self._width_slider


__all__ = ['BrushToolbar', 'slider_to_width', 'width_to_slider', 'WIDTH_SLIDER_MAX']
