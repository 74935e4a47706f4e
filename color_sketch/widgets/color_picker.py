"""
ColorPicker - RGB slider color mixer

Pattern: QWidget with vertical layout
Layout:
    [        color swatch        ]
    R [-------------------] 255
    G [-------------------]   0
    B [-------------------]   0
"""

from typing import Dict, Optional

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QSlider, QLabel, QFrame
from PyQt6.QtCore import Qt, pyqtSignal

from ..config import Config
from ..models.color_mixer import Channel, ColorMixer
from ..models.stroke import RGBColor
from ..utils.color_utils import channel_to_int


# Slider track color per channel
CHANNEL_TRACK_COLORS = {
    Channel.RED: '#ff0000',
    Channel.GREEN: '#00ff00',
    Channel.BLUE: '#0000ff',
}


class ColorSlider(QWidget):
    """One labelled channel slider restricted to 0.0-1.0."""

    value_changed = pyqtSignal(float)

    def __init__(self, label: str, track_color: str, value: float = 0.0, parent=None):
        super().__init__(parent)
        self._label_text = label
        self._track_color = track_color

        self._create_widgets(value)
        self._create_layout()
        self._slider.valueChanged.connect(self._on_slider_changed)

    def _create_widgets(self, value: float):
        self._label = QLabel(self._label_text)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(0, Config.COLOR_SLIDER_RESOLUTION)
        self._slider.setValue(round(value * Config.COLOR_SLIDER_RESOLUTION))
        self._slider.setStyleSheet(
            f"QSlider::sub-page:horizontal {{ background: {self._track_color}; }}"
        )

        self._value_label = QLabel(str(channel_to_int(value)))
        self._value_label.setFixedWidth(30)
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

    def _create_layout(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        layout.addWidget(self._label)
        layout.addWidget(self._slider, 1)
        layout.addWidget(self._value_label)

    @property
    def value(self) -> float:
        return self._slider.value() / Config.COLOR_SLIDER_RESOLUTION

    def set_value(self, value: float):
        """Move the slider (emits value_changed if the position changes)."""
        self._slider.setValue(round(value * Config.COLOR_SLIDER_RESOLUTION))

    @property
    def display_text(self) -> str:
        return self._value_label.text()

    def _on_slider_changed(self, position: int):
        value = position / Config.COLOR_SLIDER_RESOLUTION
        self._value_label.setText(str(channel_to_int(value)))
        self.value_changed.emit(value)


class ColorPicker(QWidget):
    """
    Color swatch plus one slider per channel

    Slider moves are written straight into the ColorMixer; the swatch
    follows the mixer's color_changed signal.
    """

    def __init__(self, color_mixer: ColorMixer, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._mixer = color_mixer
        self._sliders: Dict[Channel, ColorSlider] = {}

        self._create_widgets()
        self._create_layout()
        self._connect_signals()

        self._update_swatch(self._mixer.current_color())

    def _create_widgets(self):
        self._swatch = QFrame()
        self._swatch.setFixedHeight(Config.SWATCH_HEIGHT)

        for channel, label in ((Channel.RED, "R"), (Channel.GREEN, "G"), (Channel.BLUE, "B")):
            self._sliders[channel] = ColorSlider(
                label, CHANNEL_TRACK_COLORS[channel], self._mixer.channel(channel)
            )

    def _create_layout(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 0, 10, 0)
        layout.setSpacing(5)
        layout.addWidget(self._swatch)

        sliders_layout = QVBoxLayout()
        sliders_layout.setContentsMargins(2, 12, 2, 12)
        sliders_layout.setSpacing(5)
        for slider in self._sliders.values():
            sliders_layout.addWidget(slider)
        layout.addLayout(sliders_layout)

    def _connect_signals(self):
        for channel, slider in self._sliders.items():
            # Bind channel now, not at call time
            slider.value_changed.connect(
                lambda value, ch=channel: self._mixer.set_channel(ch, value)
            )
        self._mixer.color_changed.connect(self._update_swatch)

    def slider(self, channel: Channel) -> ColorSlider:
        return self._sliders[Channel.parse(channel)]

    @property
    def swatch_color(self) -> str:
        return self._swatch_hex

    def _update_swatch(self, color: RGBColor):
        self._swatch_hex = color.to_hex()
        self._swatch.setStyleSheet(
            f"background-color: {self._swatch_hex}; border-radius: 16px;"
        )


__all__ = ['ColorSlider', 'ColorPicker']
