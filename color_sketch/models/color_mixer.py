"""
ColorMixer - RGB slider state

Three independent channel values in 0.0-1.0. The composite color is
recomputed from them on every read.
"""

from enum import Enum
from typing import Optional, Tuple, Union

from PyQt6.QtCore import QObject, pyqtSignal

from .stroke import RGBColor
from ..utils.color_utils import channel_to_int


class Channel(Enum):
    """Additive color channels."""
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'

    @classmethod
    def parse(cls, value: Union['Channel', str]) -> 'Channel':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Invalid channel: {value}") from None


class ColorMixer(QObject):
    """
    Color mixer state

    The mixer does not range-check channel values; the slider widgets
    restrict input to 0.0-1.0.
    """

    color_changed = pyqtSignal(object)  # RGBColor

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self._values = {
            Channel.RED: red,
            Channel.GREEN: green,
            Channel.BLUE: blue,
        }

    def set_channel(self, channel: Union[Channel, str], value: float):
        """
        Set one channel

        Args:
            channel: Channel enum member or 'red'/'green'/'blue'
            value: Normalized channel value
        """
        self._values[Channel.parse(channel)] = value
        self.color_changed.emit(self.current_color())

    def channel(self, channel: Union[Channel, str]) -> float:
        """Get one channel value"""
        return self._values[Channel.parse(channel)]

    def channels(self) -> Tuple[float, float, float]:
        """Get (red, green, blue) as normalized floats"""
        return (
            self._values[Channel.RED],
            self._values[Channel.GREEN],
            self._values[Channel.BLUE],
        )

    def current_color(self) -> RGBColor:
        """Composite color of the current channel values"""
        red, green, blue = self.channels()
        return RGBColor(channel_to_int(red), channel_to_int(green), channel_to_int(blue))


__all__ = ['Channel', 'ColorMixer']
