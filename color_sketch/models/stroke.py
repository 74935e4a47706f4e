"""
Stroke data types

Point, RGBColor and Stroke are immutable value objects. A Stroke is
built once at drag end and never changes afterwards.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QColor

from ..utils.color_utils import rgb_to_hex, hex_to_rgb


@dataclass(frozen=True)
class Point:
    """2D coordinate in canvas pixel space."""
    x: float
    y: float

    @classmethod
    def from_qpoint(cls, point) -> 'Point':
        """Build from a QPoint or QPointF."""
        return cls(float(point.x()), float(point.y()))

    def to_qpointf(self) -> QPointF:
        return QPointF(self.x, self.y)


@dataclass(frozen=True)
class RGBColor:
    """Color with three 8-bit channels."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    @classmethod
    def from_hex(cls, hex_color: str) -> 'RGBColor':
        return cls(*hex_to_rgb(hex_color))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return rgb_to_hex(self.to_tuple())

    def to_qcolor(self) -> QColor:
        return QColor(self.red, self.green, self.blue)


BLACK = RGBColor(0, 0, 0)


@dataclass(frozen=True)
class Stroke:
    """
    One committed freehand stroke.

    Attributes:
        points: Points in drawing order (never empty)
        color: Color locked in at stroke start
        width: Line width in pixels (positive)
    """
    points: Tuple[Point, ...]
    color: RGBColor
    width: float

    def __post_init__(self):
        if not self.points:
            raise ValueError("A stroke needs at least one point")
        if self.width <= 0:
            raise ValueError(f"Stroke width must be positive, got {self.width}")

    @classmethod
    def create(cls, points: Iterable[Point], color: RGBColor, width: float) -> 'Stroke':
        """Build a stroke from any iterable of points (copied into a tuple)."""
        return cls(tuple(points), color, float(width))

    @property
    def point_count(self) -> int:
        return len(self.points)


__all__ = ['Point', 'RGBColor', 'Stroke', 'BLACK']
