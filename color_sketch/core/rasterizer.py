"""
Rasterizer - Render stroke sequences into a fixed-size image

Each stroke is painted as a round-capped polyline through its points,
followed by one filled disc (radius = width / 2) per point so sparse
point sequences still read as a continuous line. Strokes are painted in
commit order; later strokes cover earlier ones.
"""

from typing import Iterable, Sequence

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QImage, QPainter, QColor, QPen, QBrush, QPainterPath

from ..config import Config
from ..models.stroke import Point, RGBColor, Stroke


def make_stroke_pen(color: QColor, width: float) -> QPen:
    """Pen used for stroke polylines."""
    pen = QPen(color, width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return pen


def paint_polyline(painter: QPainter, points: Sequence[Point], color: RGBColor, width: float):
    """Stroke a connected path through points (needs at least two)."""
    if len(points) < 2:
        return

    path = QPainterPath()
    path.moveTo(points[0].x, points[0].y)
    for point in points[1:]:
        path.lineTo(point.x, point.y)

    painter.setPen(make_stroke_pen(color.to_qcolor(), width))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPath(path)


def paint_points(painter: QPainter, points: Iterable[Point], color: RGBColor, width: float):
    """Stamp a filled disc of radius width / 2 at every point."""
    radius = width / 2.0
    painter.setPen(QPen(Qt.PenStyle.NoPen))
    painter.setBrush(QBrush(color.to_qcolor()))
    for point in points:
        painter.drawEllipse(QPointF(point.x, point.y), radius, radius)


def paint_stroke(painter: QPainter, stroke: Stroke):
    """Paint one stroke: polyline first, then the per-point discs."""
    paint_polyline(painter, stroke.points, stroke.color, stroke.width)
    paint_points(painter, stroke.points, stroke.color, stroke.width)


def create_blank_image(width_px: int, height_px: int) -> QImage:
    """Fully transparent ARGB image."""
    image = QImage(width_px, height_px, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))  # Transparent
    return image


def rasterize(
    strokes: Iterable[Stroke],
    width_px: int = Config.EXPORT_WIDTH,
    height_px: int = Config.EXPORT_HEIGHT
) -> QImage:
    """
    Render strokes into a new image.

    Stroke coordinates are used as-is; there is no scaling from the
    on-screen canvas size to the target size.

    Args:
        strokes: Strokes in commit order
        width_px: Image width
        height_px: Image height

    Returns:
        QImage (ARGB32) with transparent background
    """
    image = create_blank_image(width_px, height_px)

    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        for stroke in strokes:
            paint_stroke(painter, stroke)
    finally:
        painter.end()

    return image


__all__ = [
    'make_stroke_pen',
    'paint_polyline',
    'paint_points',
    'paint_stroke',
    'create_blank_image',
    'rasterize',
]
