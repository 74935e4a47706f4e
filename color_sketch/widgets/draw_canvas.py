"""
DrawCanvas - Freehand drawing surface

Translates left-button mouse press/move/release into DragStart /
DragMove / DragEnd events for the GestureRouter, and repaints from the
CanvasState whenever it changes. Committed strokes use the same painting
code as the exporter; the stroke being drawn is shown as discs only.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QColor

from ..config import Config
from ..core.gestures import DragStart, DragMove, DragEnd, GestureRouter
from ..core.rasterizer import paint_stroke, paint_points
from ..models.canvas_state import CanvasState
from ..models.stroke import Point


class DrawCanvas(QWidget):
    """
    Drawing surface bound to a CanvasState.

    Args:
        canvas_state: Stroke model rendered by this widget
        router: Gesture router feeding the same CanvasState
    """

    def __init__(self, canvas_state: CanvasState, router: GestureRouter,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._state = canvas_state
        self._router = router
        self._dragging = False

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMouseTracking(False)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self._state.changed.connect(self.update)

    @property
    def canvas_state(self) -> CanvasState:
        return self._state

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._dragging = True
            self._router.dispatch(DragStart(Point.from_qpoint(event.position())))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._dragging:
            self._router.dispatch(DragMove(Point.from_qpoint(event.position())))
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._dragging and event.button() == Qt.MouseButton.LeftButton:
            self._dragging = False
            self._router.dispatch(DragEnd())
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.fillRect(self.rect(), QColor(Config.CANVAS_BACKGROUND))

            for stroke in self._state.strokes:
                paint_stroke(painter, stroke)

            current = self._state.in_progress
            if current is not None:
                points, color, width = current
                paint_points(painter, points, color, width)
        finally:
            painter.end()


__all__ = ['DrawCanvas']
