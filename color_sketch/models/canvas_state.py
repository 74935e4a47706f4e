"""
CanvasState - In-memory stroke model

Owns the ordered sequence of committed strokes plus the single stroke
being built from the active drag gesture. Widgets observe it through Qt
signals instead of polling.
"""

import logging
from typing import Optional, List, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from .stroke import Point, RGBColor, Stroke


logger = logging.getLogger(__name__)


class CanvasState(QObject):
    """
    Stroke model for one drawing session

    Usage:
        state = CanvasState()
        state.begin_stroke(Point(10, 10), RGBColor(255, 0, 0), 4.0)
        state.extend_stroke(Point(20, 10))
        state.commit_stroke()
    """

    # Signals
    stroke_started = pyqtSignal()
    stroke_extended = pyqtSignal()
    stroke_committed = pyqtSignal(object)  # Stroke
    strokes_cleared = pyqtSignal()
    changed = pyqtSignal()  # Any mutation

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._strokes: List[Stroke] = []

        # In-progress stroke
        self._current_points: List[Point] = []
        self._current_color: Optional[RGBColor] = None
        self._current_width: float = 0.0
        self._is_drawing = False

    # ==================== Properties ====================

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        """Committed strokes in commit order."""
        return tuple(self._strokes)

    @property
    def stroke_count(self) -> int:
        return len(self._strokes)

    @property
    def is_drawing(self) -> bool:
        return self._is_drawing

    @property
    def in_progress(self) -> Optional[Tuple[Tuple[Point, ...], RGBColor, float]]:
        """(points, color, width) of the stroke being drawn, or None."""
        if not self._is_drawing:
            return None
        return tuple(self._current_points), self._current_color, self._current_width

    def snapshot(self) -> Tuple[Stroke, ...]:
        """Copy of the committed sequence, safe to hand to the rasterizer."""
        return tuple(self._strokes)

    # ==================== Mutation ====================

    def begin_stroke(self, start_point: Point, color: RGBColor, width: float):
        """
        Start a new in-progress stroke.

        Any previous uncommitted stroke is discarded, not committed.

        Args:
            start_point: First point of the stroke
            color: Color for the whole stroke
            width: Line width for the whole stroke
        """
        if self._is_drawing:
            logger.debug(
                "Discarding uncommitted stroke with %d points", len(self._current_points)
            )

        self._current_points = [start_point]
        self._current_color = color
        self._current_width = float(width)
        self._is_drawing = True

        self.stroke_started.emit()
        self.changed.emit()

    def extend_stroke(self, point: Point):
        """Append a point to the in-progress stroke. Ignored when idle."""
        if not self._is_drawing:
            logger.debug("extend_stroke ignored: no stroke in progress")
            return

        self._current_points.append(point)
        self.stroke_extended.emit()
        self.changed.emit()

    def commit_stroke(self) -> Optional[Stroke]:
        """
        Freeze the in-progress stroke and append it to the committed list.

        Returns:
            The committed Stroke, or None if nothing was in progress
        """
        if not self._is_drawing:
            return None

        stroke = Stroke.create(self._current_points, self._current_color, self._current_width)
        self._strokes.append(stroke)
        self._reset_current()

        logger.debug(
            "Committed stroke #%d (%d points, width %.1f, color %s)",
            len(self._strokes), stroke.point_count, stroke.width, stroke.color.to_hex()
        )
        self.stroke_committed.emit(stroke)
        self.changed.emit()
        return stroke

    def clear_all(self):
        """Remove all committed strokes. The in-progress stroke is kept."""
        count = len(self._strokes)
        self._strokes.clear()

        logger.info("Cleared %d strokes", count)
        self.strokes_cleared.emit()
        self.changed.emit()

    def _reset_current(self):
        self._current_points = []
        self._current_color = None
        self._current_width = 0.0
        self._is_drawing = False


__all__ = ['CanvasState']
