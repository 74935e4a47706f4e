"""
Drag gesture events and their routing into the stroke model

The pointer-input layer reports DragStart -> DragMove* -> DragEnd; the
router turns those into begin/extend/commit calls, locking in the mixer
color and brush width at drag start.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Union

from ..models.canvas_state import CanvasState
from ..models.color_mixer import ColorMixer
from ..models.stroke import Point


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragStart:
    point: Point


@dataclass(frozen=True)
class DragMove:
    point: Point


@dataclass(frozen=True)
class DragEnd:
    pass


DragEvent = Union[DragStart, DragMove, DragEnd]


class GestureRouter:
    """
    Routes drag events to a CanvasState.

    Args:
        canvas_state: Stroke model to mutate
        color_mixer: Source of the stroke color
        width_provider: Callable returning the current brush width
    """

    def __init__(
        self,
        canvas_state: CanvasState,
        color_mixer: ColorMixer,
        width_provider: Callable[[], float]
    ):
        self._state = canvas_state
        self._mixer = color_mixer
        self._width_provider = width_provider

    def dispatch(self, event: DragEvent):
        """Apply one drag event."""
        if isinstance(event, DragStart):
            self._state.begin_stroke(
                event.point,
                self._mixer.current_color(),
                self._width_provider()
            )
        elif isinstance(event, DragMove):
            self._state.extend_stroke(event.point)
        elif isinstance(event, DragEnd):
            self._state.commit_stroke()
        else:
            raise TypeError(f"Unknown drag event: {event!r}")


__all__ = ['DragStart', 'DragMove', 'DragEnd', 'DragEvent', 'GestureRouter']
