"""
EventBus - Central event system for application-wide state

Pattern: Observer/Publisher-Subscriber
Holds the brush width chosen in the toolbar and relays export outcomes
so widgets do not need references to each other.
"""

from PyQt6.QtCore import QObject, pyqtSignal
from typing import Optional

from ..config import Config


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    Usage:
        event_bus = EventBus()
        event_bus.stroke_width_changed.connect(some_handler)
        event_bus.set_stroke_width(8.0)
    """

    # Brush events
    stroke_width_changed = pyqtSignal(float)  # width in pixels

    # Canvas events
    clear_requested = pyqtSignal()
    export_requested = pyqtSignal()

    # Export events
    export_finished = pyqtSignal(str)  # file path

    # Error events
    error_occurred = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self):
        super().__init__()

        # State storage
        self._stroke_width: float = Config.DEFAULT_STROKE_WIDTH

    # Getters (read current state)

    def get_stroke_width(self) -> float:
        """Get current brush width"""
        return self._stroke_width

    # Setters (update state and emit signals)

    def set_stroke_width(self, width: float):
        """
        Set brush width for new strokes

        Args:
            width: Width in pixels (clamped to the configured range)
        """
        width = max(Config.MIN_STROKE_WIDTH, min(Config.MAX_STROKE_WIDTH, float(width)))
        if self._stroke_width != width:
            self._stroke_width = width
            self.stroke_width_changed.emit(width)

    # Convenience methods

    def request_clear(self):
        """Ask the canvas to drop all committed strokes"""
        self.clear_requested.emit()

    def request_export(self):
        """Ask for the current drawing to be exported"""
        self.export_requested.emit()

    def report_export_finished(self, path: str):
        """Signal that a drawing was written to disk"""
        self.export_finished.emit(path)

    def report_error(self, error_type: str, message: str):
        """
        Report an error to the UI

        Args:
            error_type: Type of error (e.g., "export", "permission")
            message: Human-readable error message
        """
        self.error_occurred.emit(error_type, message)


# Singleton instance (lazy initialization)
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


# Export
__all__ = ['EventBus', 'get_event_bus']
