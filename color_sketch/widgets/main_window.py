"""
MainWindow - Single-screen drawing window

Layout:
    Draw Something
    [ color swatch + R/G/B sliders ]
    [          draw canvas          ]
    [Clear] [---- width ----] [Save]
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt6.QtGui import QFont

from ..config import Config
from ..core.gestures import GestureRouter
from ..events.event_bus import EventBus, get_event_bus
from ..models.canvas_state import CanvasState
from ..models.color_mixer import ColorMixer
from ..services.export_service import ExportService
from ..services.permissions import StoragePermission, ExternalStoragePermission
from .brush_toolbar import BrushToolbar
from .color_picker import ColorPicker
from .draw_canvas import DrawCanvas


logger = logging.getLogger(__name__)

STATUS_MESSAGE_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """
    Main application window

    Owns the session state (CanvasState, ColorMixer) and the export
    service, and wires them to the widgets through the event bus.
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        event_bus: Optional[EventBus] = None,
        permission: Optional[StoragePermission] = None,
        export_service: Optional[ExportService] = None
    ):
        super().__init__(parent)

        # Services (injectable for testing)
        self._event_bus = event_bus or get_event_bus()
        if export_service is None:
            permission = permission or ExternalStoragePermission(Config.get_export_folder(), self)
            export_service = ExportService(permission, Config.get_export_folder(), parent=self)
        self._export_service = export_service

        # Session state
        self._canvas_state = CanvasState(self)
        self._color_mixer = ColorMixer(parent=self)
        self._router = GestureRouter(
            self._canvas_state,
            self._color_mixer,
            self._event_bus.get_stroke_width
        )

        self._setup_window()
        self._create_widgets()
        self._create_layout()
        self._connect_signals()

    def _setup_window(self):
        self.setWindowTitle(Config.APP_NAME)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _create_widgets(self):
        self._title_label = QLabel(Config.WINDOW_TITLE)
        title_font = QFont()
        title_font.setPointSize(18)
        title_font.setBold(True)
        self._title_label.setFont(title_font)

        self._color_picker = ColorPicker(self._color_mixer)
        self._draw_canvas = DrawCanvas(self._canvas_state, self._router)
        self._brush_toolbar = BrushToolbar(event_bus=self._event_bus)

    def _create_layout(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        title_layout = QVBoxLayout()
        title_layout.setContentsMargins(16, 16, 16, 16)
        title_layout.addWidget(self._title_label)
        layout.addLayout(title_layout)

        layout.addWidget(self._color_picker)
        layout.addWidget(self._draw_canvas, 1)
        layout.addWidget(self._brush_toolbar)

        self.setCentralWidget(central)

    def _connect_signals(self):
        self._event_bus.clear_requested.connect(self._canvas_state.clear_all)
        self._event_bus.export_requested.connect(self.export_drawing)

        self._export_service.export_finished.connect(self._on_export_finished)
        self._export_service.export_failed.connect(self._on_export_failed)
        self._export_service.permission_requested.connect(self._on_permission_requested)

    # ==================== Accessors ====================

    @property
    def canvas_state(self) -> CanvasState:
        return self._canvas_state

    @property
    def color_mixer(self) -> ColorMixer:
        return self._color_mixer

    @property
    def router(self) -> GestureRouter:
        return self._router

    @property
    def draw_canvas(self) -> DrawCanvas:
        return self._draw_canvas

    @property
    def color_picker(self) -> ColorPicker:
        return self._color_picker

    @property
    def brush_toolbar(self) -> BrushToolbar:
        return self._brush_toolbar

    # ==================== Actions ====================

    def export_drawing(self):
        """Export the committed strokes as it stands right now."""
        self._export_service.export_drawing(self._canvas_state.snapshot())

    def _on_export_finished(self, path: str):
        self.statusBar().showMessage(f"Saved {path}", STATUS_MESSAGE_TIMEOUT_MS)
        self._event_bus.report_export_finished(path)

    def _on_export_failed(self, message: str):
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)
        self._event_bus.report_error("export", message)

    def _on_permission_requested(self):
        self.statusBar().showMessage("Waiting for storage permission...")

    def closeEvent(self, event):
        logger.info("Closing with %d strokes", self._canvas_state.stroke_count)
        super().closeEvent(event)


__all__ = ['MainWindow']
