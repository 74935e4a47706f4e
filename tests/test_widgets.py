"""Tests for the drawing window and its widgets."""

import pytest
from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QColor, QMouseEvent

from color_sketch.events.event_bus import EventBus
from color_sketch.models.color_mixer import Channel, ColorMixer
from color_sketch.models.stroke import Point, RGBColor
from color_sketch.services.export_service import ExportService
from color_sketch.widgets.color_picker import ColorPicker, ColorSlider


def mouse_event(kind, x, y, buttons=Qt.MouseButton.LeftButton):
    button = Qt.MouseButton.LeftButton
    pos = QPointF(x, y)
    return QMouseEvent(kind, pos, pos, button, buttons, Qt.KeyboardModifier.NoModifier)


def drag_on(canvas, points):
    (x, y), rest = points[0], points[1:]
    canvas.mousePressEvent(mouse_event(QEvent.Type.MouseButtonPress, x, y))
    for x, y in rest:
        canvas.mouseMoveEvent(mouse_event(QEvent.Type.MouseMove, x, y))
    x, y = points[-1]
    canvas.mouseReleaseEvent(
        mouse_event(QEvent.Type.MouseButtonRelease, x, y, Qt.MouseButton.NoButton)
    )


@pytest.fixture
def window(tmp_path, fake_permission):
    from color_sketch.widgets.main_window import MainWindow

    bus = EventBus()
    service = ExportService(fake_permission, tmp_path, clock=lambda: 1.0)
    win = MainWindow(event_bus=bus, export_service=service)
    win.resize(480, 860)
    yield win
    win.close()


class TestColorSlider:

    def test_value_and_label(self, record):
        slider = ColorSlider("R", "#ff0000")
        changed = record(slider.value_changed)
        slider.set_value(0.5)
        assert slider.value == 0.5
        assert slider.display_text == "128"
        assert changed.calls == [(0.5,)]

    def test_initial_value(self):
        slider = ColorSlider("G", "#00ff00", value=1.0)
        assert slider.display_text == "255"


class TestColorPicker:

    def test_sliders_drive_mixer(self):
        mixer = ColorMixer()
        picker = ColorPicker(mixer)
        picker.slider(Channel.RED).set_value(1.0)
        picker.slider("blue").set_value(0.2)
        assert mixer.current_color() == RGBColor(255, 0, 51)

    def test_swatch_follows_mixer(self):
        mixer = ColorMixer()
        picker = ColorPicker(mixer)
        assert picker.swatch_color == "#000000"
        picker.slider(Channel.GREEN).set_value(1.0)
        assert picker.swatch_color == "#00ff00"

    def test_sliders_start_at_mixer_values(self):
        picker = ColorPicker(ColorMixer(red=1.0))
        assert picker.slider(Channel.RED).value == 1.0


class TestDrawCanvas:

    def test_mouse_drag_commits_stroke(self, window):
        drag_on(window.draw_canvas, [(10, 10), (20, 10), (30, 10)])
        state = window.canvas_state
        assert state.stroke_count == 1
        assert state.strokes[0].points == (Point(10, 10), Point(20, 10), Point(30, 10))

    def test_stroke_uses_mixer_color_and_bus_width(self, window):
        window.color_mixer.set_channel(Channel.BLUE, 1.0)
        window.brush_toolbar.width_slider.setValue(window.brush_toolbar.width_slider.maximum())

        drag_on(window.draw_canvas, [(5, 5), (6, 6)])

        stroke = window.canvas_state.strokes[0]
        assert stroke.color == RGBColor(0, 0, 255)
        assert stroke.width == pytest.approx(20.0)

    def test_right_button_does_not_draw(self, window):
        canvas = window.draw_canvas
        canvas.mousePressEvent(QMouseEvent(
            QEvent.Type.MouseButtonPress, QPointF(5, 5), QPointF(5, 5),
            Qt.MouseButton.RightButton, Qt.MouseButton.RightButton,
            Qt.KeyboardModifier.NoModifier
        ))
        assert not window.canvas_state.is_drawing

    def test_repaint_shows_committed_stroke(self, window):
        canvas = window.draw_canvas
        canvas.resize(100, 100)
        window.color_mixer.set_channel(Channel.RED, 1.0)
        window.brush_toolbar.width_slider.setValue(window.brush_toolbar.width_slider.maximum())
        drag_on(canvas, [(20, 50), (80, 50)])

        image = canvas.grab().toImage()
        assert image.pixelColor(50, 50) == QColor(255, 0, 0)
        assert image.pixelColor(50, 5) == QColor("#ffffff")


class TestMainWindow:

    def test_title(self, window):
        assert window._title_label.text() == "Draw Something"

    def test_clear_button_clears_strokes(self, window):
        drag_on(window.draw_canvas, [(1, 1), (2, 2)])
        window.brush_toolbar._clear_btn.click()
        assert window.canvas_state.stroke_count == 0

    def test_save_button_writes_png(self, window, tmp_path, record):
        finished = record(window._event_bus.export_finished)
        drag_on(window.draw_canvas, [(10, 10), (30, 10)])

        window.brush_toolbar._save_btn.click()

        expected = tmp_path / "drawing_1000.png"
        assert expected.exists()
        assert finished.calls == [(str(expected),)]
        assert str(expected) in window.statusBar().currentMessage()

    def test_failed_export_reported_on_bus(self, tmp_path, fake_permission, record):
        from color_sketch.widgets.main_window import MainWindow

        bus = EventBus()
        service = ExportService(fake_permission, tmp_path / "missing")
        win = MainWindow(event_bus=bus, export_service=service)
        errors = record(bus.error_occurred)

        win.export_drawing()

        assert len(errors.calls) == 1
        assert errors.calls[0][0] == "export"
        win.close()

    def test_waiting_for_permission_message(self, tmp_path, fake_permission):
        from color_sketch.widgets.main_window import MainWindow

        fake_permission.granted = False
        service = ExportService(fake_permission, tmp_path / "shared")
        win = MainWindow(event_bus=EventBus(), export_service=service)

        win.export_drawing()

        assert "permission" in win.statusBar().currentMessage().lower()
        win.close()
