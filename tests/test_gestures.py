"""Tests for drag gesture routing."""

import pytest

from color_sketch.core.gestures import DragEnd, DragMove, DragStart, GestureRouter
from color_sketch.models.canvas_state import CanvasState
from color_sketch.models.color_mixer import Channel, ColorMixer
from color_sketch.models.stroke import Point, RGBColor


class Width:
    """Mutable brush width source."""

    def __init__(self, value: float = 4.0):
        self.value = value

    def __call__(self) -> float:
        return self.value


@pytest.fixture
def setup():
    state = CanvasState()
    mixer = ColorMixer()
    width = Width()
    return state, mixer, width, GestureRouter(state, mixer, width)


def drag(router, start, moves):
    router.dispatch(DragStart(start))
    for point in moves:
        router.dispatch(DragMove(point))
    router.dispatch(DragEnd())


class TestGestureRouter:

    def test_drag_commits_one_stroke(self, setup):
        state, _, _, router = setup
        drag(router, Point(0, 0), [Point(1, 0), Point(2, 0), Point(3, 0)])
        assert state.stroke_count == 1
        assert state.strokes[0].point_count == 4

    def test_tap_gives_single_point_stroke(self, setup):
        state, _, _, router = setup
        drag(router, Point(7, 7), [])
        assert state.strokes[0].points == (Point(7, 7),)

    def test_color_and_width_read_at_start(self, setup):
        state, mixer, width, router = setup
        mixer.set_channel(Channel.RED, 1.0)
        width.value = 9.0

        router.dispatch(DragStart(Point(0, 0)))
        # Changes mid-drag do not affect the stroke in progress
        mixer.set_channel(Channel.BLUE, 1.0)
        width.value = 2.0
        router.dispatch(DragMove(Point(5, 5)))
        router.dispatch(DragEnd())

        stroke = state.strokes[0]
        assert stroke.color == RGBColor(255, 0, 0)
        assert stroke.width == 9.0

    def test_next_stroke_uses_new_settings(self, setup):
        state, mixer, width, router = setup
        drag(router, Point(0, 0), [])
        mixer.set_channel(Channel.GREEN, 1.0)
        width.value = 12.0
        drag(router, Point(1, 1), [])

        first, second = state.strokes
        assert first.color == RGBColor(0, 0, 0)
        assert second.color == RGBColor(0, 255, 0)
        assert second.width == 12.0

    def test_moves_without_start_are_ignored(self, setup):
        state, _, _, router = setup
        router.dispatch(DragMove(Point(1, 1)))
        router.dispatch(DragEnd())
        assert state.stroke_count == 0

    def test_unknown_event(self, setup):
        _, _, _, router = setup
        with pytest.raises(TypeError):
            router.dispatch("tap")
