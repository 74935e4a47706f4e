"""Tests for the stroke model."""

import pytest

from color_sketch.models.canvas_state import CanvasState
from color_sketch.models.stroke import Point, RGBColor, Stroke


RED = RGBColor(255, 0, 0)
BLUE = RGBColor(0, 0, 255)


def draw_gesture(state, start, moves, color=RED, width=4.0):
    """Run one begin / extend* / commit sequence."""
    state.begin_stroke(start, color, width)
    for point in moves:
        state.extend_stroke(point)
    return state.commit_stroke()


class TestStrokeValueObject:

    def test_empty_points_rejected(self):
        with pytest.raises(ValueError):
            Stroke((), RED, 4.0)

    def test_non_positive_width_rejected(self):
        with pytest.raises(ValueError):
            Stroke((Point(0, 0),), RED, 0)

    def test_stroke_is_frozen(self):
        stroke = Stroke.create([Point(1, 2)], RED, 3)
        with pytest.raises(AttributeError):
            stroke.width = 10

    def test_create_copies_points(self):
        points = [Point(1, 1), Point(2, 2)]
        stroke = Stroke.create(points, RED, 3)
        points.append(Point(3, 3))
        assert stroke.point_count == 2

    def test_color_channel_range(self):
        with pytest.raises(ValueError):
            RGBColor(256, 0, 0)

    def test_color_hex(self):
        assert RGBColor(255, 87, 51).to_hex() == "#ff5733"
        assert RGBColor.from_hex("#ff5733") == RGBColor(255, 87, 51)


class TestBeginExtendCommit:

    def test_point_count_matches_moves_plus_one(self):
        state = CanvasState()
        gestures = [0, 1, 5, 12]
        for i, move_count in enumerate(gestures):
            moves = [Point(i, j) for j in range(move_count)]
            draw_gesture(state, Point(i, -1), moves)

        assert state.stroke_count == len(gestures)
        for stroke, move_count in zip(state.strokes, gestures):
            assert stroke.point_count == move_count + 1

    def test_points_keep_drawing_order(self):
        state = CanvasState()
        moves = [Point(20, 10), Point(30, 10), Point(25, 40)]
        stroke = draw_gesture(state, Point(10, 10), moves)
        assert stroke.points == (Point(10, 10),) + tuple(moves)

    def test_color_and_width_locked_at_start(self):
        state = CanvasState()
        stroke = draw_gesture(state, Point(0, 0), [Point(1, 1)], color=BLUE, width=7.5)
        assert stroke.color == BLUE
        assert stroke.width == 7.5

    def test_commit_order_preserved(self):
        state = CanvasState()
        first = draw_gesture(state, Point(0, 0), [], color=RED)
        second = draw_gesture(state, Point(5, 5), [], color=BLUE)
        assert state.strokes == (first, second)

    def test_begin_discards_uncommitted_stroke(self):
        state = CanvasState()
        state.begin_stroke(Point(0, 0), RED, 4)
        state.extend_stroke(Point(1, 1))
        state.begin_stroke(Point(50, 50), BLUE, 2)
        stroke = state.commit_stroke()

        assert state.stroke_count == 1
        assert stroke.points == (Point(50, 50),)
        assert stroke.color == BLUE

    def test_extend_without_stroke_is_ignored(self):
        state = CanvasState()
        state.extend_stroke(Point(3, 3))
        assert not state.is_drawing
        assert state.stroke_count == 0

    def test_commit_without_stroke_is_noop(self):
        state = CanvasState()
        assert state.commit_stroke() is None
        assert state.stroke_count == 0

    def test_commit_clears_in_progress(self):
        state = CanvasState()
        state.begin_stroke(Point(0, 0), RED, 4)
        assert state.in_progress is not None
        state.commit_stroke()
        assert state.in_progress is None
        assert not state.is_drawing

    def test_in_progress_view(self):
        state = CanvasState()
        state.begin_stroke(Point(0, 0), RED, 4)
        state.extend_stroke(Point(2, 0))
        points, color, width = state.in_progress
        assert points == (Point(0, 0), Point(2, 0))
        assert color == RED
        assert width == 4.0


class TestClearAll:

    def test_clear_empties_committed(self):
        state = CanvasState()
        draw_gesture(state, Point(0, 0), [Point(1, 1)])
        draw_gesture(state, Point(2, 2), [])
        state.clear_all()
        assert state.strokes == ()

    def test_clear_on_empty_state(self):
        state = CanvasState()
        state.clear_all()
        assert state.stroke_count == 0

    def test_clear_keeps_in_progress_stroke(self):
        state = CanvasState()
        draw_gesture(state, Point(0, 0), [])
        state.begin_stroke(Point(10, 10), BLUE, 3)
        state.extend_stroke(Point(11, 10))

        state.clear_all()
        stroke = state.commit_stroke()

        assert state.strokes == (stroke,)
        assert stroke.points == (Point(10, 10), Point(11, 10))


class TestSnapshotAndSignals:

    def test_snapshot_is_independent_of_later_commits(self):
        state = CanvasState()
        draw_gesture(state, Point(0, 0), [])
        snapshot = state.snapshot()
        draw_gesture(state, Point(1, 1), [])
        assert len(snapshot) == 1
        assert state.stroke_count == 2

    def test_signals_emitted(self, record):
        state = CanvasState()
        started = record(state.stroke_started)
        extended = record(state.stroke_extended)
        committed = record(state.stroke_committed)
        cleared = record(state.strokes_cleared)
        changed = record(state.changed)

        stroke = draw_gesture(state, Point(0, 0), [Point(1, 0), Point(2, 0)])
        state.clear_all()

        assert started.count == 1
        assert extended.count == 2
        assert committed.calls == [(stroke,)]
        assert cleared.count == 1
        assert changed.count == 5

    def test_ignored_calls_do_not_emit(self, record):
        state = CanvasState()
        changed = record(state.changed)
        state.extend_stroke(Point(0, 0))
        state.commit_stroke()
        assert changed.count == 0
