"""Tests for the pure timing engine."""
import pytest

from core.animation import Animation, AnimationTimeline, RunState, evaluate


def _noop(ui, normal):
    pass


ONE_ONE = Animation.new(1.0, _noop, _noop)


def _assert_state(state, expected):
    assert state.phase is expected.phase
    assert state.normal == pytest.approx(expected.normal)


class TestEvaluate:

    @pytest.mark.parametrize("elapsed, expected", [
        (0.0, RunState.out_seg(0.0)),
        (0.5, RunState.out_seg(0.5)),
        (1.0, RunState.in_seg(0.0)),
        (1.5, RunState.in_seg(0.5)),
        (2.0, RunState.NONE),
        (10.0, RunState.NONE),
    ])
    def test_symmetric_animation(self, elapsed, expected):
        _assert_state(evaluate(10.0, 10.0 + elapsed, ONE_ONE), expected)

    @pytest.mark.parametrize("current, expected", [
        (1.75, RunState.out_seg(0.5)),
        (2.5, RunState.in_seg(0.0)),
        (3.25, RunState.in_seg(0.5)),
        (4.0, RunState.NONE),
        (5.0, RunState.NONE),
    ])
    def test_asymmetric_animation(self, current, expected):
        anim = Animation.new(1.0, _noop, _noop).with_durations(1.5, 1.5)
        _assert_state(evaluate(1.0, current, anim), expected)

    def test_zero_out_duration_starts_in_segment(self):
        anim = Animation.new_in(0.3, _noop)
        _assert_state(evaluate(0.0, 0.0, anim), RunState.in_seg(0.0))
        _assert_state(evaluate(0.0, 0.15, anim), RunState.in_seg(0.5))
        assert evaluate(0.0, 0.3, anim) == RunState.NONE

    def test_zero_in_duration_ends_after_out(self):
        anim = Animation.new_out(0.4, _noop)
        _assert_state(evaluate(0.0, 0.2, anim), RunState.out_seg(0.5))
        assert evaluate(0.0, 0.4, anim) == RunState.NONE

    def test_both_zero_is_immediately_done(self):
        assert evaluate(3.0, 3.0, Animation.EMPTY) == RunState.NONE

    def test_clock_before_start_is_clamped(self):
        _assert_state(evaluate(5.0, 4.0, ONE_ONE), RunState.out_seg(0.0))

    def test_progress_never_decreases(self):
        anim = Animation.new(1.0, _noop, _noop).with_durations(0.7, 1.3)
        states = [evaluate(0.0, step * 0.05, anim) for step in range(60)]
        assert states == sorted(states)
        for state in states:
            assert 0.0 <= state.normal < 1.0

    def test_terminal_state_is_stable(self):
        anim = Animation.new(0.5, _noop, _noop)
        for current in (1.0, 1.5, 100.0):
            assert evaluate(0.0, current, anim) == RunState.NONE


class TestAnimationTimeline:

    def test_boundaries(self):
        anim = Animation.new(1.0, _noop, _noop).with_durations(1.5, 0.5)
        timeline = AnimationTimeline(2.0, 2.0, anim)
        assert timeline.out_start == 2.0
        assert timeline.out_end == 3.5
        assert timeline.in_start == 3.5
        assert timeline.in_end == 4.0

    def test_elapsed_is_none_outside_segment(self):
        timeline = AnimationTimeline(0.0, 1.5, ONE_ONE)
        assert timeline.out_elapsed() is None
        assert timeline.out_elapsed_normal() is None
        assert timeline.in_elapsed() == pytest.approx(0.5)
        assert timeline.in_elapsed_normal() == pytest.approx(0.5)

    def test_zero_duration_segment_has_no_elapsed(self):
        timeline = AnimationTimeline(0.0, 0.0, Animation.new_in(1.0, _noop))
        assert timeline.out_elapsed() is None
        assert timeline.in_elapsed() == 0.0

    def test_run_state_matches_evaluate(self):
        timeline = AnimationTimeline(0.0, 0.25, ONE_ONE)
        assert timeline.run_state() == evaluate(0.0, 0.25, ONE_ONE)

    def test_repr_mentions_times(self):
        text = repr(AnimationTimeline(1.0, 2.0, ONE_ONE))
        assert "AnimationTimeline" in text
