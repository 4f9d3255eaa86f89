import math
import random

import pytest

from flut.helpers import Animation, Clock, Idle, ShakeAnimation, Timer, Transition


def test_animation_counts_while_alive():
    before = Animation._count
    animation = Animation()
    assert Animation._count == before + 1
    assert Animation.has()
    animation.release()
    assert Animation._count == before


def test_animation_release_is_idempotent():
    before = Animation._count
    animation = Animation()
    assert Animation.has() is True
    animation.release()
    animation.release()
    assert Animation._count == before
    assert Animation.has() == (before > 0)


def test_animation_context_manager_releases():
    before = Animation._count
    with Animation():
        assert Animation.has() is True
        assert Animation._count == before + 1
    assert Animation._count == before
    assert Animation.has() == (before > 0)


def test_clock_ticks_after_period():
    clock = Clock(4.0)
    assert clock.tps == 4.0
    assert clock.update(0.1) is False
    assert clock.update(0.2) is True
    assert clock.update(0.1) is False


def test_timer_progress_and_expiry():
    before = Animation._count
    timer = Timer(1.0)
    assert timer.update(0.25) is timer
    assert timer.progress == pytest.approx(0.25)
    assert timer.update(1.0) is None
    assert Animation._count == before


def test_transition_starts_at_from_and_moves():
    transition = Transition(0.0, 10.0, duration=1.0)
    assert transition.now == 0.0
    moved = transition.update(0.5)
    assert isinstance(moved, Transition)
    assert moved.now == pytest.approx(5.0)


def test_transition_finishes_idle_at_target():
    transition = Transition(2.0, 8.0, duration=0.5)
    result = transition.update(0.6)
    assert result == Idle(8.0)
    assert result.now == 8.0


def test_shake_starts_still():
    shake = ShakeAnimation(rng=random.Random(1))
    assert shake.translation == (0.0, 0.0)


def test_shake_offset_bounded_by_strength():
    shake = ShakeAnimation(duration=10.0, strength=3.0, tps=100.0, rng=random.Random(7))
    for _ in range(50):
        shake = shake.update(0.02)
        assert shake is not None
        dx, dy = shake.translation
        assert math.hypot(dx, dy) <= 3.0 + 1e-9


def test_shake_ends_and_releases_animations():
    before = Animation._count
    shake = ShakeAnimation(duration=0.1, rng=random.Random(3))
    assert Animation._count == before + 2
    assert shake.update(0.2) is None
    assert Animation._count == before