"""Time-driven helpers: animation tracking, clocks, timers, transitions and shakes."""

from __future__ import annotations

import math
import random
import threading
from dataclasses import dataclass


class Animation:
    """A token that keeps the application in its animating loop while it is alive."""

    _count = 0
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._active = False
        with Animation._lock:
            Animation._count += 1
        self._active = True

    @classmethod
    def has(cls) -> bool:
        """Whether any animation is alive."""
        return cls._count > 0

    def release(self) -> None:
        """Stop counting this animation; calling it again does nothing."""
        if not self._active:
            return
        self._active = False
        with Animation._lock:
            Animation._count -= 1

    def __enter__(self) -> Animation:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        if getattr(self, "_active", False):
            self.release()


class Clock:
    """Turns elapsed time into ticks at a fixed rate."""

    def __init__(self, tps: float) -> None:
        self._tps = tps
        self._period = 1.0 / tps if tps else math.inf
        self._accumulator = 0.0
        self._animation = Animation()

    @property
    def tps(self) -> float:
        """Ticks per second."""
        return self._tps

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return True when a tick is due."""
        self._accumulator += dt
        if self._accumulator < self._period:
            return False
        self._accumulator -= self._period
        return True

    def _release(self) -> None:
        self._animation.release()


class Timer:
    """Counts up to a duration, then expires."""

    def __init__(self, duration: float) -> None:
        self._duration = duration
        self._accumulator = 0.0
        self._animation = Animation()

    @property
    def progress(self) -> float:
        """Elapsed fraction of the duration."""
        if self._duration:
            return self._accumulator / self._duration
        if self._accumulator == 0:
            return math.nan
        return math.copysign(math.inf, self._accumulator)

    def update(self, dt: float) -> Timer | None:
        """Advance by ``dt``; return the timer while running, None once expired."""
        self._accumulator += dt
        if self._accumulator < self._duration:
            return self
        self._animation.release()
        return None


@dataclass(frozen=True)
class Idle:
    """A finished transition resting at its final value."""

    now: float


class Transition:
    """Linear interpolation from one value to another over a duration."""

    def __init__(self, from_: float, to: float, duration: float = 1.0) -> None:
        self._timer: Timer | None = Timer(duration)
        self._from = from_
        self._to = to
        self._now = from_

    @property
    def now(self) -> float:
        """The current value."""
        return self._now

    def update(self, dt: float) -> Transition | Idle:
        """Advance by ``dt``; return the running transition or an Idle at the target."""
        timer = self._timer.update(dt) if self._timer is not None else None
        if timer is None:
            self._timer = None
            return Idle(self._to)
        self._now = timer.progress * (self._to - self._from) + self._from
        return self


class ShakeAnimation:
    """Random jitter of a given strength, refreshed at a fixed rate for a duration."""

    def __init__(
        self,
        duration: float = 1.0,
        strength: float = 4.0,
        tps: float = 30.0,
        rng: random.Random | None = None,
    ) -> None:
        self._timer = Timer(duration)
        self._strength = strength
        self._clock = Clock(tps)
        self._rng = rng if rng is not None else random.Random()
        self._translation = (0.0, 0.0)

    @property
    def translation(self) -> tuple[float, float]:
        """The current offset."""
        return self._translation

    def update(self, dt: float) -> ShakeAnimation | None:
        """Advance by ``dt``; return the animation while running, None once finished."""
        if self._timer.update(dt) is None:
            self._clock._release()
            return None
        if not self._clock.update(dt):
            return self
        strength = self._rng.random() * self._strength
        angle = self._rng.random() * math.tau
        self._translation = (math.cos(angle) * strength, math.sin(angle) * strength)
        return self