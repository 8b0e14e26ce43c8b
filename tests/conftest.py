"""Pytest fixtures for shake tests."""

from random import Random

import pytest

from shake.render_step import RenderStep
from shake.shake import Shake
from shake.signals import Signal


class ManualClock:
    """Time source that only moves when told to."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def constant_noise(value: float):
    """Build a noise function that ignores its inputs."""

    def sample(x: float, y: float) -> float:
        return value

    return sample


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def clock():
    """Manually advanced clock starting at t=100s."""
    return ManualClock()


@pytest.fixture
def shake(clock, rng):
    """Default one-second fades, constant 0.5 noise, manual clock."""
    return Shake(
        amplitude=1.0,
        frequency=1.0,
        fade_in_time=1.0,
        fade_out_time=1.0,
        sustain=False,
        sustain_time=0.0,
        noise_function=constant_noise(0.5),
        time_function=clock,
        rng=rng,
        debug=False,
    )


@pytest.fixture
def unit_shake(clock, rng):
    """Shake whose raw offset is exactly 1 per axis, so outputs equal the envelope."""
    return Shake(
        amplitude=1.0,
        frequency=1.0,
        fade_in_time=1.0,
        fade_out_time=1.0,
        sustain_time=0.0,
        noise_function=constant_noise(2.0),
        time_function=clock,
        rng=rng,
        debug=False,
    )


@pytest.fixture
def signal():
    """A fresh signal."""
    return Signal()


@pytest.fixture
def render_step():
    """A private render step registry."""
    return RenderStep()


@pytest.fixture
def make_shake(clock, rng):
    """Factory for shakes on the manual clock with constant noise."""

    def factory(noise_value: float = 0.5, **overrides) -> Shake:
        settings = dict(
            amplitude=1.0,
            frequency=1.0,
            fade_in_time=1.0,
            fade_out_time=1.0,
            sustain_time=0.0,
            noise_function=constant_noise(noise_value),
            time_function=clock,
            rng=rng,
            debug=False,
        )
        settings.update(overrides)
        return Shake(**settings)

    return factory
