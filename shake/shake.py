"""Noise-driven shake with a fade-in / sustain / fade-out envelope.

A ``Shake`` turns elapsed time into a pair of 3D offsets (position and
rotation) that can be applied to a camera or any other transform. It never
drives itself: call ``update()`` once per frame, or bind it to a signal or
render step and let that do the calling.

Time constants (``frequency``, ``fade_in_time``, ``fade_out_time``) must be
strictly positive. They are not checked on the hot path; a zero or negative
value produces inf/nan offsets. Enable debug mode to have ``update()``
validate them.
"""

import logging
import math
from enum import Enum, auto
from random import Random
from typing import Callable, Optional, Tuple

from shake.clock import default_time_function
from shake.config import config
from shake.janitor import Janitor
from shake.noise import noise
from shake.render_step import RenderStep, get_render_step
from shake.signals import Connectable, Disconnectable
from shake.vector import Vector3

logger = logging.getLogger(__name__)

# Keeps noise input small enough for noise functions with limited precision
NOISE_INPUT_WRAP = 1_000_000

TIME_OFFSET_RANGE = 1e9

# Type aliases
NoiseFunction = Callable[[float, float], float]
TimeFunction = Callable[[], float]
ShakeUpdate = Tuple[Vector3, Vector3, bool]
OnUpdate = Callable[[Vector3, Vector3, bool], None]

_random = Random()
_render_id = 0


def _divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan for a zero divisor instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def inverse_square(origin: Vector3, distance: float) -> Vector3:
    """Scale a vector by inverse-square falloff from a source.

    Useful for weakening a shake with distance from e.g. an explosion.

    Args:
        origin: Vector to scale
        distance: Distance from the source (values below 1 count as 1)

    Returns:
        ``origin`` scaled by ``1 / distance**2``
    """
    if distance < 1:
        distance = 1
    intensity = 1 / (distance * distance)
    return origin * intensity


def next_render_name() -> str:
    """Return a unique name for ``Shake.bind_to_render_step``."""
    global _render_id
    _render_id += 1
    return f"__shake_{_render_id:04d}__"


class ShakeState(Enum):
    """Position of a shake along its envelope."""

    IDLE = auto()
    FADING_IN = auto()
    SUSTAINING = auto()
    FADING_OUT = auto()
    STOPPED = auto()


class Shake:
    """Procedural shake effect.

    Configuration attributes may be changed at any time, including while the
    shake is running. Each instance runs at most once: after it stops (by
    completing, ``stop()`` or ``destroy()``) use ``clone()`` to get a fresh
    instance with the same settings.

    A shake is not thread-safe; keep each instance on one thread.
    """

    def __init__(
        self,
        *,
        amplitude: Optional[float] = None,
        frequency: Optional[float] = None,
        fade_in_time: Optional[float] = None,
        fade_out_time: Optional[float] = None,
        sustain: bool = False,
        sustain_time: Optional[float] = None,
        position_influence: Vector3 = Vector3.ONE,
        rotation_influence: Vector3 = Vector3.ONE,
        noise_function: NoiseFunction = noise,
        time_function: Optional[TimeFunction] = None,
        rng: Optional[Random] = None,
        debug: Optional[bool] = None,
    ) -> None:
        """
        Create a shake. Unset numeric settings come from ``config.shake``.

        Args:
            amplitude: Peak magnitude of the output offsets
            frequency: Speed of the shake; higher is faster
            fade_in_time: Seconds to ramp from zero to full amplitude
            fade_out_time: Seconds to ramp from full amplitude to zero
            sustain: Hold at full amplitude until ``stop_sustain()``
            sustain_time: Seconds at full amplitude between the fades
            position_influence: Per-axis multiplier for the position output
            rotation_influence: Per-axis multiplier for the rotation output
            noise_function: Coherent noise sampler taking two floats
            time_function: Monotonic clock returning seconds (defaults to
                ``default_time_function()``, chosen once here)
            rng: Source of the per-instance time offset
            debug: Validate time constants on every update
        """
        defaults = config.shake

        self.amplitude = defaults.amplitude if amplitude is None else amplitude
        self.frequency = defaults.frequency if frequency is None else frequency
        self.fade_in_time = defaults.fade_in_time if fade_in_time is None else fade_in_time
        self.fade_out_time = (
            defaults.fade_out_time if fade_out_time is None else fade_out_time
        )
        self.sustain = sustain
        self.sustain_time = defaults.sustain_time if sustain_time is None else sustain_time
        self.position_influence = position_influence
        self.rotation_influence = rotation_influence
        self.noise_function = noise_function
        self.time_function = time_function or default_time_function()
        self.debug = config.debug if debug is None else debug

        self.is_shaking = False

        self._rng = rng or _random
        self._time_offset = self._rng.uniform(-TIME_OFFSET_RANGE, TIME_OFFSET_RANGE)
        self._start_time = 0.0
        self._started = False
        self._active = True
        self._janitor = Janitor()

    def __repr__(self) -> str:
        return (
            f"Shake(amplitude={self.amplitude}, frequency={self.frequency}, "
            f"fade_in_time={self.fade_in_time}, fade_out_time={self.fade_out_time}, "
            f"sustain={self.sustain}, sustain_time={self.sustain_time}, "
            f"is_shaking={self.is_shaking})"
        )

    @property
    def time_offset(self) -> float:
        """Random offset into the noise field, fixed for this instance."""
        return self._time_offset

    @property
    def start_time(self) -> float:
        """Time captured by the last ``start()`` (0.0 before)."""
        return self._start_time

    @property
    def is_active(self) -> bool:
        """False once the shake has stopped or been destroyed."""
        return self._active

    @property
    def state(self) -> ShakeState:
        """Current envelope phase, evaluated at the current time."""
        if not self._active:
            return ShakeState.STOPPED
        if not self._started:
            return ShakeState.IDLE

        duration = self.time_function() - self._start_time
        if duration < self.fade_in_time:
            return ShakeState.FADING_IN
        if self.sustain or duration <= self.fade_in_time + self.sustain_time:
            return ShakeState.SUSTAINING
        return ShakeState.FADING_OUT

    def validate(self) -> None:
        """Check that the time constants are usable as divisors.

        Raises:
            ValueError: If frequency, fade_in_time or fade_out_time is not positive
        """
        if not self.frequency > 0:
            raise ValueError(f"frequency must be positive, got {self.frequency}")
        if not self.fade_in_time > 0:
            raise ValueError(f"fade_in_time must be positive, got {self.fade_in_time}")
        if not self.fade_out_time > 0:
            raise ValueError(f"fade_out_time must be positive, got {self.fade_out_time}")

    def start(self) -> None:
        """Start the shake.

        Must be called before ``update()``. Calling it again while the shake
        is running restarts the envelope from the current time.
        """
        if not self._active:
            logger.warning("Ignoring start() on a stopped shake; clone it instead")
            return

        self._start_time = self.time_function()
        if not self._started:
            self._janitor.add(self._clear_shaking)
            self._started = True
        self.is_shaking = True
        logger.debug("Shake started at %.3f", self._start_time)

    def stop(self) -> None:
        """Stop the shake and release every signal or render step binding.

        Called automatically when the shake completes. Stopping twice is a no-op.
        A stopped shake is inert: bindings made afterwards are released at once.
        """
        if self._active:
            self._active = False
            logger.debug("Shake stopped")
        self._janitor.destroy()

    def stop_sustain(self) -> None:
        """End a sustained shake and let it fade out from the current time."""
        current_time = self.time_function()
        self.sustain = False
        self.sustain_time = current_time - self._start_time - self.fade_in_time

    def _envelope(self, duration: float) -> Tuple[float, bool]:
        """Amplitude multiplier and completion flag for an elapsed duration."""
        fade_in_time = self.fade_in_time
        multiplier_fade_in = 1.0
        multiplier_fade_out = 1.0
        done = False

        if duration < fade_in_time:
            multiplier_fade_in = _divide(duration, fade_in_time)

        if not self.sustain and duration > fade_in_time + self.sustain_time:
            fade_out_elapsed = duration - fade_in_time - self.sustain_time
            multiplier_fade_out = 1 - _divide(fade_out_elapsed, self.fade_out_time)
            if duration >= fade_in_time + self.sustain_time + self.fade_out_time:
                done = True

        return min(multiplier_fade_in, multiplier_fade_out), done

    def update(self) -> ShakeUpdate:
        """Sample the shake at the current time.

        Call once per frame, or use ``on_signal`` / ``bind_to_render_step``.

        Returns:
            Tuple of (position offset, rotation offset, done). When done is
            True the shake has already been stopped.
        """
        if self.debug:
            self.validate()

        current_time = self.time_function()
        duration = current_time - self._start_time
        noise_input = _divide(current_time + self._time_offset, self.frequency) % NOISE_INPUT_WRAP
        noise_function = self.noise_function

        multiplier, done = self._envelope(duration)

        offset = (
            Vector3(
                noise_function(noise_input, 0) / 2,
                noise_function(0, noise_input) / 2,
                noise_function(noise_input, noise_input) / 2,
            )
            * self.amplitude
            * multiplier
        )

        if done:
            logger.debug("Shake completed after %.3fs", duration)
            self.stop()

        return self.position_influence * offset, self.rotation_influence * offset, done

    def on_signal(self, signal: Connectable, callback: OnUpdate) -> Disconnectable:
        """Run ``update()`` every time ``signal`` fires.

        The connection is disconnected when the shake stops or is destroyed.

        Args:
            signal: Any object with ``connect(handler)`` returning a connection
                that has ``disconnect()``
            callback: Receives (position, rotation, done) after each update

        Returns:
            The connection
        """

        def handler(*_args) -> None:
            position, rotation, completed = self.update()
            callback(position, rotation, completed)

        return self._janitor.add(signal.connect(handler), "disconnect")

    def bind_to_render_step(
        self,
        name: str,
        priority: int,
        callback: OnUpdate,
        render_step: Optional[RenderStep] = None,
    ) -> None:
        """Run ``update()`` every frame of a render step registry.

        The binding is removed when the shake stops or is destroyed.

        Args:
            name: Binding name (see ``next_render_name``)
            priority: Run order within the frame
            callback: Receives (position, rotation, done) after each update
            render_step: Registry to bind to (defaults to the process-wide one)
        """
        render_step = render_step or get_render_step()

        def step(_dt: float) -> None:
            position, rotation, completed = self.update()
            callback(position, rotation, completed)

        render_step.bind(name, priority, step)
        self._janitor.add(lambda: render_step.unbind(name))

    def clone(self) -> "Shake":
        """Create an unstarted shake with the same configuration.

        Playing state is not copied, and the clone draws its own time offset,
        so a preset can be cloned many times without the copies moving in sync.

        Returns:
            A new shake instance
        """
        return Shake(
            amplitude=self.amplitude,
            frequency=self.frequency,
            fade_in_time=self.fade_in_time,
            fade_out_time=self.fade_out_time,
            sustain=self.sustain,
            sustain_time=self.sustain_time,
            position_influence=self.position_influence,
            rotation_influence=self.rotation_influence,
            noise_function=self.noise_function,
            time_function=self.time_function,
            rng=self._rng,
            debug=self.debug,
        )

    def destroy(self) -> None:
        """Stop the shake for good. Same as ``stop()``."""
        self.stop()

    def _clear_shaking(self) -> None:
        self.is_shaking = False
