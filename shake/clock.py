"""Default time source for shakes."""

import os
import time
from typing import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


def pygame_time() -> float:
    """Seconds since ``pygame.init()``, from the pygame tick clock."""
    return pygame.time.get_ticks() / 1000.0


def default_time_function() -> Callable[[], float]:
    """Pick the time source for a new shake.

    While pygame is initialised this is the pygame tick clock, so shakes stay
    in step with the game loop. Otherwise it is a monotonic high-resolution
    clock. The choice is made once; a shake keeps its clock even if pygame is
    initialised or quit later.

    Returns:
        Function returning monotonic time in seconds
    """
    if pygame.get_init():
        return pygame_time
    return time.perf_counter
