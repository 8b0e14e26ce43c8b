"""Named, prioritised per-frame callback registry.

The host application calls ``step(dt)`` once per frame from its own loop.
Nothing here schedules or drives frames.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Optional

from shake.signals import Signal

logger = logging.getLogger(__name__)

# Type alias for bound step functions
StepFunction = Callable[[float], None]


class RenderPriority(IntEnum):
    """Common priority levels. Lower values run earlier in a frame."""

    FIRST = 0
    INPUT = 100
    CAMERA = 200
    CHARACTER = 300
    LAST = 2000


@dataclass(frozen=True)
class _Binding:
    name: str
    priority: int
    order: int
    function: StepFunction


class RenderStep:
    """Registry of step functions run in priority order each frame."""

    def __init__(self) -> None:
        self._bindings: Dict[str, _Binding] = {}
        self._next_order = 0

        # Fired with dt after all bound functions have run
        self.stepped = Signal()

    def bind(self, name: str, priority: int, function: StepFunction) -> None:
        """Bind a function under a unique name.

        Args:
            name: Binding name, used to unbind later
            priority: Run order within a frame (lower first)
            function: Called with the frame delta time in seconds
        """
        if name in self._bindings:
            logger.warning("Render step %r is already bound, replacing it", name)

        self._bindings[name] = _Binding(name, int(priority), self._next_order, function)
        self._next_order += 1

    def unbind(self, name: str) -> None:
        """Remove a binding. Unknown names are ignored."""
        self._bindings.pop(name, None)

    def is_bound(self, name: str) -> bool:
        return name in self._bindings

    @property
    def binding_count(self) -> int:
        return len(self._bindings)

    def step(self, dt: float) -> None:
        """Run one frame.

        Args:
            dt: Delta time in seconds since the previous frame
        """
        ordered = sorted(self._bindings.values(), key=lambda b: (b.priority, b.order))
        for binding in ordered:
            # Skip bindings removed or replaced earlier in this frame
            if self._bindings.get(binding.name) is not binding:
                continue
            binding.function(dt)

        self.stepped.fire(dt)

    def clear(self) -> None:
        """Remove every binding."""
        self._bindings.clear()


_render_step: Optional[RenderStep] = None


def get_render_step() -> RenderStep:
    """Get the process-wide render step registry."""
    global _render_step
    if _render_step is None:
        _render_step = RenderStep()
    return _render_step
