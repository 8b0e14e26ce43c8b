"""Preset shake configurations.

Presets are never started directly. ``get_preset`` hands out a clone so each
use gets its own envelope and time offset.
"""

from typing import Dict, List

from shake.shake import Shake
from shake.vector import Vector3

# Short, violent burst that settles quickly
EXPLOSION = Shake(
    amplitude=5.0,
    frequency=0.08,
    fade_in_time=0.05,
    fade_out_time=1.5,
    sustain_time=0.1,
    rotation_influence=Vector3(0.5, 0.5, 0.5),
)

# Sharp kick, mostly vertical with a little roll
RECOIL = Shake(
    amplitude=2.0,
    frequency=0.05,
    fade_in_time=0.02,
    fade_out_time=0.25,
    sustain_time=0.0,
    position_influence=Vector3(0.25, 1.0, 0.1),
    rotation_influence=Vector3(1.0, 0.25, 0.5),
)

# Slow rumble held until stop_sustain() is called
EARTHQUAKE = Shake(
    amplitude=1.5,
    frequency=0.4,
    fade_in_time=2.0,
    fade_out_time=3.0,
    sustain=True,
    position_influence=Vector3(1.0, 0.3, 1.0),
    rotation_influence=Vector3(0.2, 0.2, 0.2),
)

# Light nudge, e.g. for landing or UI feedback
BUMP = Shake(
    amplitude=0.5,
    frequency=0.1,
    fade_in_time=0.05,
    fade_out_time=0.3,
    sustain_time=0.0,
    rotation_influence=Vector3.ZERO,
)

PRESETS: Dict[str, Shake] = {
    "explosion": EXPLOSION,
    "recoil": RECOIL,
    "earthquake": EARTHQUAKE,
    "bump": BUMP,
}


def preset_names() -> List[str]:
    """Return the available preset names."""
    return sorted(PRESETS)


def get_preset(name: str) -> Shake:
    """Get a fresh, unstarted shake for a named preset.

    Args:
        name: Preset name (case-insensitive)

    Returns:
        A clone of the preset

    Raises:
        ValueError: If the preset does not exist
    """
    preset = PRESETS.get(name.lower())
    if preset is None:
        raise ValueError(f"Unknown shake preset: {name!r}")
    return preset.clone()
