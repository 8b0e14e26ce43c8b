"""Procedural noise shake - no rendering, no game loop."""

from shake.janitor import Janitor
from shake.noise import PerlinNoise, noise
from shake.presets import get_preset, preset_names
from shake.render_step import RenderPriority, RenderStep, get_render_step
from shake.shake import Shake, ShakeState, inverse_square, next_render_name
from shake.signals import Connection, Signal
from shake.vector import Vector3

__all__ = [
    "Janitor",
    "PerlinNoise",
    "noise",
    "get_preset",
    "preset_names",
    "RenderPriority",
    "RenderStep",
    "get_render_step",
    "Shake",
    "ShakeState",
    "inverse_square",
    "next_render_name",
    "Connection",
    "Signal",
    "Vector3",
]
