"""Deterministic 2D gradient (Perlin) noise.

The default ``noise`` function is what a shake samples unless another
function is assigned. It is zero at every integer lattice point and varies
smoothly in between, staying roughly within [-1, 1].
"""

import math
from dataclasses import dataclass, field
from random import Random
from typing import List, Tuple

# Eight unit-ish gradient directions for the 2D lattice
_GRADIENTS: Tuple[Tuple[float, float], ...] = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)


def _fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


@dataclass
class PerlinNoise:
    """2D Perlin noise with a seeded permutation table.

    Args:
        seed: Seed for the permutation shuffle. Equal seeds give identical noise.
    """

    seed: int = 0
    permutation: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        p = list(range(256))
        Random(self.seed).shuffle(p)
        # Doubled so lookups of p[p[x] + y] never wrap
        self.permutation = p * 2

    def _grad(self, hash_value: int, x: float, y: float) -> float:
        gx, gy = _GRADIENTS[hash_value & 7]
        return gx * x + gy * y

    def sample(self, x: float, y: float = 0.0) -> float:
        """Sample the noise field at (x, y).

        Args:
            x: First coordinate
            y: Second coordinate

        Returns:
            Noise value, or nan if either coordinate is not finite
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan

        x_floor = math.floor(x)
        y_floor = math.floor(y)
        xi = x_floor & 255
        yi = y_floor & 255
        xf = x - x_floor
        yf = y - y_floor

        u = _fade(xf)
        v = _fade(yf)

        p = self.permutation
        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]

        bottom = _lerp(self._grad(aa, xf, yf), self._grad(ba, xf - 1, yf), u)
        top = _lerp(self._grad(ab, xf, yf - 1), self._grad(bb, xf - 1, yf - 1), u)
        return _lerp(bottom, top, v)

    def __call__(self, x: float, y: float = 0.0) -> float:
        return self.sample(x, y)


_default_noise = PerlinNoise()


def noise(x: float, y: float = 0.0) -> float:
    """Sample the shared default noise field."""
    return _default_noise.sample(x, y)
