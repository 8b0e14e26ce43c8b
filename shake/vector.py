"""Immutable 3D vector used for shake offsets and influences."""

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Tuple, Union


@dataclass(frozen=True)
class Vector3:
    """3-component vector.

    Multiplication accepts either a scalar or another vector. A vector operand
    multiplies component-wise, which is how influence vectors are applied to
    the shake offset.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vector3"]
    ONE: ClassVar["Vector3"]

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vector3", float]) -> "Vector3":
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_finite(self) -> bool:
        """Check that no component is inf or nan."""
        return all(math.isfinite(c) for c in self)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @staticmethod
    def from_tuple(t: Tuple[float, float, float]) -> "Vector3":
        return Vector3(t[0], t[1], t[2])


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
