"""
Geometric Primitives for the simulation core.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point3:
    """
    A point (or offset) in 3D space. Plain value type, compared by position.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Point3) -> Point3:
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Point3:
        x, y, z = (float(v) for v in values)
        return cls(x, y, z)


ORIGIN = Point3(0.0, 0.0, 0.0)
WORLD_UP = Point3(0.0, 1.0, 0.0)
