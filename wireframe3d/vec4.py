"""Four-component homogeneous vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec4:
    """A homogeneous 3D vector; components also readable as (r, g, b, a)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value: float) -> None:
        self.x = value

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value: float) -> None:
        self.y = value

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value: float) -> None:
        self.z = value

    @property
    def a(self) -> float:
        return self.w

    @a.setter
    def a(self, value: float) -> None:
        self.w = value

    def __add__(self, other: Vec4) -> Vec4:
        # Behaves as a component-wise difference, with w reset to 1.
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z)

    def __sub__(self, other: Vec4) -> Vec4:
        """Component-wise difference of x, y, z; w is reset to 1."""
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec4) -> Vec4:
        """Component-wise product of x, y, z; w is reset to 1."""
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x * other.x, self.y * other.y, self.z * other.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"