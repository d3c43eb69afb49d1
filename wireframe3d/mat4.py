"""4x4 row-major transformation matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from wireframe3d.vec3 import Vec3
from wireframe3d.vec4 import Vec4

PI = 3.1415


class Mat4:
    """A 4x4 matrix of floats, stored as rows."""

    __slots__ = ("values",)

    def __init__(self, rows: Iterable[Sequence[float]] | None = None) -> None:
        if rows is None:
            self.values = [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]
            return
        values = [[float(v) for v in row] for row in rows]
        if len(values) != 4 or any(len(row) != 4 for row in values):
            raise ValueError("a Mat4 needs exactly 4 rows of 4 values")
        self.values = values

    @classmethod
    def null(cls) -> Mat4:
        """All-zero matrix."""
        return cls([[0.0] * 4 for _ in range(4)])

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @classmethod
    def rotation(cls, angle_in_degrees: float, axis: Vec3) -> Mat4:
        """Rotation about the first non-zero axis among x, y, z."""
        m = cls.identity()
        radians = angle_in_degrees * (PI / 180.0)
        c, s = math.cos(radians), math.sin(radians)
        v = m.values
        if axis.x:
            v[1][1], v[1][2] = c, -s
            v[2][1], v[2][2] = s, c
        elif axis.y:
            v[0][0], v[0][2] = c, s
            v[2][0], v[2][2] = -s, c
        elif axis.z:
            v[0][0], v[0][1] = c, -s
            v[1][0], v[1][1] = s, c
        return m

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Mat4:
        m = cls.identity()
        m.values[0][3] = x
        m.values[1][3] = y
        m.values[2][3] = z
        return m

    @classmethod
    def scale(cls, x_scale: float, y_scale: float, z_scale: float) -> Mat4:
        m = cls.identity()
        m.values[0][0] = x_scale
        m.values[1][1] = y_scale
        m.values[2][2] = z_scale
        return m

    @classmethod
    def orthographic(
        cls, left: float, right: float, top: float, bottom: float, z_near: float, z_far: float
    ) -> Mat4:
        m = cls.identity()
        m.values[0][0] = 2 / (right - left)
        m.values[1][1] = 2 / (top - bottom)
        m.values[2][2] = 2 / (z_far - z_near)
        m.values[2][3] = -((z_far + z_near) / (z_far - z_near))
        return m

    @classmethod
    def perspective(
        cls, left: float, right: float, top: float, bottom: float, z_near: float, z_far: float
    ) -> Mat4:
        """Perspective squash followed by the orthographic projection."""
        squash = cls.identity()
        squash.values[0][0] = z_near
        squash.values[1][1] = z_near
        squash.values[2][2] = z_near + z_far
        squash.values[2][3] = -(z_near * z_far)
        squash.values[3][2] = 1.0
        ortho = cls.orthographic(left, right, top, bottom, z_near, z_far)
        return ortho * squash

    @classmethod
    def ndc_to_viewport(cls, width: float, height: float) -> Mat4:
        """Map NDC to screen pixels: x scaled, y flipped, origin moved to the top left."""
        m = cls.identity()
        m[0][0] = width / 2
        m[1][1] = -height / 2
        m[0][3] = width / 2
        m[1][3] = height / 2
        return m

    def __getitem__(self, index: int) -> list[float]:
        return self.values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.values == other.values

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self, other: Mat4 | Vec4) -> Mat4 | Vec4:
        if isinstance(other, Mat4):
            columns = list(zip(*other.values))
            return Mat4(
                [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.values]
            )
        if isinstance(other, Vec4):
            vec = (other.x, other.y, other.z, other.w)
            x, y, z, w = (sum(a * b for a, b in zip(row, vec)) for row in self.values)
            return Vec4(x, y, z, w)
        return NotImplemented

    def format_elements(self) -> str:
        """Rows in brackets with fixed six-decimal values."""
        return "".join(
            "[" + " ".join(f"{v:f}" for v in row) + "] \n" for row in self.values
        )

    def __str__(self) -> str:
        return "".join(
            " " + "".join(f"{v:g} " for v in row) + "\n" for row in self.values
        )

    def __repr__(self) -> str:
        return f"Mat4({self.values!r})"