"""Small linear-algebra types used for node transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float
    y: float
    z: float

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Return the vector scaled to unit length."""
        return self * (1.0 / self.magnitude())

    def as_array(self) -> list[float]:
        return [self.x, self.y, self.z]

    def __mul__(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Vector4:
    """A four-component vector."""

    x: float
    y: float
    z: float
    w: float

    def as_array(self) -> list[float]:
        """Components as a list ``[x, y, z, w]``."""
        return [self.x, self.y, self.z, self.w]

    @classmethod
    def from_array(cls, values: Iterable[float]) -> Vector4:
        """Build a vector from exactly four values."""
        x, y, z, w = values
        return cls(x, y, z, w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
            self.w + other.w,
        )

    def __mul__(self, s: float) -> Vector4:
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__


def _check_count(args: Sequence[float], expected: int) -> None:
    if len(args) != expected:
        raise ValueError(f"expected {expected} values, got {len(args)}")


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 matrix stored as three column vectors."""

    x: Vector3
    y: Vector3
    z: Vector3

    @classmethod
    def from_columns(cls, *args: float) -> Matrix3:
        """Build from nine values given column by column."""
        _check_count(args, 9)
        return cls(Vector3(*args[0:3]), Vector3(*args[3:6]), Vector3(*args[6:9]))

    def determinant(self) -> float:
        x, y, z = self.x, self.y, self.z
        return (
            x.x * (y.y * z.z - z.y * y.z)
            - y.x * (x.y * z.z - z.y * x.z)
            + z.x * (x.y * y.z - y.y * x.z)
        )

    def trace(self) -> float:
        return self.x.x + self.y.y + self.z.z


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix stored as four column vectors."""

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    @classmethod
    def from_columns(cls, *args: float) -> Matrix4:
        """Build from sixteen values given column by column."""
        _check_count(args, 16)
        return cls(
            Vector4(*args[0:4]),
            Vector4(*args[4:8]),
            Vector4(*args[8:12]),
            Vector4(*args[12:16]),
        )

    @classmethod
    def from_array(cls, columns: Iterable[Iterable[float]]) -> Matrix4:
        """Build from four columns of four values each."""
        x, y, z, w = columns
        return cls(
            Vector4.from_array(x),
            Vector4.from_array(y),
            Vector4.from_array(z),
            Vector4.from_array(w),
        )

    @classmethod
    def from_translation(cls, v: Vector3) -> Matrix4:
        """Homogeneous transformation matrix from a translation vector."""
        return cls.from_columns(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            v.x, v.y, v.z, 1.0,
        )

    @classmethod
    def from_nonuniform_scale(cls, x: float, y: float, z: float) -> Matrix4:
        """Homogeneous transformation matrix from per-axis scale values."""
        return cls.from_columns(
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Matrix4:
        """Rotation matrix equivalent to a quaternion."""
        v = q.v
        x2 = v.x + v.x
        y2 = v.y + v.y
        z2 = v.z + v.z

        xx2 = x2 * v.x
        xy2 = x2 * v.y
        xz2 = x2 * v.z

        yy2 = y2 * v.y
        yz2 = y2 * v.z
        zz2 = z2 * v.z

        sy2 = y2 * q.s
        sz2 = z2 * q.s
        sx2 = x2 * q.s

        return cls(
            Vector4(1.0 - yy2 - zz2, xy2 + sz2, xz2 - sy2, 0.0),
            Vector4(xy2 - sz2, 1.0 - xx2 - zz2, yz2 + sx2, 0.0),
            Vector4(xz2 + sy2, yz2 - sx2, 1.0 - xx2 - yy2, 0.0),
            Vector4(0.0, 0.0, 0.0, 1.0),
        )

    def as_array(self) -> list[list[float]]:
        """Columns as nested lists."""
        return [self.x.as_array(), self.y.as_array(), self.z.as_array(), self.w.as_array()]

    def __mul__(self, rhs: Matrix4) -> Matrix4:
        if not isinstance(rhs, Matrix4):
            return NotImplemented
        a, b, c, d = self.x, self.y, self.z, self.w

        def column(col: Vector4) -> Vector4:
            return a * col.x + b * col.y + c * col.z + d * col.w

        return Matrix4(column(rhs.x), column(rhs.y), column(rhs.z), column(rhs.w))


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with scalar part ``s`` and vector part ``v``."""

    s: float
    v: Vector3

    @classmethod
    def from_parts(cls, w: float, xi: float, yj: float, zk: float) -> Quaternion:
        return cls(w, Vector3(xi, yj, zk))

    @classmethod
    def from_axis_angle(cls, axis: Vector3, radians: float) -> Quaternion:
        """Rotation of ``radians`` about a unit ``axis``."""
        half = 0.5 * radians
        return cls(math.cos(half), axis * math.sin(half))

    @classmethod
    def from_matrix(cls, m: Matrix3) -> Quaternion:
        """Convert a rotation matrix to an equivalent quaternion."""
        trace = m.trace()
        if trace >= 0.0:
            s = math.sqrt(1.0 + trace)
            w = 0.5 * s
            s = 0.5 / s
            x = (m.y.z - m.z.y) * s
            y = (m.z.x - m.x.z) * s
            z = (m.x.y - m.y.x) * s
        elif m.x.x > m.y.y and m.x.x > m.z.z:
            s = math.sqrt((m.x.x - m.y.y - m.z.z) + 1.0)
            x = 0.5 * s
            s = 0.5 / s
            y = (m.y.x + m.x.y) * s
            z = (m.x.z + m.z.x) * s
            w = (m.y.z - m.z.y) * s
        elif m.y.y > m.z.z:
            s = math.sqrt((m.y.y - m.x.x - m.z.z) + 1.0)
            y = 0.5 * s
            s = 0.5 / s
            z = (m.z.y + m.y.z) * s
            x = (m.y.x + m.x.y) * s
            w = (m.z.x - m.x.z) * s
        else:
            s = math.sqrt((m.z.z - m.x.x - m.y.y) + 1.0)
            z = 0.5 * s
            s = 0.5 / s
            x = (m.x.z + m.z.x) * s
            y = (m.z.y + m.y.z) * s
            w = (m.x.y - m.y.x) * s
        return cls.from_parts(w, x, y, z)