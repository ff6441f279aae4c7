"""Three-dimensional vectors for points, directions and offsets."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

ROUNDING_ERROR = 0.000001

_Operand = Union["Vec3", float, int]


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= ROUNDING_ERROR


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector; also used as a point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: _Operand) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, other: _Operand) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            inverse = 1.0 / other
            return Vec3(self.x * inverse, self.y * inverse, self.z * inverse)
        return NotImplemented

    def __le__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x <= other.x and self.y <= other.y and self.z <= other.z

    def __ge__(self, other: Vec3) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x >= other.x and self.y >= other.y and self.z >= other.z

    def equals(self, other: Vec3) -> bool:
        """Equality that tolerates floating point rounding errors."""
        return (
            _close(self.x, other.x)
            and _close(self.y, other.y)
            and _close(self.z, other.z)
        )

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_from(self, other: Vec3) -> float:
        return math.sqrt(self.distance_from_sq(other))

    def distance_from_sq(self, other: Vec3) -> float:
        return (self - other).length_sq()

    def is_between_points(self, begin: Vec3, end: Vec3) -> bool:
        """True if this point lies between begin and end.

        The point is assumed to be on the line through begin and end.
        """
        span = (end - begin).length_sq()
        return self.distance_from_sq(begin) < span and self.distance_from_sq(end) < span

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return self
        return self * (1.0 / length)

    def with_length(self, new_length: float) -> Vec3:
        return self.normalized() * new_length

    def inverted(self) -> Vec3:
        return -self

    def rotated_xz(self, degrees: float, center: Vec3) -> Vec3:
        """Rotate around the Y axis through center."""
        rad = math.radians(degrees)
        cs, sn = math.cos(rad), math.sin(rad)
        x = self.x - center.x
        z = self.z - center.z
        return Vec3(x * cs - z * sn + center.x, self.y, x * sn + z * cs + center.z)

    def rotated_xy(self, degrees: float, center: Vec3) -> Vec3:
        """Rotate around the Z axis through center."""
        rad = math.radians(degrees)
        cs, sn = math.cos(rad), math.sin(rad)
        x = self.x - center.x
        y = self.y - center.y
        return Vec3(x * cs - y * sn + center.x, x * sn + y * cs + center.y, self.z)

    def rotated_yz(self, degrees: float, center: Vec3) -> Vec3:
        """Rotate around the X axis through center."""
        rad = math.radians(degrees)
        cs, sn = math.cos(rad), math.sin(rad)
        y = self.y - center.y
        z = self.z - center.z
        return Vec3(self.x, y * cs - z * sn + center.y, y * sn + z * cs + center.z)

    def interpolated(self, other: Vec3, d: float) -> Vec3:
        """Blend of self and other: d=1 gives self, d=0 gives other."""
        inv = 1.0 - d
        return Vec3(
            other.x * inv + self.x * d,
            other.y * inv + self.y * d,
            other.z * inv + self.z * d,
        )

    def horizontal_angle(self) -> Vec3:
        """Rotation in degrees about X and Y pointing along this vector; Z is 0."""
        angle_y = math.degrees(math.atan2(self.x, self.z))
        if angle_y < 0.0:
            angle_y += 360.0
        if angle_y >= 360.0:
            angle_y -= 360.0

        z1 = math.sqrt(self.x * self.x + self.z * self.z)
        angle_x = math.degrees(math.atan2(z1, self.y)) - 90.0
        if angle_x < 0.0:
            angle_x += 360.0
        if angle_x >= 360.0:
            angle_x -= 360.0

        return Vec3(angle_x, angle_y, 0.0)

    def as_4_values(self) -> tuple[float, float, float, float]:
        """The components followed by a fourth value of 0."""
        return (self.x, self.y, self.z, 0.0)