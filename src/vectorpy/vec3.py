from __future__ import annotations

from vectorpy.misc import precision
from vectorpy.misc.precision import f32
from vectorpy.types import Float3
from vectorpy.vec2 import Vector2
from vectorpy.vector import Vector


def deg_to_rad(degrees: float) -> float:
    """
    Converts an angle from degrees to radians, in single precision.

    Args:
        degrees: The angle in degrees.

    Returns:
        The angle in radians (``degrees * pi / 180``).
    """
    return f32(f32(f32(degrees) * precision.PI) / 180.0)


class Vector3(Vector):
    """
    A class for storing single-precision vectors in :math:`R^3`. Contains functions for
    operating within that vector space and for converting from and to spherical coordinates.

    Spherical coordinates follow the physics convention: ``theta`` is the polar angle
    measured from the +z axis and ``phi`` the azimuthal angle in the xy-plane measured
    from the +x axis. All angles are in radians, see :func:`deg_to_rad`.
    """

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    x: float
    y: float
    z: float

    def __init__(self, x: float, y: float, z: float):
        """
        Constructs an instance of Vector3.

        Args:
            x: The vector x-coordinate.
            y: The vector y-coordinate.
            z: The vector z-coordinate.
        """
        super().__init__(x, y, z)

    @classmethod
    def from_polar(cls, r: float, theta: float, phi: float) -> Vector3:
        """
        Creates a vector from spherical coordinates.

        Args:
            r: The radius.
            theta: The polar angle from the +z axis, in radians.
            phi: The azimuthal angle in the xy-plane, in radians.

        Returns:
            The vector ``(r sin(theta) cos(phi), r sin(theta) sin(phi), r cos(theta))``.
        """
        r = f32(r)
        sin_theta = precision.sin(theta)
        return cls(
            f32(r * sin_theta) * precision.cos(phi),
            f32(r * sin_theta) * precision.sin(phi),
            r * precision.cos(theta),
        )

    def magnitude(self) -> float:
        """
        The length (magnitude) of this vector. [ ie :math:`length := |vector|` ]

        Returns:
            The Euclidean norm :math:`\\sqrt{x^2 + y^2 + z^2}`.
        """
        squares = f32(f32(self.x * self.x) + f32(self.y * self.y))
        squares = f32(squares + f32(self.z * self.z))
        return precision.sqrt(squares)

    def normalize(self) -> Vector3:
        """
        Scales this vector to unit length. The zero vector is not special-cased:
        its components come out as NaN.

        Returns:
            The normalized vector.
        """
        return self * precision.div(1.0, self.magnitude())

    def theta(self) -> float:
        """
        The polar angle of this vector, measured from the +z axis.

        Returns:
            The angle in radians in ``[0, pi]``, or NaN for the zero vector.
        """
        return precision.acos(precision.div(self.z, self.magnitude()))

    def phi(self) -> float:
        """
        The azimuthal angle of this vector in the xy-plane, measured from the +x axis.

        Returns:
            The angle in radians in ``(-pi, pi]``.
        """
        return precision.atan2(self.y, self.x)

    def xy(self) -> Vector2:
        """
        Returns:
            The projection onto the xy-plane, dropping the z component.
        """
        return Vector2(self.x, self.y)

    def cross(self, other: Vector3) -> Vector3:
        """
        The cross product between this vector and a given vector.

        Args:
            other: The given vector.

        Returns:
            The cross product between the two vectors (a vector value).
        """
        if not isinstance(other, Vector3):
            raise TypeError(f"Can only compute the cross product with a Vector3, got {type(other).__name__}.")
        return Vector3(
            f32(self.y * other.z) - f32(self.z * other.y),
            f32(self.z * other.x) - f32(self.x * other.z),
            f32(self.x * other.y) - f32(self.y * other.x),
        )

    def to_slice(self) -> Float3:
        return (self.x, self.y, self.z)
