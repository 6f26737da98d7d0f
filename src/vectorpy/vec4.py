from __future__ import annotations

from vectorpy.types import Float4
from vectorpy.vector import Vector


class Vector4(Vector):
    """
    A class for storing single-precision vectors in R^4, for example homogeneous
    coordinates or colors. Only the component-wise operations are defined,
    geometric operations such as the perspective divide are left to the caller.
    """

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    x: float
    y: float
    z: float
    w: float

    def __init__(self, x: float, y: float, z: float, w: float):
        super().__init__(x, y, z, w)

    def to_slice(self) -> Float4:
        """
        Returns:
            The components as an ``(x, y, z, w)`` tuple.
        """
        return (self.x, self.y, self.z, self.w)
