from __future__ import annotations

from vectorpy.types import Float2
from vectorpy.vector import Vector


class Vector2(Vector):
    """
    A class for storing single-precision vectors in R^2.

    Supports ``+`` and ``-`` with another :class:`Vector2` or a scalar and ``*``
    with another :class:`Vector2` (component-wise) or a scalar from either side.
    """

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    x: float
    y: float

    def __init__(self, x: float, y: float):
        """
        Creates a Vector2 instance.

        Args:
            x: The x component.
            y: The y component.
        """
        super().__init__(x, y)

    def to_slice(self) -> Float2:
        return (self.x, self.y)
