# core/vector2d.py
from vectormath.core.vector import Vector


class Vector2D(Vector):
    """
    A two-dimensional vector with x and y components.
    Vector2D() is the zero vector, equivalent to Vector2D(0, 0).
    """
    __slots__ = ()
    dimension = 2

    def __init__(self, x: float = 0.0, y: float = 0.0):
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])
