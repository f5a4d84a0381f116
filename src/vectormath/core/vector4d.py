# core/vector4d.py
from vectormath.core.vector import Vector


class Vector4D(Vector):
    """
    A vector in 4D homogeneous space. The w component is the "weight":
    0 for a direction, 1 for a point.
    """
    __slots__ = ()
    dimension = 4

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
        super().__init__(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])
