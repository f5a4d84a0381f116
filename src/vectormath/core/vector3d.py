# core/vector3d.py
from vectormath.core.vector import Vector


class Vector3D(Vector):
    """
    A three-dimensional vector with x, y and z components.
    """
    __slots__ = ()
    dimension = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])
