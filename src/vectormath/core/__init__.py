from vectormath.core.vector import Vector
from vectormath.core.vector2d import Vector2D
from vectormath.core.vector3d import Vector3D
from vectormath.core.vector4d import Vector4D
from vectormath.core.utils import rand_int, random_vector
from vectormath.core.fast_math import fast_inv_sqrt

__all__ = [
    "Vector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "rand_int",
    "random_vector",
    "fast_inv_sqrt",
]
