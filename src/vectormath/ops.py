# ops.py
"""
Free functions on Vector2D, Vector3D and Vector4D.

The geometric helpers (dot, project, reject and the magnitude family) accept
any dimension, but both operands must have the same type. Scalar results are
numpy.float32. Degenerate inputs such as projecting onto the zero vector
yield inf/nan per IEEE-754 and are not guarded.

The named operations (add, negate, ...) are plain aliases of the operators
for callers that prefer function syntax.
"""
import numpy as np

from vectormath.config import DISPLAY_PRECISION, NEWTON_ITERATIONS
from vectormath.core.fast_math import fast_inv_sqrt
from vectormath.core.vector import Vector


def _check_pair(l: Vector, r: Vector) -> None:
    if type(l) is not type(r):
        raise TypeError(f"Cannot combine {type(l).__name__} with {type(r).__name__}")


###############################################################################
# Geometric functions
###############################################################################
def dot(l: Vector, r: Vector) -> np.float32:
    """
    Standard dot product on R^n.
    """
    _check_pair(l, r)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.float32(np.dot(l.data, r.data))


def project(a: Vector, b: Vector) -> Vector:
    """
    Projection of a onto b: (dot(a, b) / dot(b, b)) * b.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        factor = dot(a, b) / dot(b, b)
    return b * factor


def reject(a: Vector, b: Vector) -> Vector:
    """
    Rejection of a from b: the part of a orthogonal to b.
    """
    return a - project(a, b)


def mag_squared(v: Vector) -> np.float32:
    # Enough for comparing lengths without a square root.
    return dot(v, v)


def magnitude(v: Vector) -> np.float32:
    return np.sqrt(mag_squared(v))


def mag_inverse(v: Vector) -> np.float32:
    with np.errstate(divide="ignore"):
        return np.float32(1.0) / magnitude(v)


def mag_fast_inv(v: Vector, iterations: int = NEWTON_ITERATIONS) -> np.float32:
    """
    Approximate 1/|v| using the fast inverse square root of |v|^2.
    """
    return np.float32(fast_inv_sqrt(mag_squared(v), iterations))


def format_vector(v: Vector, precision: int = DISPLAY_PRECISION) -> str:
    return v.format(precision)


###############################################################################
# Named operations
###############################################################################
def add(l: Vector, r: Vector) -> Vector:
    return l + r


def negate(v: Vector) -> Vector:
    return -v


def subtract(l: Vector, r: Vector) -> Vector:
    return l - r


def scale(s: float, v: Vector) -> Vector:
    return s * v


def divide(v: Vector, s: float) -> Vector:
    return v / s


def equals(l: Vector, r: Vector) -> bool:
    return l == r


def not_equals(l: Vector, r: Vector) -> bool:
    return l != r
