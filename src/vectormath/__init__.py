"""
vectormath: 2D, 3D and 4D single-precision vectors for game math.
"""
from vectormath.core import (
    Vector,
    Vector2D,
    Vector3D,
    Vector4D,
    fast_inv_sqrt,
    rand_int,
    random_vector,
)
from vectormath.ops import (
    add,
    divide,
    dot,
    equals,
    format_vector,
    mag_fast_inv,
    mag_inverse,
    mag_squared,
    magnitude,
    negate,
    not_equals,
    project,
    reject,
    scale,
    subtract,
)
from vectormath.axioms import check_axioms, satisfies_axioms, verify_random_sample
from vectormath.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Vector2D",
    "Vector3D",
    "Vector4D",
    "fast_inv_sqrt",
    "rand_int",
    "random_vector",
    "add",
    "divide",
    "dot",
    "equals",
    "format_vector",
    "mag_fast_inv",
    "mag_inverse",
    "mag_squared",
    "magnitude",
    "negate",
    "not_equals",
    "project",
    "reject",
    "scale",
    "subtract",
    "check_axioms",
    "satisfies_axioms",
    "verify_random_sample",
    "setup_logging",
]
