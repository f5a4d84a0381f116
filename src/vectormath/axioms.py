# axioms.py
"""
Checks of the vector-space axioms over concrete vectors.

Addition and scalar multiplication are component-wise, so the axioms of a
vector space hold exactly whenever no rounding occurs (e.g. small integer
components and integer scalars). With arbitrary floats, associativity and
distributivity may fail in the last bit; check_axioms reports that honestly
rather than applying a tolerance.
"""
import logging
import random
from typing import Dict, Optional, Type

from vectormath.core.utils import random_vector
from vectormath.core.vector import Vector

logger = logging.getLogger(__name__)


def check_axioms(a: Vector, b: Vector, c: Vector,
                 s: float = 2.0, t: float = 3.0, k: float = 5.0) -> Dict[str, bool]:
    """
    Evaluates each axiom for the given vectors and scalars.

    Returns:
        Mapping of axiom name to whether it held, in a fixed order.
    """
    if not (type(a) is type(b) is type(c)):
        raise TypeError(
            f"Axioms need vectors of one type, got "
            f"{type(a).__name__}, {type(b).__name__}, {type(c).__name__}"
        )
    zero = type(a)()

    results = {
        "additive_commutativity": a + b == b + a,
        "additive_associativity": (a + b) + c == a + (b + c),
        "scalar_associativity": (s * t) * a == s * (t * a),
        "scalar_commutativity": s * a == a * s,
        "distributivity_over_vectors": k * (a + b) == k * a + k * b,
        "distributivity_over_scalars": (s + t) * a == s * a + t * a,
        "additive_inverse": a + (-a) == zero,
    }
    for name, held in results.items():
        logger.debug("%s: %s (a=%s, b=%s, c=%s)", name, held, a, b, c)
    return results


def satisfies_axioms(a: Vector, b: Vector, c: Vector,
                     s: float = 2.0, t: float = 3.0, k: float = 5.0) -> bool:
    results = check_axioms(a, b, c, s, t, k)
    for name, held in results.items():
        if not held:
            logger.warning("Axiom %s failed for a=%s, b=%s, c=%s", name, a, b, c)
    return all(results.values())


def verify_random_sample(cls: Type[Vector], rng: Optional[random.Random] = None) -> Dict[str, bool]:
    """
    Draws three integer-valued vectors of type cls and checks the axioms on them.
    """
    a = random_vector(cls, rng=rng)
    b = random_vector(cls, rng=rng)
    c = random_vector(cls, rng=rng)
    return check_axioms(a, b, c)
