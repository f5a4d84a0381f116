# core/utils.py
import logging
import random
from typing import Optional, Type, TypeVar

from vectormath.config import RAND_HIGH, RAND_LOW
from vectormath.core.vector import Vector

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Vector)


def rand_int(lo: int, hi: int, rng: Optional[random.Random] = None) -> int:
    """
    Returns a uniformly distributed integer in the inclusive range [lo, hi].
    """
    if lo > hi:
        raise ValueError(f"Empty range: lo={lo} is greater than hi={hi}")
    source = rng if rng is not None else random
    return source.randint(lo, hi)


def random_vector(cls: Type[V], lo: int = RAND_LOW, hi: int = RAND_HIGH,
                  rng: Optional[random.Random] = None) -> V:
    """
    Returns a vector of type cls with integer-valued components drawn from [lo, hi].
    """
    vec = cls(*(float(rand_int(lo, hi, rng)) for _ in range(cls.dimension)))
    logger.debug("Sampled %r from [%d, %d]", vec, lo, hi)
    return vec
