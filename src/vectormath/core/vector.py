# core/vector.py
import numbers
from typing import Iterator, List, Union

import numpy as np

from vectormath.config import DISPLAY_PRECISION


def is_scalar(value) -> bool:
    """
    True for real numbers (Python or numpy), False for vectors and anything else.
    """
    return isinstance(value, numbers.Real)


def to_float32(value) -> np.float32:
    """
    Rounds a real number to float32. Python ints too large for a double
    become signed infinity instead of raising OverflowError.
    """
    try:
        return np.float32(value)
    except OverflowError:
        return np.float32(np.inf) if value > 0 else np.float32(-np.inf)


class Vector:
    """
    Immutable single-precision vector shared by Vector2D, Vector3D and Vector4D.

    Components are stored in a read-only float32 array, and every operator
    returns a new vector of the same type. Floating-point degeneracies
    (division by zero, overflow) follow IEEE-754 and never raise.
    """
    __slots__ = ("_v",)

    # Number of components; fixed by each subclass.
    dimension = 0

    # Makes numpy scalars defer to __rmul__ instead of broadcasting over us.
    __array_ufunc__ = None

    def __init__(self, *components: float):
        if type(self) is Vector:
            raise TypeError("Vector is abstract; use Vector2D, Vector3D or Vector4D")
        if len(components) != self.dimension:
            raise TypeError(
                f"{type(self).__name__} takes {self.dimension} components, "
                f"got {len(components)}"
            )
        # Values beyond float32 range round to inf.
        with np.errstate(over="ignore"):
            self._set_array(np.array([to_float32(c) for c in components], dtype=np.float32))

    def _set_array(self, array: np.ndarray) -> None:
        array.flags.writeable = False
        object.__setattr__(self, "_v", array)

    def _new(self, array: np.ndarray) -> "Vector":
        vec = object.__new__(type(self))
        vec._set_array(array.astype(np.float32, copy=False))
        return vec

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def data(self) -> np.ndarray:
        """Read-only float32 view of the components."""
        return self._v

    def as_array(self) -> np.ndarray:
        """Writable float32 copy of the components."""
        return self._v.copy()

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------
    def __neg__(self) -> "Vector":
        return self._new(-self._v)

    def __add__(self, other: "Vector") -> "Vector":
        if type(other) is not type(self):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            return self._new(self._v + other._v)

    def __sub__(self, other: "Vector") -> "Vector":
        if type(other) is not type(self):
            return NotImplemented
        # l - r is l + (-r)
        return self + (-other)

    def _scaled(self, scalar) -> "Vector":
        with np.errstate(over="ignore", invalid="ignore", under="ignore"):
            return self._new(self._v * to_float32(scalar))

    def __mul__(self, scalar: float) -> "Vector":
        if not is_scalar(scalar):
            return NotImplemented
        return self._scaled(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector":
        if not is_scalar(scalar):
            return NotImplemented
        # v / s is (1/s) * v; s == 0 gives inf/nan components.
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            inverse = np.float32(1.0) / to_float32(scalar)
        return self._scaled(inverse)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        """
        Exact component-wise equality. Vectors that are merely very close
        (for example after rounding error) compare unequal.
        """
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.all(self._v == other._v))

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + tuple(self._v.tolist()))

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __getitem__(self, index: Union[int, slice]) -> Union[float, List[float]]:
        return self._v.tolist()[index]

    def __reduce__(self):
        return (type(self), tuple(self))

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------
    def format(self, precision: int = DISPLAY_PRECISION) -> str:
        """
        Parenthesized, comma-separated components, e.g. "(1, 2.5, -3)".
        Uses %g formatting so whole numbers print without a decimal point.
        """
        return "(" + ", ".join(f"{c:.{precision}g}" for c in self) + ")"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self)})"
