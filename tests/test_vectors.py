"""
Tests for the vector value types: construction, operators, equality,
immutability and display.
"""
import math
import pickle

import numpy as np
import pytest

from vectormath import Vector, Vector2D, Vector3D, Vector4D

ALL_TYPES = [Vector2D, Vector3D, Vector4D]


class TestConstruction:
    """Zero defaults, component access and float32 storage"""

    @pytest.mark.parametrize("cls", ALL_TYPES)
    def test_default_is_zero_vector(self, cls) -> None:
        v = cls()
        assert len(v) == cls.dimension
        assert list(v) == [0.0] * cls.dimension

    def test_components(self) -> None:
        v = Vector4D(1, 2, 3, 1)
        assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 1.0)
        assert v[2] == 3.0
        assert v[:2] == [1.0, 2.0]

    def test_components_are_single_precision(self) -> None:
        v = Vector2D(0.1, 0.2)
        assert v.data.dtype == np.float32
        assert v.x == float(np.float32(0.1))
        assert v.x != 0.1

    def test_wrong_component_count(self) -> None:
        with pytest.raises(TypeError):
            Vector3D(1, 2, 3, 4)

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Vector()

    def test_nan_and_infinity_accepted(self) -> None:
        v = Vector2D(float("nan"), float("inf"))
        assert math.isnan(v.x)
        assert v.y == math.inf


class TestImmutability:

    def test_cannot_assign_component(self) -> None:
        v = Vector3D(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_cannot_add_attribute(self) -> None:
        with pytest.raises(AttributeError):
            Vector2D().label = "origin"

    def test_backing_array_read_only(self) -> None:
        v = Vector2D(1, 2)
        with pytest.raises(ValueError):
            v.data[0] = 9.0

    def test_as_array_is_a_copy(self) -> None:
        v = Vector2D(1, 2)
        arr = v.as_array()
        arr[0] = 9.0
        assert v == Vector2D(1, 2)

    def test_operations_do_not_mutate(self) -> None:
        a = Vector3D(1, 2, 3)
        b = Vector3D(4, 5, 6)
        _ = a + b
        _ = -a
        _ = a * 3
        assert a == Vector3D(1, 2, 3)
        assert b == Vector3D(4, 5, 6)


class TestArithmetic:

    def test_addition(self) -> None:
        assert Vector2D(1, 2) + Vector2D(3, 4) == Vector2D(4, 6)

    def test_negation(self) -> None:
        assert -Vector3D(1, -2, 3) == Vector3D(-1, 2, -3)

    def test_subtraction(self) -> None:
        a = Vector4D(5, 5, 5, 1)
        b = Vector4D(1, 2, 3, 1)
        assert a - b == Vector4D(4, 3, 2, 0)
        assert a - b == a + (-b)

    def test_scalar_multiplication_both_sides(self) -> None:
        v = Vector2D(3.0, -4.0)
        assert 2 * v == Vector2D(6.0, -8.0)
        assert v * 2 == Vector2D(6.0, -8.0)
        assert np.float32(2) * v == Vector2D(6.0, -8.0)

    def test_scalar_division(self) -> None:
        assert Vector2D(3.0, -4.0) / 2.0 == Vector2D(1.5, -2.0)

    def test_division_by_zero_follows_ieee(self) -> None:
        v = Vector3D(1, -1, 0) / 0
        assert v.x == math.inf
        assert v.y == -math.inf
        assert math.isnan(v.z)

    def test_division_by_zero_is_silent(self, recwarn) -> None:
        Vector2D(1, 1) / 0.0
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]

    def test_huge_int_scalar_overflows_to_infinity(self) -> None:
        assert Vector2D(1, -1) * 10**400 == Vector2D(math.inf, -math.inf)
        assert -(10**400) * Vector2D(1, 0.5) == Vector2D(-math.inf, -math.inf)

    def test_division_by_huge_int_gives_zero(self) -> None:
        assert Vector2D(3, -4) / 10**400 == Vector2D(0, 0)

    def test_huge_int_component_is_infinite(self) -> None:
        v = Vector3D(10**400, -(10**400), 1)
        assert (v.x, v.y, v.z) == (math.inf, -math.inf, 1.0)

    def test_nan_propagates(self) -> None:
        v = Vector2D(float("nan"), 1) + Vector2D(1, 1)
        assert math.isnan(v.x)
        assert v.y == 2.0

    def test_mixed_dimensions_rejected(self) -> None:
        with pytest.raises(TypeError):
            Vector2D(1, 2) + Vector3D(1, 2, 3)
        with pytest.raises(TypeError):
            Vector2D(1, 2) - Vector3D(1, 2, 3)

    def test_vector_product_not_defined(self) -> None:
        with pytest.raises(TypeError):
            Vector2D(1, 2) * Vector2D(3, 4)
        with pytest.raises(TypeError):
            Vector2D(1, 2) / Vector2D(3, 4)

    def test_result_type_preserved(self) -> None:
        assert type(Vector4D(1, 2, 3, 4) * 2) is Vector4D
        assert type(-Vector2D()) is Vector2D


class TestEquality:

    def test_exact_equality(self) -> None:
        assert Vector3D(1, 2, 3) == Vector3D(1.0, 2.0, 3.0)
        assert Vector3D(1, 2, 3) != Vector3D(1, 2, 4)

    def test_near_equal_vectors_compare_unequal(self) -> None:
        a = Vector2D(1.0, 1.0)
        b = Vector2D(1.0 + 1e-6, 1.0)
        assert a != b

    def test_one_ulp_apart_is_unequal(self) -> None:
        x = np.float32(3.0)
        assert Vector2D(x, 0) != Vector2D(np.nextafter(x, np.float32(4.0)), 0)

    def test_negative_zero_equals_zero(self) -> None:
        assert Vector2D(-0.0, 0.0) == Vector2D()

    def test_nan_never_equal(self) -> None:
        v = Vector2D(float("nan"), 0)
        assert v != v

    def test_different_dimensions_unequal(self) -> None:
        assert Vector2D(0, 0) != Vector3D(0, 0, 0)
        assert Vector2D(1, 2) != (1.0, 2.0)

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(Vector3D(1, 2, 3)) == hash(Vector3D(1.0, 2.0, 3.0))
        assert len({Vector2D(1, 2), Vector2D(1, 2), Vector2D(2, 1)}) == 2


class TestDisplay:

    def test_format_four_components(self) -> None:
        assert str(Vector4D(1, 2, 3, 1)) == "(1, 2, 3, 1)"

    def test_format_two_and_three_components(self) -> None:
        assert str(Vector2D(1, 2)) == "(1, 2)"
        assert str(Vector3D(-1.5, 0, 2.25)) == "(-1.5, 0, 2.25)"

    def test_format_rounds_float32_noise(self) -> None:
        assert str(Vector2D(0.1, 1e-7)) == "(0.1, 1e-07)"

    def test_format_precision(self) -> None:
        assert Vector2D(1 / 3, 2).format(precision=3) == "(0.333, 2)"

    def test_repr(self) -> None:
        assert repr(Vector2D(1, 2)) == "Vector2D(1.0, 2.0)"

    def test_pickle_round_trip(self) -> None:
        v = Vector3D(1.5, -2, 3)
        assert pickle.loads(pickle.dumps(v)) == v
