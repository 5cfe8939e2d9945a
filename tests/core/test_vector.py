"""Tests for the Vector3 value type.

Critical Invariants:
- Components never change after construction
- Equal vectors hash equal
- Addition and scalar multiplication commute
- Unsupported operator combinations raise TypeError
"""

import math
from dataclasses import FrozenInstanceError

import pytest

from vertexflow import Vector3

# Construction and access


def test_construction_round_trip():
    a = Vector3(8, -3, 12)
    assert a.x == 8
    assert a.y == -3
    assert a.z == 12


def test_construction_accepts_nan_and_inf():
    """No validation: any float is stored verbatim."""
    v = Vector3(math.nan, math.inf, -math.inf)
    assert math.isnan(v.x)
    assert v.y == math.inf
    assert v.z == -math.inf


def test_unpacking_yields_components_in_order():
    x, y, z = Vector3(1, 2, 3)
    assert (x, y, z) == (1, 2, 3)


def test_components_are_read_only(int_vector):
    """CRITICAL: Components cannot be reassigned.

    Why: Many owners may share one vector; mutation would move them all.
    """
    with pytest.raises(FrozenInstanceError):
        int_vector.x = 10  # type: ignore[misc]
    assert int_vector == Vector3(3, 4, 2)


# Equality and hashing


def test_equality(int_vector):
    b = Vector3(3, 4, 2)
    c = Vector3(1, -1, 2)
    assert int_vector == int_vector
    assert int_vector == b
    assert b == int_vector
    assert int_vector != c
    assert c != int_vector


@pytest.mark.parametrize("other", [Vector3(9, 4, 2), Vector3(3, 9, 2), Vector3(3, 4, 9)])
def test_differing_in_one_component_is_not_equal(int_vector, other):
    assert int_vector != other


def test_equality_with_non_vector_is_false(int_vector):
    assert int_vector != (3, 4, 2)
    assert int_vector != "Vector3(3, 4, 2)"


def test_float_equality_has_no_tolerance():
    assert Vector3(0.1 + 0.2, 0.0, 0.0) != Vector3(0.3, 0.0, 0.0)


def test_nan_components_never_compare_equal():
    """Native float equality applies as-is, so NaN != NaN."""
    v = Vector3(math.nan, 0.0, 0.0)
    assert v != Vector3(math.nan, 0.0, 0.0)


def test_equal_vectors_hash_equal():
    """CRITICAL: a == b implies hash(a) == hash(b).

    Why: Vectors are used as dict keys and set members.
    """
    a = Vector3(5, 4, -2)
    b = Vector3(5, 4, -2)
    assert a == b
    assert hash(a) == hash(b)
    assert hash(a) == hash(a)


def test_hash_distinguishes_permutations():
    """Summing component hashes would collide on every permutation."""
    permutations = {
        Vector3(1, 2, 3),
        Vector3(3, 2, 1),
        Vector3(2, 3, 1),
        Vector3(1, 3, 2),
    }
    assert len({hash(v) for v in permutations}) == 4


def test_vectors_work_as_set_members():
    points = {Vector3(1, 2, 3), Vector3(1, 2, 3), Vector3(0, 0, 0)}
    assert len(points) == 2


# Arithmetic


def test_addition():
    assert Vector3(1, 3, 2) + Vector3(-3, 0, 4) == Vector3(-2, 3, 6)


def test_subtraction_float():
    assert Vector3(2.2, 1.1, 8.4) - Vector3(-2.0, 0.1, 6.2) == Vector3(4.2, 1.0, 2.2)


def test_subtraction_int():
    assert Vector3(5, 0, -1) - Vector3(2, 3, -1) == Vector3(3, -3, 0)


def test_scalar_multiplication():
    assert Vector3(2, 4, 8) * 2 == Vector3(4, 8, 16)
    assert Vector3(-1.2, 3.0, -0.5) * -0.5 == Vector3(0.6, -1.5, 0.25)


def test_integer_division_truncates_toward_zero():
    assert Vector3(-2, 8, 7) / -2 == Vector3(1, -4, -3)


def test_integer_division_results_stay_integers():
    result = Vector3(9, -9, 4) / 2
    assert result == Vector3(4, -4, 2)
    assert all(isinstance(c, int) for c in result)


def test_float_division():
    assert Vector3(1.0, -3.0, 0.5) / 2 == Vector3(0.5, -1.5, 0.25)


def test_integer_division_by_zero_raises():
    """Integer faults propagate unchanged."""
    with pytest.raises(ZeroDivisionError):
        Vector3(1, 2, 3) / 0


def test_float_division_by_zero_follows_ieee():
    result = Vector3(1.0, -2.0, 0.0) / 0.0
    assert result.x == math.inf
    assert result.y == -math.inf
    assert math.isnan(result.z)


def test_division_by_negative_zero_flips_sign():
    result = Vector3(1.0, -1.0, 0.0) / -0.0
    assert result.x == -math.inf
    assert result.y == math.inf


# Commutativity


def test_addition_commutes():
    a = Vector3(3, -4, 0)
    b = Vector3(1, 0, -4)
    assert a + b == b + a


def test_scalar_multiplication_commutes():
    a = Vector3(-3, 2, 5)
    assert 2 * a == a * 2
    assert 0.5 * a == a * 0.5


# Immutability


def test_operations_do_not_mutate_operands():
    """CRITICAL: Arithmetic returns new vectors.

    Why: Operands may be shared by other vertices.
    """
    a = Vector3(1, 3, 2)
    b = Vector3(-3, 0, 4)

    c = a + b
    _ = a - b
    _ = a * 3
    _ = a / 2

    assert a == Vector3(1, 3, 2)
    assert b == Vector3(-3, 0, 4)
    assert c is not a and c is not b


# Unsupported operators


@pytest.mark.parametrize(
    "operation",
    [
        lambda v: v + 1,
        lambda v: 1 + v,
        lambda v: 1 - v,
        lambda v: v - 1,
        lambda v: 2 / v,
        lambda v: v * v,
        lambda v: v / v,
        lambda v: v * "2",
        lambda v: v * True,
    ],
    ids=[
        "vector+scalar",
        "scalar+vector",
        "scalar-vector",
        "vector-scalar",
        "scalar/vector",
        "vector*vector",
        "vector/vector",
        "vector*str",
        "vector*bool",
    ],
)
def test_unsupported_operators_raise_type_error(operation):
    with pytest.raises(TypeError):
        operation(Vector3(1, 2, 3))
