import math

import pytest

from weekendtracer.vec import Vec3, cross, dot, reflect, refract, unit_vector

A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-0.5, 4.0, 2.0)


def close(v, w, tol=1e-9):
    return all(math.isclose(p, q, abs_tol=tol) for p, q in zip(v, w))


def test_default_is_zero():
    assert Vec3() == Vec3.splat(0.0)


def test_splat_sets_all_components():
    v = Vec3.splat(0.7)
    assert (v.x, v.y, v.z) == (0.7, 0.7, 0.7)


def test_colour_accessors_alias_components():
    assert (A.r, A.g, A.b) == (A.x, A.y, A.z)


def test_iteration_yields_components():
    assert tuple(A) == (1.5, -2.0, 3.25)


def test_add_then_subtract_round_trip():
    assert (A + B) - B == A


def test_negation_cancels():
    assert A + (-A) == Vec3()


def test_scalar_multiplication_commutes():
    assert 2 * A == A * 2


def test_divide_then_multiply_round_trip():
    assert (A / 2) * 2 == A


def test_elementwise_product_and_division():
    product = A * B
    assert product.x == A.x * B.x and product.z == A.z * B.z
    assert close(product / B, A)


def test_dot_with_self_is_length_squared():
    assert dot(A, A) == A.length_squared()


def test_length_is_root_of_length_squared():
    assert math.isclose(A.length() ** 2, A.length_squared())


def test_cross_of_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    c = cross(A, B)
    assert math.isclose(dot(c, A), 0.0, abs_tol=1e-9)
    assert math.isclose(dot(c, B), 0.0, abs_tol=1e-9)
    assert close(cross(B, A), -c)


def test_unit_vector_has_length_one_and_same_direction():
    u = unit_vector(A)
    assert math.isclose(u.length(), 1.0)
    assert close(cross(u, A), Vec3())
    assert dot(u, A) > 0


def test_unit_vector_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        unit_vector(Vec3())


def test_reflect_flips_normal_component_and_keeps_length():
    n = unit_vector(Vec3(0.3, 1.0, -0.2))
    r = reflect(A, n)
    assert math.isclose(dot(r, n), -dot(A, n))
    assert math.isclose(r.length(), A.length())
    assert close(reflect(r, n), A)


def test_refract_with_equal_indices_is_straight_through():
    uv = unit_vector(Vec3(0.4, -1.0, 0.1))
    n = Vec3(0, 1, 0)
    out = refract(uv, n, 1.0)
    assert (out.x, out.y, out.z) == pytest.approx((uv.x, uv.y, uv.z), abs=1e-9)


def test_refract_result_is_unit_when_refraction_possible():
    uv = unit_vector(Vec3(0.4, -1.0, 0.1))
    n = Vec3(0, 1, 0)
    out = refract(uv, n, 1 / 1.5)
    assert math.isclose(out.length(), 1.0)
    assert dot(out, n) < 0


def test_str_matches_space_separated_format():
    assert str(Vec3(1.5, -2.0, 3.25)) == "1.5 -2.0 3.25"


def test_vectors_are_immutable():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 0.0
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)