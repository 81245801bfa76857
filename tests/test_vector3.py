import math

import pytest

from labkit.vector3 import Vector3, main


@pytest.fixture
def a():
    return Vector3(1.0, 5.0, 3.0)


@pytest.fixture
def b():
    return Vector3(7.0, 4.0, 8.0)


def test_default_is_origin():
    assert Vector3() == Vector3(0, 0, 0)


def test_addition_commutes_and_inverts(a, b):
    assert a + b == b + a
    assert (a + b) + b * -1.0 == a


def test_scaling(a):
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0


def test_cross_is_orthogonal(a, b):
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_anticommutes(a, b):
    assert a.cross(b) == b.cross(a) * -1.0


def test_unit_axes():
    i, j, k = Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1)
    assert i.cross(j) == k
    assert i.dot(j) == 0


def test_normalize_has_unit_length_and_same_direction(a):
    n = a.normalize()
    assert math.sqrt(n.dot(n)) == pytest.approx(1.0)
    parallel = n.cross(a)
    assert parallel.dot(parallel) == pytest.approx(0.0, abs=1e-12)
    assert n.dot(a) > 0


def test_normalize_zero_vector_rejected():
    with pytest.raises(ValueError):
        Vector3().normalize()


def test_str(a):
    assert str(a) == "(1, 5, 3)"


def test_main(capsys):
    assert main([]) == 0
    labels = [line.split(" = ")[0] for line in capsys.readouterr().out.splitlines()]
    assert labels == ["a + b", "a * 2", "a . b", "a x b", "normalized a"]