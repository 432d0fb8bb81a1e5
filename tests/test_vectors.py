import math

import pytest

from exercisekit.vectors import magnitude, main, normalize


def test_unit_vector_has_magnitude_one():
    assert magnitude([0.0, 1.0, 0.0]) == 1.0


def test_pythagorean_triple():
    assert magnitude([3.0, 4.0, 0.0]) == 5.0


def test_normalize_gives_unit_length():
    v = [1.0, 2.0, 9.0]
    normalize(v)
    assert math.isclose(magnitude(v), 1.0)


def test_normalize_keeps_direction():
    original = [1.0, 2.0, 9.0]
    v = list(original)
    normalize(v)
    ratio = original[0] / v[0]
    assert all(math.isclose(o / n, ratio) for o, n in zip(original, v))


def test_normalize_modifies_in_place():
    v = [0.0, 0.0, 2.0]
    same = v
    normalize(v)
    assert same is v
    assert v == [0.0, 0.0, 1.0]


def test_normalize_zero_vector_rejected():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_main_prints_unit_magnitude(capsys):
    assert main() == 0
    first_line = capsys.readouterr().out.splitlines()[0]
    assert first_line == "Magnitude of a unit vector: 1.0"