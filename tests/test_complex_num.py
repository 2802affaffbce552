import dataclasses
from fractions import Fraction

import pytest

from mandelview.core.complex_num import ComplexNum


def test_squared():
    assert ComplexNum(3.0, 4.0).squared() == ComplexNum(-7.0, 24.0)
    assert ComplexNum(0.0, 1.0).squared() == ComplexNum(-1.0, 0.0)


def test_add_is_componentwise():
    assert ComplexNum(1.5, -2.0).add(ComplexNum(0.5, 3.0)) == ComplexNum(2.0, 1.0)


def test_norm_sqr():
    assert ComplexNum(3.0, 4.0).norm_sqr() == 25.0


def test_operations_return_new_values():
    z = ComplexNum(1.0, 2.0)
    z.squared().add(z)
    assert z == ComplexNum(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        z.re = 5.0


def test_generic_over_other_fields():
    z = ComplexNum(Fraction(1, 2), Fraction(1, 3))
    assert z.squared() == ComplexNum(Fraction(5, 36), Fraction(1, 3))
    assert ComplexNum(2, 3).squared().add(ComplexNum(1, 1)) == ComplexNum(-4, 13)
