import pytest

from mandelview.core.complex_num import ComplexNum
from mandelview.core.escape import IN_SET, escape_time


@pytest.mark.parametrize("max_iter", [1, 10, 100, 1000])
def test_origin_never_escapes(max_iter):
    assert escape_time(ComplexNum(0.0, 0.0), max_iter) == IN_SET == 0


def test_two_diverges_immediately():
    assert escape_time(ComplexNum(2.0, 0.0), 10) in (0, 1)


def test_far_point_escapes_on_first_step():
    assert escape_time(ComplexNum(2.0, 2.0), 10) == 0


@pytest.mark.parametrize("max_iter", [1, 2, 50, 500])
def test_interior_point_stays_in_set_as_cap_grows(max_iter):
    # c = -1 cycles 0 -> -1 -> 0
    assert escape_time(ComplexNum(-1.0, 0.0), max_iter) == IN_SET


@pytest.mark.parametrize("max_iter", [5, 10, 100, 1000])
def test_escape_count_independent_of_larger_cap(max_iter):
    assert escape_time(ComplexNum(0.5, 0.0), max_iter) == 4


def test_cap_reached_before_escape_reports_in_set():
    assert escape_time(ComplexNum(0.5, 0.0), 4) == IN_SET


def test_zero_cap_reports_in_set():
    assert escape_time(ComplexNum(2.0, 2.0), 0) == IN_SET
