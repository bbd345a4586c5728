from datetime import timedelta

import pytest

from reqtools.timeout import Timeout


def test_integer_milliseconds():
    assert Timeout(1).milliseconds() == 1


def test_timedelta_milliseconds():
    assert Timeout(timedelta(milliseconds=1500)).milliseconds() == 1500


def test_timedelta_and_int_equal():
    assert Timeout(timedelta(milliseconds=250)) == Timeout(250)


def test_maximum_value_accepted():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1


def test_minimum_value_accepted():
    assert Timeout(-(2**63)).milliseconds() == -(2**63)


def test_overflow_raises():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_underflow_raises():
    with pytest.raises(OverflowError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


def test_invalid_type_raises():
    with pytest.raises(TypeError):
        Timeout("100")