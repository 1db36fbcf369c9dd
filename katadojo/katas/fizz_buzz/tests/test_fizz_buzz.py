"""Tests for the FizzBuzz kata."""

import pytest

from katadojo.katas.fizz_buzz import FizzBuzz


@pytest.fixture
def sut():
    return FizzBuzz()


@pytest.mark.parametrize("num", [6, 9, 12, 18, 99])
def test_fizz(sut, num):
    assert sut.go(num) == "Fizz"


@pytest.mark.parametrize("num", [5, 10, 20, 25, 100])
def test_buzz(sut, num):
    assert sut.go(num) == "Buzz"


@pytest.mark.parametrize("num", [15, 30, 45, 0])
def test_fizzbuzz(sut, num):
    assert sut.go(num) == "FizzBuzz"


def test_fizzwhiz(sut):
    assert sut.go(3) == "FizzWhiz"


@pytest.mark.parametrize("num, expected", [(1, "1"), (2, "2"), (7, "7"), (11, "11")])
def test_number_itself(sut, num, expected):
    assert sut.go(num) == expected
