"""Tests for the greeter kata."""

import pytest

from katadojo.katas.greeter import Greeter


def test_hello_world():
    assert Greeter().hello_world() == "Hello, World!"


@pytest.mark.parametrize("name, expected", [
    ("", "Hello !"),
    ("Peter", "Hello Peter!"),
    ("Ada Lovelace", "Hello Ada Lovelace!"),
])
def test_hello_person(name, expected):
    assert Greeter().hello_person(name) == expected
