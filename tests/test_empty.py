import dataclasses
import weakref
from collections import deque

import pytest

from gconvkit.empty import is_empty, is_nil


class TestInt(int):
    pass


class TestString(str):
    pass


@dataclasses.dataclass
class Woman:
    def say(self):
        return "nice"


@dataclasses.dataclass
class Person:
    name: str = ""


class Stamp:
    def __init__(self, zero):
        self.zero = zero

    def is_zero(self):
        return self.zero


class Holder:
    pass


@pytest.mark.parametrize(
    "value",
    [
        None,
        0,
        0.0,
        False,
        b"",
        "",
        {},
        [],
        (),
        deque(),
        Woman(),
        TestInt(0),
        TestString(""),
        Stamp(True),
    ],
)
def test_is_empty_true(value):
    assert is_empty(value) is True


@pytest.mark.parametrize(
    "value",
    [
        1,
        1.0,
        -1,
        True,
        "0",
        "1",
        b"1",
        {"a": 1},
        ["1"],
        deque([1]),
        lambda a: "1",
        TestInt(1),
        TestString("1"),
        Person(),
        Stamp(False),
    ],
)
def test_is_empty_false(value):
    assert is_empty(value) is False


def test_is_nil_none():
    assert is_nil(None) is True


def test_is_nil_value():
    assert is_nil(0) is False


def test_is_nil_live_reference():
    target = Holder()
    ref = weakref.ref(target)
    assert is_nil(ref) is False
    assert is_nil(ref, True) is False


def test_is_nil_dead_reference_traced():
    target = Holder()
    ref = weakref.ref(target)
    del target
    assert is_nil(ref) is False
    assert is_nil(ref, True) is True