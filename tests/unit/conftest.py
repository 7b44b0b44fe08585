"""Shared fixtures for unit tests."""

import pytest

from verity import CheckEngine


class Address:
    def __init__(self, city, street=None):
        self.city = city
        self.street = street


class Person:
    def __init__(self, name, age, address=None):
        self.name = name
        self.age = age
        self.address = address


@pytest.fixture
def engine() -> CheckEngine:
    """Engine in the "must hold" direction."""
    return CheckEngine()


@pytest.fixture
def negated_engine() -> CheckEngine:
    """Engine in the "must not hold" direction."""
    return CheckEngine(negated=True)


@pytest.fixture
def make_person():
    """Build a Person living at an Address."""
    def _make(name="Ann", age=34, city="Oslo", street=None):
        return Person(name, age, Address(city, street))
    return _make
