from enum import Enum

import pytest

from verity.introspection import MemberOrigin, MemberResolver, NullRecognizer, resolve


class Animal:
    name: str

    def __init__(self, name):
        self.name = name


class Dog(Animal):
    def __init__(self, name, breed):
        super().__init__(name)
        self.breed = breed


class Account:
    def __init__(self, balance):
        self.__balance = balance


class PlainAccount:
    def __init__(self, balance):
        self.balance = balance


def test_exact_name_on_the_type_itself():
    dog = Dog("Rex", "lab")
    member = resolve(dog, Dog, "breed")

    assert member.raw_name == "breed"
    assert member.owner is Dog


def test_climbs_to_the_ancestor_declaring_the_member():
    dog = Dog("Rex", "lab")
    member = resolve(dog, Dog, "name")

    assert member.owner is Animal
    assert member.get_value(dog) == "Rex"


def test_search_starts_at_the_given_level():
    assert resolve(Dog("Rex", "lab"), Animal, "breed") is None


def test_unknown_member_is_not_found():
    assert resolve(Dog("Rex", "lab"), Dog, "colour") is None


def test_semantic_name_matches_mangled_member():
    account = Account(10)
    member = resolve(account, Account, "balance")

    assert member.raw_name == "_Account__balance"
    assert member.get_value(account) == 10


def test_mangled_name_matches_plain_member():
    plain = PlainAccount(10)
    member = resolve(plain, PlainAccount, "_Account__balance")

    assert member.raw_name == "balance"


def test_semantic_matching_can_be_disabled():
    resolver = MemberResolver(recognizer=NullRecognizer())

    assert resolver.resolve(PlainAccount(10), PlainAccount, "_Account__balance") is None


def test_root_type_declares_nothing():
    assert resolve(object(), object, "anything") is None


def test_type_outside_the_hierarchy_is_rejected():
    with pytest.raises(ValueError):
        resolve(Dog("Rex", "lab"), Account, "name")


class Boxed:
    def __init__(self, value):
        self._value_ = value


class Plain:
    def __init__(self, value):
        self.value = value


class Color(Enum):
    RED = 1


def test_plain_name_finds_accessor_storage():
    boxed = Boxed(3)
    member = resolve(boxed, Boxed, "value")

    assert member.raw_name == "_value_"
    assert member.origin == MemberOrigin.SYNTHESIZED_ACCESSOR
    assert member.get_value(boxed) == 3


def test_accessor_storage_name_finds_plain_member():
    member = resolve(Plain(3), Plain, "_value_")

    assert member.raw_name == "value"


def test_enum_value_is_found_by_plain_name():
    member = resolve(Color.RED, Color, "value")

    assert member.raw_name == "_value_"
    assert member.get_value(Color.RED) == 1
