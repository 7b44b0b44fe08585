import dataclasses
from dataclasses import dataclass
from enum import Enum

import pytest

from verity.comparison import StructuralComparator, VerdictKind, compare
from verity.introspection import NullRecognizer

from conftest import Address, Person


@dataclass
class Money:
    amount: int
    currency: str


class Wallet:
    def __init__(self, owner, cash, tags=None):
        self.owner = owner
        self.cash = cash
        self.tags = tags


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


class Node:
    def __init__(self, value):
        self.value = value
        self.next = None


class Pair:
    def __init__(self, left, right):
        self.left = left
        self.right = right


def test_same_instance_matches(make_person):
    person = make_person()
    assert compare(person, person).matched


def test_equal_graphs_match(make_person):
    assert compare(make_person(), make_person()).matched


def test_leaf_difference_reports_its_path(make_person):
    verdict = compare(make_person(city="Oslo"), make_person(city="Bergen"))

    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ("address", "city")
    assert verdict.dotted_path == "address.city"
    assert verdict.expected == "Oslo"
    assert verdict.actual == "Bergen"


def test_first_difference_wins(make_person):
    verdict = compare(make_person(name="Ann", age=34), make_person(name="Bob", age=40))

    assert verdict.path == ("name",)


def test_expected_none_member():
    verdict = compare(Address("Oslo", street=None), Address("Oslo", street="Main St"))

    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ("street",)
    assert verdict.reason == "expected_none"
    assert compare(Address("Oslo"), Address("Oslo")).matched


def test_actual_none_where_object_expected(make_person):
    verdict = compare(make_person(), Person("Ann", 34, None))

    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ("address",)
    assert verdict.reason == "actual_none"


def test_extra_member_on_actual_is_missing_from_expected():
    actual = Address("Oslo")
    actual.zip_code = "0150"

    verdict = compare(Address("Oslo"), actual)

    assert verdict.kind == VerdictKind.MISSING_MEMBER
    assert verdict.path == ("zip_code",)
    assert verdict.member_label == "zip_code"


def test_extra_member_on_expected_is_ignored():
    expected = Address("Oslo")
    expected.zip_code = "0150"

    assert compare(expected, Address("Oslo")).matched


def test_members_with_value_equality_are_not_walked():
    verdict = compare(
        Wallet("Ann", Money(10, "EUR"), tags=["a", "b"]),
        Wallet("Ann", Money(10, "EUR"), tags=["a", "c"]),
    )

    assert verdict.path == ("tags",)
    assert verdict.actual == ["a", "c"]

    verdict = compare(Wallet("Ann", Money(10, "EUR")), Wallet("Ann", Money(12, "EUR")))
    assert verdict.path == ("cash",)
    assert verdict.expected == Money(10, "EUR")


def test_member_declared_on_base_type():
    verdict = compare(Dog("Rex", "lab"), Dog("Max", "lab"))

    assert verdict.path == ("name",)


def test_mangled_and_plain_members_are_the_same_member():
    assert compare(PlainAccount(10), Account(10)).matched
    assert compare(Account(10), PlainAccount(10)).matched

    verdict = compare(PlainAccount(10), Account(11))
    assert verdict.path == ("balance",)


def test_null_recognizer_keeps_raw_names():
    comparator = StructuralComparator(recognizer=NullRecognizer())
    verdict = comparator.compare(PlainAccount(10), Account(10))

    assert verdict.kind == VerdictKind.MISSING_MEMBER
    assert verdict.member_label == "_Account__balance"


def test_root_values_without_state_compare_by_value():
    assert compare(1, 1).matched
    assert compare("a", "a").matched

    verdict = compare(1, 2)
    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ()


def test_root_none():
    assert compare(None, None).matched
    assert compare(None, Address("Oslo")).reason == "expected_none"
    assert compare(Address("Oslo"), None).reason == "actual_none"


def test_object_against_scalar_is_missing_members():
    verdict = compare(5, Address("Oslo"))

    assert verdict.kind == VerdictKind.MISSING_MEMBER
    assert verdict.path == ("city",)


def test_cycle_is_detected():
    node = Node(1)
    node.next = node

    verdict = compare(node, node)

    assert verdict.kind == VerdictKind.CYCLE_DETECTED
    assert verdict.path == ("next",)


def test_shared_subobject_is_not_a_cycle():
    shared = Address("Oslo")

    assert compare(Pair(Address("Oslo"), Address("Oslo")), Pair(shared, shared)).matched


def test_cycle_detection_can_be_disabled():
    node = Node(1)
    node.next = node
    comparator = StructuralComparator(detect_cycles=False)

    with pytest.raises(RecursionError):
        comparator.compare(node, node)


def test_path_prefix_is_kept():
    verdict = StructuralComparator().compare(Address("Oslo"), Address("Bergen"), path=("home",))

    assert verdict.path == ("home", "city")


class Holder:
    def __init__(self, target):
        self.target = target


def _double(x):
    return x * 2


def _triple(x):
    return x * 3


def test_classes_compare_by_identity():
    verdict = compare(Holder(int), Holder(str))

    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ("target",)
    assert verdict.reason == "not_same_instance"
    assert compare(Holder(int), Holder(int)).matched


def test_functions_compare_by_identity():
    verdict = compare(Holder(_double), Holder(_triple))

    assert verdict.kind == VerdictKind.MISMATCH
    assert verdict.path == ("target",)
    assert compare(Holder(_double), Holder(_double)).matched


def test_modules_compare_by_identity():
    assert compare(Holder(pytest), Holder(dataclasses)).kind == VerdictKind.MISMATCH


class Color(Enum):
    RED = 1
    GREEN = 2


class Shade:
    def __init__(self, value, name):
        self.value = value
        self.name = name


class Boxed:
    def __init__(self, value):
        self._value_ = value


class Plain:
    def __init__(self, value):
        self.value = value


def test_accessor_storage_and_plain_member_are_the_same_member():
    assert compare(Plain(3), Boxed(3)).matched
    assert compare(Boxed(3), Plain(3)).matched

    verdict = compare(Boxed(3), Plain(4))
    assert verdict.path == ("value",)
    assert verdict.expected == 3
    assert verdict.actual == 4


def test_enum_member_as_expected_value():
    assert compare(Color.RED, Shade(1, "RED")).matched

    verdict = compare(Color.RED, Shade(2, "RED"))
    assert verdict.path == ("value",)
    assert verdict.expected == 1
