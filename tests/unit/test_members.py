import pytest

from verity.exceptions import MemberResolutionError
from verity.introspection import MemberOrigin, ObjectIntrospector


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


class SavingsAccount(Account):
    def __init__(self, balance, rate):
        super().__init__(balance)
        self.rate = rate


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = x
        self.y = y


class Secret:
    __slots__ = ("__code",)

    def __init__(self, code):
        self.__code = code


@pytest.fixture
def introspector() -> ObjectIntrospector:
    return ObjectIntrospector()


def test_members_are_listed_most_derived_owner_first(introspector):
    members = introspector.members(Dog("Rex", "lab"))

    assert [m.raw_name for m in members] == ["breed", "name"]
    assert members[0].owner is Dog
    assert members[1].owner is Animal


def test_mangled_member_is_owned_by_its_class(introspector):
    members = introspector.members(SavingsAccount(100, 0.02))
    by_name = {m.raw_name: m for m in members}

    balance = by_name["_Account__balance"]
    assert balance.owner is Account
    assert balance.semantic_name == "balance"
    assert balance.origin == MemberOrigin.SYNTHESIZED_CAPTURE
    assert by_name["rate"].owner is SavingsAccount


def test_slots_are_members(introspector):
    members = introspector.members(Point(1, 2))

    assert [m.raw_name for m in members] == ["x", "y"]
    assert all(m.owner is Point for m in members)
    assert [m.get_value(Point(3, 4)) for m in members] == [3, 4]


def test_unset_slots_are_skipped(introspector):
    point = Point.__new__(Point)
    point.x = 1

    assert [m.raw_name for m in introspector.members(point)] == ["x"]


def test_private_slots_are_stored_mangled(introspector):
    (member,) = introspector.members(Secret(42))

    assert member.raw_name == "_Secret__code"
    assert member.semantic_name == "code"
    assert member.get_value(Secret(7)) == 7


def test_dunder_names_are_not_members(introspector):
    dog = Dog("Rex", "lab")
    setattr(dog, "__marker__", True)

    assert "__marker__" not in [m.raw_name for m in introspector.members(dog)]


def test_declared_members_filters_by_owner(introspector):
    dog = Dog("Rex", "lab")

    assert [m.raw_name for m in introspector.declared_members(dog, Animal)] == ["name"]
    assert [m.raw_name for m in introspector.declared_members(dog, Dog)] == ["breed"]
    assert introspector.declared_members(dog, object) == []


def test_has_state(introspector):
    assert introspector.has_state(Dog("Rex", "lab"))
    assert introspector.has_state(Point(1, 2))
    assert not introspector.has_state(5)
    assert not introspector.has_state([1, 2])


def test_reading_a_removed_member_raises(introspector):
    dog = Dog("Rex", "lab")
    breed = introspector.members(dog)[0]
    del dog.breed

    with pytest.raises(MemberResolutionError):
        breed.get_value(dog)


def test_classes_functions_and_modules_have_no_state(introspector):
    assert not introspector.has_state(Dog)
    assert not introspector.has_state(test_has_state)
    assert not introspector.has_state(pytest)
    assert not introspector.has_state(len)
