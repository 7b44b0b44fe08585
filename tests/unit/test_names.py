import re

import pytest

from verity.introspection import (
    MemberOrigin,
    NullRecognizer,
    PatternRecognizer,
    create_recognizer,
    normalize,
)


def test_ordinary_name_is_unchanged():
    assert normalize("city") == ("city", MemberOrigin.ORDINARY)
    assert normalize("_city") == ("_city", MemberOrigin.ORDINARY)


def test_sunder_storage_is_accessor_backing():
    assert normalize("_value_") == ("value", MemberOrigin.SYNTHESIZED_ACCESSOR)
    assert normalize("_cache_key_") == ("cache_key", MemberOrigin.SYNTHESIZED_ACCESSOR)


def test_mangled_private_name_is_capture():
    assert normalize("_Account__balance") == ("balance", MemberOrigin.SYNTHESIZED_CAPTURE)
    assert normalize("_Savings_Account__rate") == ("rate", MemberOrigin.SYNTHESIZED_CAPTURE)


@pytest.mark.parametrize(
    "raw_name",
    ["_Account__", "__init__", "_Account__x__", "value_", "_value", "__balance", "_"],
)
def test_partial_matches_are_ordinary(raw_name):
    assert normalize(raw_name) == (raw_name, MemberOrigin.ORDINARY)


def test_normalize_is_pure():
    assert normalize("_Account__balance") == normalize("_Account__balance")


def test_null_recognizer_disables_demangling():
    recognizer = NullRecognizer()
    assert recognizer.normalize("_value_") == ("_value_", MemberOrigin.ORDINARY)
    assert normalize("_Account__balance", recognizer) == ("_Account__balance", MemberOrigin.ORDINARY)


def test_custom_rules_are_tried_in_order():
    recognizer = PatternRecognizer([
        (re.compile(r"<(?P<name>\w+)>k__BackingField"), MemberOrigin.SYNTHESIZED_ACCESSOR),
        (re.compile(r"<(?P<name>\w+)>i__Field"), MemberOrigin.SYNTHESIZED_CAPTURE),
    ])

    assert recognizer.normalize("<Name>k__BackingField") == ("Name", MemberOrigin.SYNTHESIZED_ACCESSOR)
    assert recognizer.normalize("<Name>i__Field") == ("Name", MemberOrigin.SYNTHESIZED_CAPTURE)
    # Missing closing delimiter: strict, not best effort
    assert recognizer.normalize("<Name k__BackingField") == ("<Name k__BackingField", MemberOrigin.ORDINARY)


def test_create_recognizer():
    assert isinstance(create_recognizer("none"), NullRecognizer)
    assert create_recognizer("python").normalize("_A__b") == ("b", MemberOrigin.SYNTHESIZED_CAPTURE)

    with pytest.raises(ValueError):
        create_recognizer("clr")
