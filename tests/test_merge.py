import pytest

from vcard_parser.core.exceptions import MergeConflictError
from vcard_parser.entities import VCard, merge_cards
from vcard_parser.values.types import TypedValue


def test_different_uids_refuse_to_merge():
    left = VCard({"fn": "a", "uid": "uuid:1"})
    right = VCard({"fn": "a", "uid": "uuid:2"})

    with pytest.raises(MergeConflictError) as excinfo:
        left.merge(right)
    assert excinfo.value.left_uid == "uuid:1"
    assert excinfo.value.right_uid == "uuid:2"


def test_equal_values_kept_once_and_differences_ordered_left_then_right():
    left = VCard({"uid": "uuid:1", "fn": "John", "title": ["Boss"]})
    right = VCard({"uid": "uuid:1", "fn": "Johnny", "title": ["Boss"]})

    merged = merge_cards(left, right)

    assert merged["uid"] == "uuid:1"
    assert merged["title"] == ["Boss"]
    assert merged["fn"] == ["John", "Johnny"]


def test_multivalued_entries_are_unioned():
    a, b, c = TypedValue("1", ("voice",)), TypedValue("2", ("voice",)), TypedValue("3", ("cell",))
    left = VCard({"tel": [a, b]})
    right = VCard({"tel": [b, c]})

    merged = left.merge(right)

    assert merged["tel"] == [a, b, c]


def test_one_sided_properties_are_copied():
    left = VCard({"fn": "x", "note": ["left"]})
    right = VCard({"bday": "circa 1800", "uid": "uuid:9"})

    merged = left.merge(right)

    assert merged["fn"] == "x"
    assert merged["note"] == ["left"]
    assert merged["bday"] == "circa 1800"
    assert merged["uid"] == "uuid:9"


def test_inputs_are_not_mutated():
    left = VCard({"note": ["a"]})
    right = VCard({"note": ["b"]})

    merged = left.merge(right)
    merged["note"].append("c")

    assert left["note"] == ["a"]
    assert right["note"] == ["b"]
    assert isinstance(merged, VCard)
