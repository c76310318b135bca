import pytest

from vcard_parser.properties import (
    ALL_KEYS,
    MULTIVALUED_KEYS,
    PROPERTIES,
    ValueKind,
    is_multivalued,
    lookup,
)


def test_lookup_is_case_insensitive():
    assert lookup("tel") is lookup("TEL")
    assert lookup("TEL").key == "tel"
    assert lookup("TEL").kind is ValueKind.COMPOUND
    assert lookup("TEL").default_type == "voice"


def test_unknown_names_miss():
    assert lookup("X-CUSTOM") is None
    assert lookup("URL") is None
    assert lookup("") is None


def test_every_kind_has_an_interpreter():
    from vcard_parser.values.interpreters import INTERPRETERS

    assert set(INTERPRETERS) == set(ValueKind)


def test_cardinality():
    for key in ("tel", "email", "note", "categories", "org", "related", "adr", "impp", "lang"):
        assert is_multivalued(key)
    for key in ("fn", "n", "bday", "gender", "uid", "rev", "tz"):
        assert not is_multivalued(key)
    assert MULTIVALUED_KEYS <= set(ALL_KEYS)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        PROPERTIES["URL"] = PROPERTIES["FN"]


def test_all_keys_order_and_uniqueness():
    assert ALL_KEYS[0] == "version"
    assert ALL_KEYS[1] == "fn"
    assert len(ALL_KEYS) == len(set(ALL_KEYS)) == len(PROPERTIES)


def test_enumerations():
    from vcard_parser.properties import EMAIL_TYPES, LANG_TYPES, RELATED_TYPES, TEL_TYPES

    assert "voice" in TEL_TYPES and "cell" in TEL_TYPES
    assert "internet" in EMAIL_TYPES
    assert "co-worker" in RELATED_TYPES and "emergency" in RELATED_TYPES
    assert LANG_TYPES == ("work", "home")
