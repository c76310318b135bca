from datetime import timedelta

import pytest

from vcard_parser.core.exceptions import DateTimeParseError, UnsupportedCalendarError
from vcard_parser.properties import lookup
from vcard_parser.values.interpreters import (
    interpret,
    parse_csv,
    parse_gender,
    parse_name,
    parse_org,
    parse_related,
    parse_timezone,
    parse_typed,
)
from vcard_parser.values.types import (
    DateAndOrTime,
    Gender,
    Organization,
    Sex,
    StructuredName,
    TimeZone,
    TypedValue,
)


def test_csv_split():
    assert parse_csv("a,b,c") == ("a", "b", "c")
    assert parse_csv("single") == ("single",)


def test_csv_escaped_comma_does_not_split():
    assert parse_csv(r"Smith\, Jr.,Bob") == (r"Smith\, Jr.", "Bob")


def test_structured_name():
    name = parse_name("Public;John;Quinlan,Q.;Mr.;Esq.")

    assert name == StructuredName(
        family=("Public",),
        given=("John",),
        additional=("Quinlan", "Q."),
        honorific_prefix=("Mr.",),
        honorific_suffix=("Esq.",),
    )


def test_structured_name_with_empty_slots():
    name = parse_name("Perreault;Simon;;;ing. jr,M.Sc.")

    assert name.family == ("Perreault",)
    assert name.given == ("Simon",)
    assert name.additional == ()
    assert name.honorific_prefix == ()
    assert name.honorific_suffix == ("ing. jr", "M.Sc.")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("M", Gender(sex=Sex.MALE)),
        ("F", Gender(sex=Sex.FEMALE)),
        ("M;man", Gender(sex=Sex.MALE, identity="man")),
        ("N;woman", Gender(identity="woman")),
        ("O;potted plant", Gender(sex=Sex.OTHER, identity="potted plant")),
        ("U", Gender()),
    ],
)
def test_gender(text, expected):
    assert parse_gender(text) == expected


def test_org():
    assert parse_org("ABC, Inc.;North American Division") == Organization(
        name="ABC, Inc.", unit="North American Division"
    )
    assert parse_org("Viagenie") == Organization(name="Viagenie")


def test_typed_value_with_type_and_pref():
    value = parse_typed("+1-555-0100", {"TYPE": ("cell",), "PREF": ("1",)}, default_type="voice")

    assert value == TypedValue(value="+1-555-0100", type=("cell",), pref=1)


def test_typed_value_default_type():
    value = parse_typed("+1-555-0100", {}, default_type="voice")

    assert value.type == ("voice",)
    assert value.pref is None


def test_typed_value_quoted_type_list_split_and_lower_cased():
    value = parse_typed("x", {"TYPE": ("WORK,Voice",)})

    assert value.type == ("work", "voice")


def test_typed_value_without_type():
    value = parse_typed("xmpp:alice@example.com", {"TYPE": ("home",), "PREF": ("2",)}, with_type=False)

    assert value == TypedValue(value="xmpp:alice@example.com", pref=2)


def test_non_numeric_pref_is_ignored():
    assert parse_typed("x", {"PREF": ("high",)}).pref is None


def test_related_takes_value_attribute():
    related = parse_related("ignored", {"VALUE": ("urn:uuid:f81d4fae",), "TYPE": ("friend",)})

    assert related == TypedValue(value="urn:uuid:f81d4fae", type=("friend",))


def test_related_value_type_token_keeps_text():
    related = parse_related("http://example.com/bob", {"VALUE": ("uri",), "TYPE": ("co-worker",)})

    assert related.value == "http://example.com/bob"
    assert related.type == ("co-worker",)


def test_timezone():
    assert parse_timezone("-0500", {"VALUE": ("utc-offset",)}) == TimeZone(utc_offset=timedelta(hours=-5))
    assert parse_timezone("Raleigh/North America", {}) == TimeZone(name="Raleigh/North America")

    with pytest.raises(DateTimeParseError):
        parse_timezone("five", {"VALUE": ("utc-offset",)})


def test_interpret_dispatches_on_kind():
    assert interpret(lookup("FN"), "John Doe") == "John Doe"
    assert interpret(lookup("NICKNAME"), "Jim,Jimmie") == ("Jim", "Jimmie")
    assert interpret(lookup("BDAY"), "--0203") == DateAndOrTime(month=2, day=3)
    assert interpret(lookup("TEL"), "+1") == TypedValue(value="+1", type=("voice",))
    assert interpret(lookup("IMPP"), "sip:a@b", {"TYPE": ("work",)}) == TypedValue(value="sip:a@b")
    assert interpret(lookup("ORG"), "Acme") == Organization(name="Acme")


def test_date_value_as_text():
    assert interpret(lookup("BDAY"), "circa 1800", {"VALUE": ("text",)}) == "circa 1800"


def test_date_value_non_gregorian_calendar():
    with pytest.raises(UnsupportedCalendarError):
        interpret(lookup("BDAY"), "19961022", {"CALSCALE": ("julian",)})

    assert interpret(lookup("BDAY"), "19961022", {"CALSCALE": ("gregorian",)}).year == 1996


def test_invalid_date_raises():
    with pytest.raises(DateTimeParseError):
        interpret(lookup("ANNIVERSARY"), "not a date")


def test_pref_must_be_decimal():
    assert parse_typed("x", {"PREF": ("²",)}).pref is None
    assert parse_typed("x", {"PREF": (" 3 ",)}).pref == 3


def test_org_with_empty_unit():
    assert parse_org("ABC;") == Organization(name="ABC")


def test_gender_sex_only_forms():
    assert parse_gender("O") == Gender(sex=Sex.OTHER)
    assert parse_gender("N") == Gender()
    assert parse_gender("N").identity is None
