import json

from vcard_parser.exporter import cards_to_json, export_cards_json, to_jcard
from vcard_parser.parser_core import parse_cards


def test_jcard_member_names_and_values(contacts_text):
    jcard = to_jcard(parse_cards(contacts_text)[0])

    assert jcard["fn"] == "Simon Perreault"
    assert jcard["n"] == {
        "family-name": ["Perreault"],
        "given-name": ["Simon"],
        "honorific-suffix": ["ing. jr", "M.Sc."],
    }
    assert jcard["bday"] == "--02-03"
    assert jcard["anniversary"] == "2009-08-08T14:30-05:00"
    assert jcard["gender"] == {"sex": "male"}
    assert jcard["org"] == [{"organization-name": "Viagenie"}]
    assert jcard["tz"] == {"utc-offset": "-05:00"}
    assert jcard["tel"][0] == {
        "value": "tel:+1-418-656-9254;ext=102",
        "type": ["work", "voice"],
        "pref": 1,
    }


def test_jcard_keys_follow_property_order(contacts_text):
    jcard = to_jcard(parse_cards(contacts_text)[0])
    keys = list(jcard)

    assert keys[:3] == ["version", "fn", "n"]
    assert keys[-1] == "uid"


def test_cards_to_json_is_valid_json(contacts_text):
    payload = json.loads(cards_to_json(parse_cards(contacts_text), indent=None))

    assert [c["fn"] for c in payload] == ["Simon Perreault", "Jörg Müller"]
    assert payload[1]["categories"] == [["friends", "hiking"]]


def test_export_cards_json_writes_file(tmp_path, contacts_text):
    out = tmp_path / "nested" / "cards.json"
    export_cards_json(parse_cards(contacts_text), out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 2
    assert data[1]["note"] == ["first line\r\nsecond line"]


def test_card_to_json_method():
    card = parse_cards("BEGIN:VCARD\nFN:x\nBDAY:19961022T140000Z\nEND:VCARD\n")[0]

    assert json.loads(card.to_json()) == {"fn": "x", "bday": "1996-10-22T14:00:00Z"}
