"""Unit tests for duplicate grouping and scan."""

import random

import pytest

from cleancontacts.domain import ContactRecord, group_duplicates, scan


def _ids(groups) -> list[set[str]]:
    return [set(g.record_ids) for g in groups]


def test_empty_input_returns_no_groups():
    assert scan([]) == []
    assert group_duplicates([]) == []


def test_differently_formatted_phones_group_together():
    records = [
        ContactRecord(id="a", given_name="Ann", phone_numbers=["555-123-4567"]),
        ContactRecord(id="b", given_name="Bea", phone_numbers=["(555) 123-4567"]),
    ]
    assert _ids(scan(records)) == [{"a", "b"}]


def test_transitive_sharing_forms_one_group():
    records = [
        ContactRecord(id="A", email_addresses=["a@x.com"]),
        ContactRecord(id="B", email_addresses=["a@x.com"], phone_numbers=["1234567890"]),
        ContactRecord(id="C", phone_numbers=["1234567890"]),
    ]
    groups = scan(records)
    assert len(groups) == 1
    assert groups[0].record_ids == ("A", "B", "C")


def test_transitivity_when_bridge_comes_last():
    records = [
        ContactRecord(id="A", email_addresses=["a@x.com"]),
        ContactRecord(id="C", phone_numbers=["1234567890"]),
        ContactRecord(id="B", email_addresses=["A@X.com"], phone_numbers=["123 456 7890"]),
    ]
    groups = scan(records)
    assert _ids(groups) == [{"A", "B", "C"}]
    assert groups[0].representative_id == "A"


def test_jo_joanna_bob_scenario():
    records = [
        ContactRecord(id="1", given_name="Jo", family_name="Lee", phone_numbers=["5551234567"]),
        ContactRecord(id="2", given_name="Joanna", family_name="Lee", phone_numbers=["555-123-4567"]),
        ContactRecord(id="3", given_name="Bob", family_name="X"),
    ]
    groups = scan(records)
    assert len(groups) == 1
    assert groups[0].record_ids == ("1", "2")
    assert "3" not in groups[0]


def test_inert_records_are_never_grouped():
    records = [
        ContactRecord(id="empty1"),
        ContactRecord(id="empty2"),
        ContactRecord(id="x", given_name="Sam", phone_numbers=["1"]),
        ContactRecord(id="y", given_name="Sam"),
    ]
    groups = scan(records)
    assert _ids(groups) == [{"x", "y"}]


def test_name_only_match_groups():
    records = [
        ContactRecord(id="1", given_name="Alex"),
        ContactRecord(id="2", given_name="alex "),
    ]
    assert _ids(scan(records)) == [{"1", "2"}]


def test_group_keys_cover_members():
    records = [
        ContactRecord(id="1", given_name="Jo", email_addresses=["jo@x.com"]),
        ContactRecord(id="2", given_name="Jo", phone_numbers=["42"]),
    ]
    (group,) = scan(records)
    assert {str(k) for k in group.keys} == {"name:jo", "email:jo@x.com", "phone:42"}


def test_groups_ordered_by_first_member_and_members_by_input_order():
    records = [
        ContactRecord(id="p", phone_numbers=["9"]),
        ContactRecord(id="q", email_addresses=["q@x.com"]),
        ContactRecord(id="r", email_addresses=["q@x.com"]),
        ContactRecord(id="s", phone_numbers=["9"]),
    ]
    groups = scan(records)
    assert [g.record_ids for g in groups] == [("p", "s"), ("q", "r")]


def test_scan_is_idempotent_and_order_independent():
    records = [
        ContactRecord(id=str(i), given_name=f"Person{i % 7}", phone_numbers=[f"555-01{i % 5:02d}"])
        for i in range(40)
    ]
    first = scan(records)
    assert scan(records) == first

    shuffled = list(records)
    random.Random(3).shuffle(shuffled)
    as_sets = sorted(sorted(s) for s in _ids(first))
    assert sorted(sorted(s) for s in _ids(scan(shuffled))) == as_sets


def test_duplicate_ids_in_input_rejected():
    records = [ContactRecord(id="1", given_name="A"), ContactRecord(id="1", given_name="B")]
    with pytest.raises(ValueError):
        scan(records)


def test_large_input_chain_collapses_to_one_group():
    # Each record shares a phone with the previous one.
    records = [
        ContactRecord(id=str(i), phone_numbers=[str(1000 + i), str(1001 + i)])
        for i in range(5000)
    ]
    groups = scan(records)
    assert len(groups) == 1
    assert len(groups[0]) == 5000
    assert groups[0].representative_id == "0"
