"""Tests for canonical key derivation."""

import pytest

from cleancontacts.domain import CanonicalKey, ContactRecord, KeyKind, canonical_keys


def test_empty_record_has_no_keys():
    assert canonical_keys(ContactRecord(id="1")) == set()
    blank = ContactRecord(id="2", given_name="  ", family_name="", phone_numbers=["", "-"], email_addresses=[""])
    assert canonical_keys(blank) == set()


def test_name_key_is_trimmed_and_lowercased():
    keys = canonical_keys(ContactRecord(id="1", given_name="  Jo", family_name="LEE "))
    assert keys == {CanonicalKey(KeyKind.NAME, "jo lee")}


def test_name_key_with_only_family_name():
    keys = canonical_keys(ContactRecord(id="1", family_name="Lee"))
    assert {str(k) for k in keys} == {"name:lee"}


def test_phone_keys_are_digits_only():
    record = ContactRecord(id="1", phone_numbers=["(555) 123-4567", "555.123.4567", "+1 202 555 0100"])
    assert {str(k) for k in canonical_keys(record)} == {"phone:5551234567", "phone:12025550100"}


def test_email_keys_are_lowercased_without_alias_collapsing():
    record = ContactRecord(id="1", email_addresses=["Ann@Example.COM", "ann+work@example.com"])
    assert {str(k) for k in canonical_keys(record)} == {
        "email:ann@example.com",
        "email:ann+work@example.com",
    }


def test_keys_span_all_categories():
    record = ContactRecord(
        id="1",
        given_name="Ann",
        family_name="Lee",
        phone_numbers=["555-0100"],
        email_addresses=["ann@x.com"],
    )
    kinds = sorted(k.kind.value for k in canonical_keys(record))
    assert kinds == ["email", "name", "phone"]


def test_list_fields_are_stored_as_tuples():
    record = ContactRecord(id="1", phone_numbers=["1"], email_addresses=["a@x.com"])
    assert record.phone_numbers == ("1",)
    assert record.email_addresses == ("a@x.com",)


def test_bare_string_fields_rejected():
    with pytest.raises(ValueError):
        ContactRecord(id="a", given_name="Ann", phone_numbers="555-1234")
    with pytest.raises(ValueError):
        ContactRecord(id="b", given_name="Bob", email_addresses="bob@x.com")


def test_email_key_ignores_surrounding_whitespace():
    padded = ContactRecord(id="1", email_addresses=[" A@X.com "])
    plain = ContactRecord(id="2", email_addresses=["a@x.com"])
    assert canonical_keys(padded) == canonical_keys(plain) == {CanonicalKey(KeyKind.EMAIL, "a@x.com")}
    assert canonical_keys(ContactRecord(id="3", email_addresses=["   "])) == set()
