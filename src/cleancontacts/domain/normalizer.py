"""Canonical comparison keys for names, phone numbers, and email addresses."""

import phonenumbers

from cleancontacts.domain.entities import CanonicalKey, ContactRecord, KeyKind


def normalize_name(given_name: str, family_name: str) -> str:
    return f"{given_name or ''} {family_name or ''}".strip().lower()


def normalize_phone_digits(raw: str) -> str:
    """Digits only. Non-ASCII digits are folded to ASCII, everything else is dropped."""
    if not raw:
        return ""
    return phonenumbers.normalize_digits_only(raw)


def normalize_email(raw: str) -> str:
    # Surrounding whitespace is not part of an address; a whitespace-only entry yields no key.
    # No alias or plus-address collapsing.
    return (raw or "").strip().lower()


def canonical_keys(record: ContactRecord) -> set[CanonicalKey]:
    """Return every key the record contributes. An empty set means the record is inert."""
    keys: set[CanonicalKey] = set()

    name = normalize_name(record.given_name, record.family_name)
    if name:
        keys.add(CanonicalKey(KeyKind.NAME, name))

    for raw in record.phone_numbers:
        digits = normalize_phone_digits(raw)
        if digits:
            keys.add(CanonicalKey(KeyKind.PHONE, digits))

    for raw in record.email_addresses:
        email = normalize_email(raw)
        if email:
            keys.add(CanonicalKey(KeyKind.EMAIL, email))

    return keys
