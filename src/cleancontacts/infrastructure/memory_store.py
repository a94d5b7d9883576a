"""In-memory implementation of ContactStore (no DB)."""

import uuid
from collections.abc import Iterable, Sequence

from cleancontacts.domain import ContactRecord


class InMemoryContactStore:
    """Stores contacts in memory. Order preserved by insertion."""

    def __init__(self, records: Iterable[ContactRecord] = ()) -> None:
        self._by_id: dict[str, ContactRecord] = {}
        for record in records:
            if record.id is None:
                self.add(record)
            else:
                self._by_id[record.id] = record

    def list_all(self) -> list[ContactRecord]:
        return list(self._by_id.values())

    def get_by_id(self, record_id: str) -> ContactRecord | None:
        return self._by_id.get(record_id)

    def add(self, record: ContactRecord) -> str:
        if record.id is not None:
            raise ValueError("Only records without an id can be added; the store assigns ids.")
        record_id = str(uuid.uuid4())
        self._by_id[record_id] = ContactRecord(
            id=record_id,
            given_name=record.given_name,
            family_name=record.family_name,
            phone_numbers=record.phone_numbers,
            email_addresses=record.email_addresses,
        )
        return record_id

    def delete(self, record_ids: Sequence[str]) -> int:
        deleted = 0
        for record_id in record_ids:
            if self._by_id.pop(record_id, None) is not None:
                deleted += 1
        return deleted
