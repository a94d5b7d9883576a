"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Sequence
from typing import Protocol

from cleancontacts.domain import ContactRecord


class ContactStore(Protocol):
    """Reads and writes the platform contact list. Source of every scan and sink of every merge."""

    def list_all(self) -> list[ContactRecord]:
        """Return all contacts in a stable order."""
        ...

    def get_by_id(self, record_id: str) -> ContactRecord | None:
        """Return the contact with the given id, or None."""
        ...

    def add(self, record: ContactRecord) -> str:
        """Insert a record that has no id yet. Returns the id the store assigned."""
        ...

    def delete(self, record_ids: Sequence[str]) -> int:
        """Remove the given contacts. Returns how many existed."""
        ...
