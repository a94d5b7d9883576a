"""Domain entities: ContactRecord, CanonicalKey, DuplicateGroup, and MergePlan."""

from dataclasses import dataclass, field
from enum import Enum


class KeyKind(str, Enum):
    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"


@dataclass(frozen=True)
class ContactRecord:
    """
    Snapshot of one contact as read from the store.
    id is None for a synthesized record that the store has not inserted yet.
    """

    id: str | None = None
    given_name: str = ""
    family_name: str = ""
    phone_numbers: tuple[str, ...] = ()
    email_addresses: tuple[str, ...] = ()

    def __post_init__(self):
        if isinstance(self.phone_numbers, str) or isinstance(self.email_addresses, str):
            raise ValueError("phone_numbers and email_addresses must be sequences of strings.")
        object.__setattr__(self, "given_name", self.given_name or "")
        object.__setattr__(self, "family_name", self.family_name or "")
        object.__setattr__(self, "phone_numbers", tuple(self.phone_numbers or ()))
        object.__setattr__(self, "email_addresses", tuple(self.email_addresses or ()))

    @property
    def display_name(self) -> str:
        return f"{self.given_name} {self.family_name}".strip()


@dataclass(frozen=True, order=True)
class CanonicalKey:
    """Normalized identifying field. Two records sharing a key are potential duplicates."""

    kind: KeyKind
    value: str

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.value}"


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Records transitively connected by shared canonical keys.
    record_ids is ordered by input position; the first member is the representative.
    """

    record_ids: tuple[str, ...]
    keys: frozenset[CanonicalKey] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "record_ids", tuple(self.record_ids))
        object.__setattr__(self, "keys", frozenset(self.keys))
        if len(self.record_ids) < 2:
            raise ValueError("DuplicateGroup needs at least two records.")

    @property
    def representative_id(self) -> str:
        return self.record_ids[0]

    def __len__(self) -> int:
        return len(self.record_ids)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.record_ids


@dataclass(frozen=True)
class MergePlan:
    """Synthesized replacement record plus the originals it supersedes (insert first, then delete)."""

    merged: ContactRecord
    delete_ids: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "delete_ids", tuple(self.delete_ids))
        if self.merged.id is not None:
            raise ValueError("Merged record must not carry an id; the store assigns one.")
