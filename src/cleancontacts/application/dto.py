"""Result objects returned by ContactCleanupService."""

from dataclasses import dataclass, field

from cleancontacts.domain import DuplicateGroup


@dataclass(frozen=True)
class ContactSummary:
    record_id: str
    name: str
    phone_numbers: tuple[str, ...] = ()
    email_addresses: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScanResult:
    """Groups found by one scan, with how many records were read and how many had no usable field."""

    groups: tuple[DuplicateGroup, ...] = ()
    scanned: int = 0
    inert: int = 0

    @property
    def duplicate_count(self) -> int:
        return sum(len(group) for group in self.groups)


@dataclass(frozen=True)
class MergeApplied:
    new_record_id: str
    deleted_ids: tuple[str, ...]


@dataclass(frozen=True)
class MergeFailed:
    reason: str
    group: DuplicateGroup
    missing_ids: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ContactsDeleted:
    requested_ids: tuple[str, ...]
    deleted_count: int = 0
