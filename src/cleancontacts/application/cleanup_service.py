"""Contact list cleanup: list, scan for duplicates, merge a group, delete selected."""

import logging
from collections.abc import Sequence

from cleancontacts.application.dto import (
    ContactsDeleted,
    ContactSummary,
    MergeApplied,
    MergeFailed,
    ScanResult,
)
from cleancontacts.application.ports import ContactStore
from cleancontacts.domain import (
    ConsistencyError,
    ContactRecord,
    DuplicateGroup,
    canonical_keys,
    plan_merge,
    scan,
)

logger = logging.getLogger(__name__)


class ContactCleanupService:
    """Use cases over a ContactStore. Remembers the groups of the last successful scan."""

    def __init__(self, store: ContactStore) -> None:
        self._store = store
        self._last_scan = ScanResult()

    @property
    def duplicate_groups(self) -> tuple[DuplicateGroup, ...]:
        return self._last_scan.groups

    def list_contacts(self) -> list[ContactSummary]:
        """Return all contacts sorted by name, case-insensitive."""
        records = sorted(
            self._store.list_all(),
            key=lambda r: (r.given_name + r.family_name).lower(),
        )
        return [_summary(record) for record in records]

    def scan(self) -> ScanResult:
        """Read the whole store and group duplicates."""
        records = self._store.list_all()
        groups = scan(records)
        inert = sum(1 for record in records if not canonical_keys(record))
        self._last_scan = ScanResult(groups=tuple(groups), scanned=len(records), inert=inert)
        logger.info(
            "Scanned %d contacts: %d duplicate groups, %d without usable fields",
            len(records),
            len(groups),
            inert,
        )
        return self._last_scan

    def merge_group(self, group: DuplicateGroup) -> MergeApplied | MergeFailed:
        """Insert the merged record, then delete the originals.

        A stale group (members gone from the store) yields MergeFailed and nothing
        is written. Store errors propagate; the remembered groups change only after
        both writes succeed.
        """
        (outcome,) = self.merge_groups([group])
        return outcome

    def merge_groups(
        self, groups: Sequence[DuplicateGroup]
    ) -> list[MergeApplied | MergeFailed]:
        """Merge several groups against one read of the store, then rescan once.

        A group whose members are gone, or were retired by an earlier group in the
        same call, yields MergeFailed. Store errors propagate after a rescan of
        whatever was already applied.
        """
        records = self._store.list_all()
        position = {record.id: index for index, record in enumerate(records)}
        retired: set = set()
        outcomes: list[MergeApplied | MergeFailed] = []
        try:
            for group in groups:
                outcome = self._merge(group, records, position, retired)
                outcomes.append(outcome)
        finally:
            if retired:
                self.scan()
        return outcomes

    def _merge(self, group, records, position, retired) -> MergeApplied | MergeFailed:
        members = [
            records[position[rid]]
            for rid in group.record_ids
            if rid in position and rid not in retired
        ]
        members.sort(key=lambda r: position[r.id])
        try:
            plan = plan_merge(group, members)
        except ConsistencyError as exc:
            logger.warning("Merge skipped for group %s: %s", group.representative_id, exc)
            return MergeFailed(reason=str(exc), group=group, missing_ids=exc.missing_ids)

        new_id = self._store.add(plan.merged)
        self._store.delete(plan.delete_ids)
        retired.update(plan.delete_ids)
        logger.info("Merged %d contacts into %s", len(plan.delete_ids), new_id)
        return MergeApplied(new_record_id=new_id, deleted_ids=plan.delete_ids)

    def delete_contacts(self, record_ids: Sequence[str]) -> ContactsDeleted:
        """Delete the selected contacts. An empty selection does nothing."""
        ids = tuple(dict.fromkeys(record_ids))
        if not ids:
            return ContactsDeleted(requested_ids=(), deleted_count=0)
        count = self._store.delete(ids)
        logger.info("Deleted %d of %d selected contacts", count, len(ids))
        self.scan()
        return ContactsDeleted(requested_ids=ids, deleted_count=count)


def _summary(record: ContactRecord) -> ContactSummary:
    return ContactSummary(
        record_id=record.id,
        name=record.display_name,
        phone_numbers=record.phone_numbers,
        email_addresses=record.email_addresses,
    )
