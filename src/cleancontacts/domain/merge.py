"""Merge planning: one consolidated record plus the originals it replaces."""

from collections.abc import Callable, Iterable, Sequence

from cleancontacts.domain.entities import ContactRecord, DuplicateGroup, MergePlan
from cleancontacts.domain.errors import ConsistencyError
from cleancontacts.domain.normalizer import normalize_email, normalize_phone_digits


def plan_merge(group: DuplicateGroup, records: Sequence[ContactRecord]) -> MergePlan:
    """Build the merge plan for a group against a fresh record list.

    Raises ConsistencyError if any member of the group is no longer present.
    The representative is the member that comes first in records.
    """
    position = {record.id: index for index, record in enumerate(records)}
    missing = [record_id for record_id in group.record_ids if record_id not in position]
    if missing:
        raise ConsistencyError(missing)

    ordered_ids = sorted(group.record_ids, key=position.__getitem__)
    members = [records[position[record_id]] for record_id in ordered_ids]
    representative = members[0]

    merged = ContactRecord(
        given_name=representative.given_name,
        family_name=representative.family_name,
        phone_numbers=_union(
            (phone for member in members for phone in member.phone_numbers),
            normalize_phone_digits,
        ),
        email_addresses=_union(
            (email for member in members for email in member.email_addresses),
            normalize_email,
        ),
    )
    return MergePlan(merged=merged, delete_ids=tuple(member.id for member in members))


def _union(values: Iterable[str], normalize: Callable[[str], str]) -> tuple[str, ...]:
    """Keep the first occurrence of each normalized value, formatting untouched.

    Values that normalize to nothing but are not blank are compared by their trimmed text.
    """
    seen: set[str] = set()
    out: list[str] = []
    for value in values:
        text = (value or "").strip()
        if not text:
            continue
        marker = normalize(value) or f"raw:{text}"
        if marker in seen:
            continue
        seen.add(marker)
        out.append(value)
    return tuple(out)
