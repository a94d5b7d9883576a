"""Duplicate grouping: union-find over shared canonical keys, plus the scan entry point."""

from collections import defaultdict
from collections.abc import Sequence

from cleancontacts.domain.entities import CanonicalKey, ContactRecord, DuplicateGroup
from cleancontacts.domain.normalizer import canonical_keys


class _UnionFind:
    """Disjoint sets over input positions. The root of a set is always its lowest position."""

    def __init__(self) -> None:
        self._parent: dict[int, int] = {}

    def add(self, item: int) -> None:
        self._parent.setdefault(item, item)

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, left: int, right: int) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        if root_right < root_left:
            root_left, root_right = root_right, root_left
        self._parent[root_right] = root_left

    def groups(self) -> dict[int, list[int]]:
        grouped: dict[int, list[int]] = defaultdict(list)
        for item in sorted(self._parent):
            grouped[self.find(item)].append(item)
        return grouped


def group_duplicates(records: Sequence[ContactRecord]) -> list[DuplicateGroup]:
    """Cluster records that share any canonical key, transitively.

    Records without keys are skipped entirely. Each group lists its members in
    input order, and groups are returned ordered by their first member.
    """
    uf = _UnionFind()
    first_owner: dict[CanonicalKey, int] = {}
    keys_by_index: dict[int, set[CanonicalKey]] = {}
    seen_ids: set[str] = set()

    for index, record in enumerate(records):
        if record.id in seen_ids:
            raise ValueError(f"Duplicate contact id in input: {record.id}")
        seen_ids.add(record.id)

        keys = canonical_keys(record)
        if not keys:
            continue
        uf.add(index)
        keys_by_index[index] = keys
        for key in keys:
            owner = first_owner.setdefault(key, index)
            if owner != index:
                uf.union(owner, index)

    groups: list[DuplicateGroup] = []
    for root, members in sorted(uf.groups().items()):
        if len(members) < 2:
            continue
        group_keys = frozenset().union(*(keys_by_index[i] for i in members))
        if not group_keys:
            continue
        groups.append(
            DuplicateGroup(
                record_ids=tuple(records[i].id for i in members),
                keys=group_keys,
            )
        )
    return groups


def scan(records: Sequence[ContactRecord]) -> list[DuplicateGroup]:
    """Group a full contact list. Pure and idempotent; an empty list yields no groups."""
    if not records:
        return []
    return group_duplicates(records)
