"""
Clean Contacts core: clean-architecture layout.

- domain: entities (ContactRecord, DuplicateGroup, MergePlan) and the pure
  normalize / group / plan / scan functions. No outer dependencies.
- application: use cases (ContactCleanupService), ports (ContactStore), DTOs.
- infrastructure: adapters (InMemoryContactStore, Neo4jContactStore), settings.
"""

from cleancontacts.application import (
    ContactCleanupService,
    ContactsDeleted,
    ContactStore,
    ContactSummary,
    MergeApplied,
    MergeFailed,
    ScanResult,
)
from cleancontacts.domain import (
    CanonicalKey,
    ConsistencyError,
    ContactRecord,
    DuplicateGroup,
    KeyKind,
    MergePlan,
    canonical_keys,
    group_duplicates,
    plan_merge,
    scan,
)
from cleancontacts.infrastructure import InMemoryContactStore, Neo4jContactStore

__all__ = [
    "CanonicalKey",
    "ConsistencyError",
    "ContactCleanupService",
    "ContactRecord",
    "ContactStore",
    "ContactSummary",
    "ContactsDeleted",
    "DuplicateGroup",
    "InMemoryContactStore",
    "KeyKind",
    "MergeApplied",
    "MergeFailed",
    "MergePlan",
    "Neo4jContactStore",
    "ScanResult",
    "canonical_keys",
    "group_duplicates",
    "plan_merge",
    "scan",
]
