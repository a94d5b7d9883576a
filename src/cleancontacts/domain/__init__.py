"""Domain layer: entities and the duplicate detection core. No dependencies on outer layers."""

from cleancontacts.domain.entities import (
    CanonicalKey,
    ContactRecord,
    DuplicateGroup,
    KeyKind,
    MergePlan,
)
from cleancontacts.domain.errors import ConsistencyError
from cleancontacts.domain.grouping import group_duplicates, scan
from cleancontacts.domain.merge import plan_merge
from cleancontacts.domain.normalizer import (
    canonical_keys,
    normalize_email,
    normalize_name,
    normalize_phone_digits,
)

__all__ = [
    "CanonicalKey",
    "ConsistencyError",
    "ContactRecord",
    "DuplicateGroup",
    "KeyKind",
    "MergePlan",
    "canonical_keys",
    "group_duplicates",
    "normalize_email",
    "normalize_name",
    "normalize_phone_digits",
    "plan_merge",
    "scan",
]
