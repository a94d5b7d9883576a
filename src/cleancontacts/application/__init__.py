"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from cleancontacts.application.cleanup_service import ContactCleanupService
from cleancontacts.application.dto import (
    ContactsDeleted,
    ContactSummary,
    MergeApplied,
    MergeFailed,
    ScanResult,
)
from cleancontacts.application.ports import ContactStore

__all__ = [
    "ContactCleanupService",
    "ContactStore",
    "ContactSummary",
    "ContactsDeleted",
    "MergeApplied",
    "MergeFailed",
    "ScanResult",
]
