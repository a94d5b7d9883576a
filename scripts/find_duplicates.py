#!/usr/bin/env python3
"""Scan the owner's contact list in Neo4j and print duplicate groups.

Pass --merge to merge every group (merged record inserted first, originals deleted after).
Run from repo root with .env (NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD, CONTACTS_OWNER_ID).
"""
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from cleancontacts.application import ContactCleanupService, MergeApplied  # noqa: E402
from cleancontacts.infrastructure import (  # noqa: E402
    Neo4jContactStore,
    ensure_contact_constraint,
    get_driver,
    load_settings,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)


def main(argv: list[str]) -> int:
    merge = "--merge" in argv
    settings = load_settings()
    driver = get_driver(settings)
    try:
        ensure_contact_constraint(driver)
        store = Neo4jContactStore(driver, owner_id=settings.owner_id)
        service = ContactCleanupService(store)
        result = service.scan()
        if not result.groups:
            print(f"No duplicates found in {result.scanned} contacts.")
            return 0
        by_id = {record.id: record for record in store.list_all()}
        for group in result.groups:
            names = [by_id[rid].display_name or rid for rid in group.record_ids if rid in by_id]
            print("Possible duplicate: " + ", ".join(names))
        if not merge:
            return 0
        failures = 0
        for outcome in service.merge_groups(result.groups):
            if isinstance(outcome, MergeApplied):
                print(f"Merged {len(outcome.deleted_ids)} contacts into {outcome.new_record_id}")
            else:
                failures += 1
                print(f"Merge failed: {outcome.reason}", file=sys.stderr)
        return 1 if failures else 0
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
