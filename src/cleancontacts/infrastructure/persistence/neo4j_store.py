"""Neo4j implementation of ContactStore.
Graph: one owner Person per user; every contact in the owner's list is a Contact node.
(owner:Person {id: owner_id, registered: true})-[:KNOWS]->(c:Contact {id, given_name, ...}).
Phone numbers and email addresses are stored as string list properties, in their original format.
"""

import logging
import uuid
from collections.abc import Sequence
from datetime import datetime, timezone

from cleancontacts.domain import ContactRecord

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
FOR (c:Contact) REQUIRE c.id IS UNIQUE
"""


def ensure_contact_constraint(driver: object) -> None:
    """Create the uniqueness constraint on Contact.id. Idempotent."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jContactStore:
    """Stores contacts in Neo4j, scoped by owner_id. Listed in creation order."""

    def __init__(self, driver: object, owner_id: str = "default") -> None:
        self._driver = driver
        self._owner_id = owner_id

    def list_all(self) -> list[ContactRecord]:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (owner:Person {id: $owner_id, registered: true})-[:KNOWS]->(c:Contact)
                RETURN c
                ORDER BY c.created_at, c.id
                """,
                owner_id=self._owner_id,
            )
            return [_record_to_contact(rec) for rec in result]

    def get_by_id(self, record_id: str) -> ContactRecord | None:
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (owner:Person {id: $owner_id, registered: true})-[:KNOWS]->(c:Contact)
                WHERE c.id = $id
                RETURN c
                """,
                owner_id=self._owner_id,
                id=record_id,
            )
            record = result.single()
        if not record:
            return None
        return _record_to_contact(record)

    def add(self, record: ContactRecord) -> str:
        if record.id is not None:
            raise ValueError("Only records without an id can be added; the store assigns ids.")
        record_id = str(uuid.uuid4())
        with self._driver.session() as session:
            session.run(
                """
                MERGE (owner:Person {id: $owner_id, registered: true})
                CREATE (c:Contact {
                    id: $id,
                    given_name: $given_name,
                    family_name: $family_name,
                    phone_numbers: $phone_numbers,
                    email_addresses: $email_addresses,
                    created_at: $created_at
                })
                CREATE (owner)-[:KNOWS]->(c)
                """,
                owner_id=self._owner_id,
                id=record_id,
                given_name=record.given_name,
                family_name=record.family_name,
                phone_numbers=list(record.phone_numbers),
                email_addresses=list(record.email_addresses),
                created_at=datetime.now(timezone.utc).isoformat(),
            )
        return record_id

    def delete(self, record_ids: Sequence[str]) -> int:
        if not record_ids:
            return 0
        with self._driver.session() as session:
            result = session.run(
                """
                MATCH (owner:Person {id: $owner_id, registered: true})-[:KNOWS]->(c:Contact)
                WHERE c.id IN $ids
                DETACH DELETE c
                RETURN count(c) AS deleted
                """,
                owner_id=self._owner_id,
                ids=list(record_ids),
            )
            record = result.single()
        deleted = record["deleted"] if record else 0
        logger.debug("Deleted %d contacts for owner %s", deleted, self._owner_id)
        return deleted


def _record_to_contact(record) -> ContactRecord:
    c = record["c"]
    return ContactRecord(
        id=c["id"],
        given_name=c.get("given_name") or "",
        family_name=c.get("family_name") or "",
        phone_numbers=tuple(c.get("phone_numbers") or ()),
        email_addresses=tuple(c.get("email_addresses") or ()),
    )
