"""Infrastructure layer: concrete implementations of application ports."""

from cleancontacts.infrastructure.memory_store import InMemoryContactStore
from cleancontacts.infrastructure.persistence.neo4j_store import (
    Neo4jContactStore,
    ensure_contact_constraint,
)
from cleancontacts.infrastructure.settings import Settings, get_driver, load_settings

__all__ = [
    "InMemoryContactStore",
    "Neo4jContactStore",
    "Settings",
    "ensure_contact_constraint",
    "get_driver",
    "load_settings",
]
