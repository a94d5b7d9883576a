"""Connection settings from the environment, optionally loaded from a .env file."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from neo4j import GraphDatabase

REPO_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    owner_id: str = "default"


def load_settings(env_file: Path | None = None) -> Settings:
    """Read settings from os.environ after loading the first .env found (repo root, then cwd)."""
    candidates = [env_file] if env_file else [REPO_ROOT / ".env", Path.cwd() / ".env"]
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            break
    return Settings(
        neo4j_uri=os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip(),
        neo4j_user=os.environ.get("NEO4J_USER", "neo4j").strip(),
        neo4j_password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
        owner_id=os.environ.get("CONTACTS_OWNER_ID", "default").strip() or "default",
    )


def get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )
