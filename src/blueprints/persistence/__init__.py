"""Blueprint persistence backends."""

from typing import Any, Dict

from blueprints.persistence.base import BlueprintStore
from blueprints.persistence.memory import InMemoryBlueprintStore, sample_blueprints
from blueprints.persistence.relational import SqlBlueprintStore
from blueprints.utils.logging import get_logger

logger = get_logger(__name__)

BACKENDS = ("memory", "sql")


def build_store(persistence: Dict[str, Any] | None = None) -> BlueprintStore:
    """
    Build the configured store.

    Args:
        persistence: The `persistence` section of the config
            (backend, database_url, seed_sample_data)

    Returns:
        BlueprintStore instance

    Raises:
        ValueError: If the backend is unknown or sql has no database_url
    """
    persistence = persistence or {}
    backend = persistence.get("backend", "memory")
    if backend == "memory":
        initial = sample_blueprints() if persistence.get("seed_sample_data", True) else []
        logger.info(f"Using in-memory blueprint store ({len(initial)} sample blueprints)")
        return InMemoryBlueprintStore(initial)
    if backend == "sql":
        database_url = persistence.get("database_url")
        if not database_url:
            raise ValueError("persistence.database_url is required for the sql backend")
        store = SqlBlueprintStore.from_url(database_url)
        logger.info(f"Using SQL blueprint store at {store.engine.url!r}")
        return store
    raise ValueError(f"Unknown persistence backend '{backend}' (allowed: {', '.join(BACKENDS)})")


__all__ = [
    "BACKENDS",
    "BlueprintStore",
    "InMemoryBlueprintStore",
    "SqlBlueprintStore",
    "build_store",
    "sample_blueprints",
]
