"""Dependency target registry derived from the configuration snapshot."""

from __future__ import annotations

from app.config import Configuration
from app.domain import DependencyTarget

DATABASE_DEPENDENCY = "database"
CACHE_DEPENDENCY = "cache"


def health_collect_dependency_targets(config: Configuration) -> tuple[DependencyTarget, ...]:
    """Return dependency targets in stable order: datastore first, cache second.

    Failure reporting correlates names with probe results by position, so the
    order must not change between calls.

    Args:
        config: Resolved configuration snapshot.

    Returns:
        tuple[DependencyTarget, ...]: Ordered dependency targets.
    """

    return (
        DependencyTarget(name=DATABASE_DEPENDENCY, host=config.database.host, port=config.database.port),
        DependencyTarget(name=CACHE_DEPENDENCY, host=config.cache.host, port=config.cache.port),
    )
