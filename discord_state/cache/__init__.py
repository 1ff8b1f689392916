"""In-memory entity caches.

Each entity type has its own EntityCache; CacheRegistry bundles them for
one client instance.
"""

from discord_state.cache.registry import CacheRegistry
from discord_state.cache.store import EntityCache

__all__ = [
    "CacheRegistry",
    "EntityCache",
]
