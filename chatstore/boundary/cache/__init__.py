"""
Cache boundary layer.

Exports:
  - CacheNamespace: Bounded LRU + TTL region with fail-soft semantics
  - SessionCache: Session lookup and per-user listing regions
"""

from chatstore.boundary.cache.session_cache import CacheNamespace, SessionCache

__all__ = ["CacheNamespace", "SessionCache"]
