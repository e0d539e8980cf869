"""Catalog cache adapters."""

from projkt.adapters.cache.json_cache import JsonCacheStore, is_expired


__all__ = ["JsonCacheStore", "is_expired"]
