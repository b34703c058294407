"""Blob cache port, key construction, and backends."""

from .base import BlobCache, CacheKey, build_cache_key, build_nonce
from .local import LocalBlobCache

__all__ = ["BlobCache", "CacheKey", "LocalBlobCache", "build_cache_key", "build_nonce"]
