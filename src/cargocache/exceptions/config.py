"""Configuration-related exceptions."""

from __future__ import annotations

from cargocache.exceptions.base import CargoCacheError


class ConfigError(CargoCacheError, ValueError):
    """Raised when action configuration is invalid."""


class ParseCacheableItemError(ConfigError):
    """Raised when ``cache-only`` names a segment that does not exist."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown cacheable item {token!r} in cache-only input")
