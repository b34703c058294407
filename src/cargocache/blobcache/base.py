"""Blob cache port and cache key construction."""

from __future__ import annotations

import base64
import secrets
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from cargocache.constants.cache import KEY_SEPARATOR, NONCE_BYTES
from cargocache.segments import Segment


class BlobCache(Protocol):
    """Port for the key-addressed store that holds segment archives."""

    def restore(self, primary: str, fallbacks: Sequence[str], paths: Sequence[Path]) -> str | None:
        """Materialize the best matching entry into ``paths``.

        Returns the matched key, or ``None`` on a miss.
        """
        ...

    def save(self, primary: str, paths: Sequence[Path]) -> None:
        """Store ``paths`` under ``primary``; raises HostCacheError on failure."""
        ...


@dataclass(frozen=True)
class CacheKey:
    """A unique upload key plus the stable prefix used to find older uploads."""

    primary: str
    restore_fallback: str


def build_nonce(size: int = NONCE_BYTES) -> str:
    """Return ``size`` random bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(secrets.token_bytes(size)).decode("ascii").rstrip("=")


def build_cache_key(segment: Segment, nonce: str | None = None) -> CacheKey:
    """Build a fresh cache key for ``segment``."""
    if nonce is None:
        nonce = build_nonce()
    name = segment.friendly_name
    return CacheKey(primary=f"{name}{KEY_SEPARATOR}{nonce}", restore_fallback=name)
