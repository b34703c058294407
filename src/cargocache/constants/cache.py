"""Constants for cache keys and the local blob cache."""

from __future__ import annotations

NONCE_BYTES: int = 8
KEY_SEPARATOR: str = " - "

BACKEND_LOCAL: str = "local"
VALID_BACKENDS: frozenset[str] = frozenset({BACKEND_LOCAL})

ARCHIVE_SUFFIX: str = ".tar"
ARCHIVE_TEMP_PREFIX: str = ".archive-"
ARCHIVE_TEMP_SUFFIX: str = ".tmp"
STAGING_PREFIX: str = ".restore-"
