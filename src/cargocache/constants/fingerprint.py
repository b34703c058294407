"""Constants for directory fingerprinting."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 65536
FINGERPRINT_DIGEST_SIZE: int = 8

TAG_FILE: bytes = b"f"
TAG_DIRECTORY: bytes = b"d"
TAG_SYMLINK: bytes = b"l"
TAG_OTHER: bytes = b"o"
