"""Typed sidecar payload structures."""

from __future__ import annotations

from typing import TypedDict


class FolderInfoPayload(TypedDict):
    """Serialized form of a segment's restore-time snapshot."""

    path: str
    fingerprint: int
