"""Shared type aliases for cargocache."""

from .sidecar import FolderInfoPayload

__all__ = ["FolderInfoPayload"]
