"""Shared exception hierarchy for cargocache."""

from __future__ import annotations

from .base import CargoCacheError
from .cache import (
    HostCacheError,
    PathMismatchError,
    SegmentIOError,
    SidecarFormatError,
    SidecarMissingError,
)
from .config import ConfigError, ParseCacheableItemError

__all__ = [
    "CargoCacheError",
    "ConfigError",
    "HostCacheError",
    "ParseCacheableItemError",
    "PathMismatchError",
    "SegmentIOError",
    "SidecarFormatError",
    "SidecarMissingError",
]
