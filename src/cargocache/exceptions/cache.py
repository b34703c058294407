"""Exceptions raised while restoring or saving cached segments."""

from __future__ import annotations

from pathlib import Path

from cargocache.exceptions.base import CargoCacheError


class HostCacheError(CargoCacheError):
    """Raised when the blob cache fails to restore or save an entry."""


class SidecarFormatError(CargoCacheError, ValueError):
    """Raised when a sidecar record cannot be parsed or produced."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid cached folder info at {path}: {reason}")


class SidecarMissingError(CargoCacheError):
    """Raised when save runs without the record restore should have written."""

    def __init__(self, friendly_name: str, path: Path) -> None:
        self.friendly_name = friendly_name
        self.path = path
        super().__init__(
            f"No cached folder info for {friendly_name} at {path}. Did the restore step run earlier in this job?"
        )


class PathMismatchError(CargoCacheError):
    """Raised when a segment resolves to a different path than during restore."""

    def __init__(self, friendly_name: str, old_path: str, new_path: str) -> None:
        self.friendly_name = friendly_name
        self.old_path = old_path
        self.new_path = new_path
        super().__init__(
            f"Path to {friendly_name} cache changed from {old_path} to {new_path}. Perhaps CARGO_HOME changed?"
        )


class SegmentIOError(CargoCacheError):
    """Raised when a filesystem operation on a segment fails."""

    def __init__(self, friendly_name: str, error: OSError) -> None:
        self.friendly_name = friendly_name
        self.error = error
        super().__init__(f"Filesystem error while processing {friendly_name}: {error}")
