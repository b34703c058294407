"""Restore and save phases for cached Cargo home segments.

The two phases run as separate processes. Restore snapshots each segment's
path and fingerprint into a sidecar record; save recomputes both and uploads
only the segments whose fingerprint moved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from cargocache.blobcache import BlobCache, build_cache_key
from cargocache.exceptions import HostCacheError, PathMismatchError, SegmentIOError, SidecarMissingError
from cargocache.fingerprint import fingerprint_directory
from cargocache.paths import remove_tree, segment_path, sidecar_path
from cargocache.segments import Segment
from cargocache.sidecar import FolderInfo, read_folder_info, write_folder_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunContext:
    """Everything a phase needs, resolved once at entry."""

    segments: tuple[Segment, ...]
    blob_cache: BlobCache
    cargo_home: Path
    state_home: Path


@dataclass
class RestoreReport:
    restored: list[str] = field(default_factory=list)
    missed: list[str] = field(default_factory=list)


@dataclass
class SaveReport:
    """Per-segment outcome of the save phase, by short name."""

    saved: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def build_folder_info(segment: Segment, cargo_home: Path) -> FolderInfo:
    """Fingerprint ``segment`` where it currently lives."""
    path = segment_path(segment, cargo_home)
    return FolderInfo(path=str(path), fingerprint=fingerprint_directory(path, segment.ignores))


def restore_cargo_cache(context: RunContext) -> RestoreReport:
    """Populate each selected segment from the blob cache and snapshot it."""
    report = RestoreReport()
    for segment in context.segments:
        try:
            _restore_segment(context, segment, report)
        except OSError as exc:
            raise SegmentIOError(segment.friendly_name, exc) from exc
    return report


def _restore_segment(context: RunContext, segment: Segment, report: RestoreReport) -> None:
    folder_path = segment_path(segment, context.cargo_home)
    if os.path.lexists(folder_path):
        logger.warning(
            "Cache action will delete existing contents of %s. "
            "To avoid this warning, place this action earlier or delete this before running the action.",
            folder_path,
        )
        remove_tree(folder_path)

    key = build_cache_key(segment)
    matched = context.blob_cache.restore(key.primary, [key.restore_fallback], [folder_path])
    if matched is not None:
        logger.info("Restored %s from cache.", segment.friendly_name)
        logger.debug("Matched cache key %r for %s", matched, segment.friendly_name)
        report.restored.append(segment.short_name)
    else:
        logger.info("No existing cache entry for %s found.", segment.friendly_name)
        folder_path.mkdir(parents=True, exist_ok=True)
        report.missed.append(segment.short_name)

    folder_info = build_folder_info(segment, context.cargo_home)
    write_folder_info(segment, folder_info, context.state_home)


def save_cargo_cache(context: RunContext) -> SaveReport:
    """Upload every selected segment whose contents changed since restore.

    Upload failures are logged and do not stop the remaining segments. A
    missing sidecar or a changed segment path aborts the phase.
    """
    report = SaveReport()
    for segment in context.segments:
        try:
            _save_segment(context, segment, report)
        except OSError as exc:
            raise SegmentIOError(segment.friendly_name, exc) from exc
    return report


def _save_segment(context: RunContext, segment: Segment, report: SaveReport) -> None:
    folder_info_new = build_folder_info(segment, context.cargo_home)
    folder_info_old = read_folder_info(segment, context.state_home)
    if folder_info_old is None:
        raise SidecarMissingError(segment.friendly_name, sidecar_path(segment, context.state_home))
    if folder_info_old.path != folder_info_new.path:
        raise PathMismatchError(segment.friendly_name, folder_info_old.path, folder_info_new.path)

    if folder_info_old.fingerprint == folder_info_new.fingerprint:
        logger.info("%s unchanged, no need to write to cache", segment.friendly_name)
        report.unchanged.append(segment.short_name)
        return

    logger.info(
        "%s fingerprint changed from %d to %d",
        folder_info_new.path,
        folder_info_old.fingerprint,
        folder_info_new.fingerprint,
    )
    key = build_cache_key(segment)
    try:
        context.blob_cache.save(key.primary, [Path(folder_info_new.path)])
    except HostCacheError as exc:
        logger.error("Failed to save %s to cache: %s", segment.friendly_name, exc)
        report.failed.append(segment.short_name)
    else:
        logger.info("Saved %s to cache.", segment.friendly_name)
        report.saved.append(segment.short_name)
