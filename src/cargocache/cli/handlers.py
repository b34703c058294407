"""CLI subcommand handlers for the restore and save phases."""

from __future__ import annotations

import logging

from cargocache.blobcache import BlobCache, LocalBlobCache
from cargocache.config import ActionConfig
from cargocache.constants.cache import BACKEND_LOCAL
from cargocache.coordinator import RunContext, restore_cargo_cache, save_cargo_cache
from cargocache.exceptions import CargoCacheError, ConfigError
from cargocache.segments import Segment

logger = logging.getLogger(__name__)


def build_blob_cache(config: ActionConfig) -> BlobCache:
    """Instantiate the blob cache backend named in ``config``."""
    if config.backend == BACKEND_LOCAL:
        return LocalBlobCache(config.local_cache_dir)
    raise ConfigError(f"Unsupported backend: {config.backend}")


def build_run_context(config: ActionConfig, segments: tuple[Segment, ...]) -> RunContext:
    return RunContext(
        segments=segments,
        blob_cache=build_blob_cache(config),
        cargo_home=config.cargo_home,
        state_home=config.state_home,
    )


def handle_restore(context: RunContext) -> int:
    """Run the restore phase; any error is fatal."""
    try:
        report = restore_cargo_cache(context)
    except (CargoCacheError, OSError) as exc:
        logger.error("Restore failed: %s", exc)
        return 1
    logger.debug("Restored: %s; not found: %s", report.restored, report.missed)
    return 0


def handle_save(context: RunContext) -> int:
    """Run the save phase; failed uploads are reported but do not fail the step."""
    try:
        report = save_cargo_cache(context)
    except (CargoCacheError, OSError) as exc:
        logger.error("Save failed: %s", exc)
        return 1
    if not report.ok:
        logger.warning("Some segments could not be saved: %s", ", ".join(report.failed))
    return 0
