"""Config data model for cargocache runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cargocache.constants.config import DEFAULT_BACKEND, LOG_FORMAT_PLAIN
from cargocache.host.inputs import parse_cache_only
from cargocache.segments import Segment


@dataclass(frozen=True)
class ActionConfig:
    """Resolved action config."""

    cargo_home: Path
    state_home: Path
    local_cache_dir: Path
    cache_only: str | None = None
    backend: str = DEFAULT_BACKEND
    log_format: str = LOG_FORMAT_PLAIN

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Segments selected by ``cache_only``."""
        return parse_cache_only(self.cache_only)
