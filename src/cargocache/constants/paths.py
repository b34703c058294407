"""Filesystem locations used by restore and save phases."""

from __future__ import annotations

CARGO_HOME_ENV: str = "CARGO_HOME"
CARGO_HOME_DIRNAME: str = ".cargo"

# Sidecar records live outside Cargo home so they survive segment deletion.
SIDECAR_DIR_PARTS: tuple[str, ...] = (".cache", "github-rust-actions", "cached_folder_info")
SIDECAR_SUFFIX: str = ".toml"
SIDECAR_TEMP_PREFIX: str = ".folder-info-"
SIDECAR_TEMP_SUFFIX: str = ".tmp"

DEFAULT_LOCAL_CACHE_PARTS: tuple[str, ...] = (".cache", "cargocache", "blobs")
