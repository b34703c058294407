"""Configuration defaults, filenames, and environment variable names."""

from __future__ import annotations

from cargocache.constants.cache import BACKEND_LOCAL

CONFIG_FILENAME: str = "cargocache.yaml"

CACHE_ONLY_INPUT: str = "cache-only"

BACKEND_ENV: str = "CARGOCACHE_BACKEND"
LOCAL_CACHE_DIR_ENV: str = "CARGOCACHE_LOCAL_DIR"
LOG_FORMAT_ENV: str = "CARGOCACHE_LOG_FORMAT"
GITHUB_ACTIONS_ENV: str = "GITHUB_ACTIONS"

DEFAULT_BACKEND: str = BACKEND_LOCAL

LOG_FORMAT_GITHUB: str = "github"
LOG_FORMAT_PLAIN: str = "plain"
VALID_LOG_FORMATS: frozenset[str] = frozenset({LOG_FORMAT_GITHUB, LOG_FORMAT_PLAIN})
PLAIN_LOG_FORMAT: str = "%(levelname)s %(message)s"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"cache_only", "backend", "local_cache_dir", "log_format"})
