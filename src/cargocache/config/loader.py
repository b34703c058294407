"""Config loading and normalization for cargocache runs."""

from __future__ import annotations

import difflib
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from cargocache.config.model import ActionConfig
from cargocache.constants.cache import VALID_BACKENDS
from cargocache.constants.config import (
    ALLOWED_CONFIG_KEYS,
    BACKEND_ENV,
    CACHE_ONLY_INPUT,
    CONFIG_FILENAME,
    DEFAULT_BACKEND,
    GITHUB_ACTIONS_ENV,
    LOCAL_CACHE_DIR_ENV,
    LOG_FORMAT_ENV,
    LOG_FORMAT_GITHUB,
    LOG_FORMAT_PLAIN,
    VALID_LOG_FORMATS,
)
from cargocache.exceptions import ConfigError
from cargocache.host.inputs import get_input
from cargocache.paths import default_local_cache_dir, find_cargo_home, user_home


def load_config(
    *,
    root: Path | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
    cache_only: str | None = None,
    local_cache_dir: Path | None = None,
    log_format: str | None = None,
) -> ActionConfig:
    """Merge defaults, ``cargocache.yaml``, environment, and explicit overrides.

    Explicit keyword arguments win over the environment, which wins over the
    config file.
    """
    env = os.environ if environ is None else environ
    state_home = home if home is not None else user_home()
    raw = _load_config_file(root if root is not None else Path.cwd(), config_path)

    file_cache_only = _coerce_cache_only(raw.get("cache_only"))
    resolved_cache_only = _first_set(cache_only, get_input(CACHE_ONLY_INPUT, env), file_cache_only)

    backend = _first_set(env.get(BACKEND_ENV), _optional_str(raw, "backend"), DEFAULT_BACKEND)
    if backend not in VALID_BACKENDS:
        raise ConfigError(f"backend must be one of {sorted(VALID_BACKENDS)}, got {backend!r}")

    default_format = LOG_FORMAT_GITHUB if env.get(GITHUB_ACTIONS_ENV) == "true" else LOG_FORMAT_PLAIN
    resolved_format = _first_set(log_format, env.get(LOG_FORMAT_ENV), _optional_str(raw, "log_format"), default_format)
    if resolved_format not in VALID_LOG_FORMATS:
        raise ConfigError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {resolved_format!r}")

    cache_dir_raw = _first_set(env.get(LOCAL_CACHE_DIR_ENV), _optional_str(raw, "local_cache_dir"))
    if local_cache_dir is not None:
        resolved_cache_dir = local_cache_dir
    elif cache_dir_raw is not None:
        resolved_cache_dir = Path(cache_dir_raw).expanduser()
    else:
        resolved_cache_dir = default_local_cache_dir(state_home)

    return ActionConfig(
        cargo_home=find_cargo_home(env, home=state_home),
        state_home=state_home,
        local_cache_dir=resolved_cache_dir.absolute(),
        cache_only=resolved_cache_only,
        backend=backend,
        log_format=resolved_format,
    )


def _load_config_file(root: Path, config_path: Path | None) -> dict[str, Any]:
    path = config_path if config_path is not None else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(key)
            suffix = f" (did you mean {hint!r}?)" if hint else ""
            raise ConfigError(f"Unknown config key {key!r} in {path}{suffix}")
    return raw


def _suggest_key(key: str) -> str | None:
    """Return the closest allowed key for a typo, if any is close enough."""
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _coerce_cache_only(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return " ".join(value) or None
    raise ConfigError("cache_only must be a string or a list of strings")


def _optional_str(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string")
    return value


def _first_set(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None
