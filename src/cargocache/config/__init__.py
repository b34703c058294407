"""Configuration loading for cargocache runs."""

from __future__ import annotations

from cargocache.config.loader import load_config
from cargocache.config.model import ActionConfig

__all__ = ["ActionConfig", "load_config"]
