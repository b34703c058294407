"""Root exception type for cargocache."""

from __future__ import annotations


class CargoCacheError(Exception):
    """Base class for all errors raised by cargocache."""
