"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "cargocache"
CLI_DESCRIPTION: str = (
    "Cache Cargo registry indices, crate files, and git databases between CI jobs.\n"
    "\n"
    "Run `restore` at the start of a job and `save` at the end."
)
