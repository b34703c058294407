"""Shared file I/O helpers."""

from .toml_io import load_toml_file, write_toml_atomic

__all__ = ["load_toml_file", "write_toml_atomic"]
