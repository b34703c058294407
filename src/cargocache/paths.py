"""Home directory resolution and filesystem helpers."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path

from cargocache.constants.paths import (
    CARGO_HOME_DIRNAME,
    CARGO_HOME_ENV,
    DEFAULT_LOCAL_CACHE_PARTS,
    SIDECAR_DIR_PARTS,
    SIDECAR_SUFFIX,
)
from cargocache.segments import Segment


def user_home() -> Path:
    """Return the current user's home directory."""
    return Path.home()


def find_cargo_home(environ: Mapping[str, str] | None = None, *, home: Path | None = None) -> Path:
    """Resolve Cargo home the way Cargo does.

    ``CARGO_HOME`` wins when set; a relative value is taken against the current
    directory. The result is normalized lexically only, so a home reached
    through a symlink keeps the symlinked spelling.
    """
    env = os.environ if environ is None else environ
    override = env.get(CARGO_HOME_ENV, "")
    if override:
        return Path(os.path.abspath(override))
    base = home if home is not None else user_home()
    return base / CARGO_HOME_DIRNAME


def segment_path(segment: Segment, cargo_home: Path) -> Path:
    """Return the absolute folder for ``segment`` under ``cargo_home``."""
    return cargo_home.joinpath(*segment.relative_path)


def sidecar_dir(home: Path | None = None) -> Path:
    """Return the directory holding per-segment sidecar records."""
    base = home if home is not None else user_home()
    return base.joinpath(*SIDECAR_DIR_PARTS)


def sidecar_path(segment: Segment, home: Path | None = None) -> Path:
    """Return the sidecar record path for ``segment``."""
    return sidecar_dir(home) / f"{segment.short_name}{SIDECAR_SUFFIX}"


def default_local_cache_dir(home: Path | None = None) -> Path:
    """Return the default root of the local blob cache."""
    base = home if home is not None else user_home()
    return base.joinpath(*DEFAULT_LOCAL_CACHE_PARTS)


def remove_tree(path: Path) -> None:
    """Remove ``path`` whether it is a directory, file, or symlink."""
    if path.is_symlink() or not path.is_dir():
        path.unlink(missing_ok=True)
        return
    shutil.rmtree(path)
