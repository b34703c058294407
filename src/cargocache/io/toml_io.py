"""TOML record persistence.

Records are replaced with a rename so a reader never sees a half-written file.
"""

from __future__ import annotations

import os
import tempfile
import tomllib
from collections.abc import Mapping
from contextlib import suppress
from pathlib import Path
from typing import Any

import tomli_w


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML document from disk."""
    with path.open("rb") as handle:
        return tomllib.load(handle)


def write_toml_atomic(
    *,
    path: Path,
    payload: Mapping[str, Any],
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Serialize ``payload`` and swap it into ``path`` via a sibling temp file."""
    document = tomli_w.dumps(payload).encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(document)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_name, path)
    except BaseException:
        with suppress(FileNotFoundError):
            os.unlink(temp_name)
        raise
