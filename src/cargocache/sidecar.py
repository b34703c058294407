"""Per-segment records that carry restore-time state into the save phase."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from cargocache.constants.paths import SIDECAR_TEMP_PREFIX, SIDECAR_TEMP_SUFFIX
from cargocache.exceptions import SidecarFormatError
from cargocache.io import load_toml_file, write_toml_atomic
from cargocache.paths import sidecar_path
from cargocache.segments import Segment
from cargocache.types import FolderInfoPayload

logger = logging.getLogger(__name__)

_U64_LIMIT = 1 << 64


@dataclass(frozen=True)
class FolderInfo:
    """Where a segment lived and what it hashed to when it was restored."""

    path: str
    fingerprint: int

    def to_dict(self) -> FolderInfoPayload:
        return {"path": self.path, "fingerprint": self.fingerprint}


def write_folder_info(segment: Segment, info: FolderInfo, home: Path | None = None) -> Path:
    """Persist ``info`` for ``segment`` and return the record path."""
    path = sidecar_path(segment, home)
    if not 0 <= info.fingerprint < _U64_LIMIT:
        raise SidecarFormatError(path, f"fingerprint {info.fingerprint} is not an unsigned 64-bit value")
    try:
        info.path.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SidecarFormatError(path, f"folder path {info.path!r} is not valid UTF-8 ({exc.reason})") from exc
    write_toml_atomic(
        path=path,
        payload=info.to_dict(),
        temp_prefix=SIDECAR_TEMP_PREFIX,
        temp_suffix=SIDECAR_TEMP_SUFFIX,
    )
    logger.debug("Wrote cached folder info for %s to %s", segment.friendly_name, path)
    return path


def read_folder_info(segment: Segment, home: Path | None = None) -> FolderInfo | None:
    """Load the record for ``segment``, or ``None`` when none was written."""
    path = sidecar_path(segment, home)
    try:
        raw = load_toml_file(path)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as exc:
        raise SidecarFormatError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SidecarFormatError(path, f"not valid UTF-8 ({exc})") from exc

    folder_path = raw.get("path")
    fingerprint = raw.get("fingerprint")
    if not isinstance(folder_path, str):
        raise SidecarFormatError(path, "'path' must be a string")
    if isinstance(fingerprint, bool) or not isinstance(fingerprint, int):
        raise SidecarFormatError(path, "'fingerprint' must be an integer")
    if not 0 <= fingerprint < _U64_LIMIT:
        raise SidecarFormatError(path, f"'fingerprint' {fingerprint} is not an unsigned 64-bit value")
    return FolderInfo(path=folder_path, fingerprint=fingerprint)
