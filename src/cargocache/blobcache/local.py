"""Directory-backed blob cache.

Each key is stored as one uncompressed tar archive named after the key. Lookup
mirrors the hosted cache: exact primary key first, then for each fallback the
newest archive whose key starts with it.
"""

from __future__ import annotations

import base64
import binascii
import logging
import os
import shutil
import tarfile
import tempfile
from collections.abc import Sequence
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from cargocache.constants.cache import (
    ARCHIVE_SUFFIX,
    ARCHIVE_TEMP_PREFIX,
    ARCHIVE_TEMP_SUFFIX,
    STAGING_PREFIX,
)
from cargocache.exceptions import HostCacheError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveEntry:
    """One stored archive and the key it was saved under."""

    key: str
    path: Path
    created_ns: int


def encode_key(key: str) -> str:
    return base64.urlsafe_b64encode(key.encode("utf-8")).decode("ascii").rstrip("=")


def decode_key(name: str) -> str | None:
    padded = name + "=" * (-len(name) % 4)
    try:
        key = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None
    return key if key and encode_key(key) == name else None


class LocalBlobCache:
    """Blob cache that keeps archives under a local directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def archive_path(self, key: str) -> Path:
        return self.root / f"{encode_key(key)}{ARCHIVE_SUFFIX}"

    def entries(self) -> list[ArchiveEntry]:
        """Return every stored archive, oldest first."""
        if not self.root.is_dir():
            return []
        found: list[ArchiveEntry] = []
        for path in self.root.iterdir():
            if path.suffix != ARCHIVE_SUFFIX or not path.is_file():
                continue
            key = decode_key(path.stem)
            if key is None:
                logger.debug("Ignoring unrecognized archive %s", path)
                continue
            found.append(ArchiveEntry(key=key, path=path, created_ns=path.stat().st_mtime_ns))
        found.sort(key=lambda entry: (entry.created_ns, entry.key))
        return found

    def lookup(self, primary: str, fallbacks: Sequence[str]) -> ArchiveEntry | None:
        """Find the archive a restore would use, without extracting it."""
        entries = self.entries()
        for entry in entries:
            if entry.key == primary:
                return entry
        for prefix in fallbacks:
            matches = [entry for entry in entries if entry.key.startswith(prefix)]
            if matches:
                return matches[-1]
        return None

    def restore(self, primary: str, fallbacks: Sequence[str], paths: Sequence[Path]) -> str | None:
        try:
            entry = self.lookup(primary, fallbacks)
            if entry is None:
                return None
            self._extract(entry.path, paths)
        except (OSError, tarfile.TarError) as exc:
            raise HostCacheError(f"Failed to restore cache entry for key {primary!r}: {exc}") from exc
        return entry.key

    def save(self, primary: str, paths: Sequence[Path]) -> None:
        target = self.archive_path(primary)
        if target.exists():
            raise HostCacheError(f"Unable to reserve cache with key {primary!r}: an entry already exists")
        for path in paths:
            if not os.path.lexists(path):
                raise HostCacheError(f"Path does not exist and cannot be cached: {path}")

        temp_name: str | None = None
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=self.root,
                prefix=ARCHIVE_TEMP_PREFIX,
                suffix=ARCHIVE_TEMP_SUFFIX,
                delete=False,
            ) as handle:
                temp_name = handle.name
                with tarfile.open(fileobj=handle, mode="w", format=tarfile.PAX_FORMAT) as archive:
                    for index, path in enumerate(paths):
                        archive.add(path, arcname=str(index))
            os.replace(temp_name, target)
        except (OSError, tarfile.TarError) as exc:
            if temp_name:
                with suppress(FileNotFoundError):
                    Path(temp_name).unlink()
            raise HostCacheError(f"Failed to save cache entry for key {primary!r}: {exc}") from exc
        logger.debug("Stored %s at %s", primary, target)

    def _extract(self, archive_path: Path, paths: Sequence[Path]) -> None:
        staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=self.root))
        try:
            with tarfile.open(archive_path, mode="r") as archive:
                archive.extractall(staging, filter="data")
            for index, target in enumerate(paths):
                source = staging / str(index)
                if not os.path.lexists(source):
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                if source.is_dir() and target.is_dir():
                    shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
                else:
                    shutil.move(os.fspath(source), os.fspath(target))
        finally:
            shutil.rmtree(staging, ignore_errors=True)
