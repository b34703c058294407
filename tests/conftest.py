"""Shared pytest fixtures for cargocache tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from cargocache.blobcache import LocalBlobCache
from cargocache.coordinator import RunContext
from cargocache.exceptions import HostCacheError
from cargocache.segments import Segment, all_segments


class RecordingBlobCache:
    """Blob cache double that records calls and can fail chosen uploads."""

    def __init__(self, *, fail_saves_for: Sequence[str] = (), hits: dict[str, str] | None = None) -> None:
        self.fail_saves_for = tuple(fail_saves_for)
        self.hits = hits or {}
        self.restore_calls: list[tuple[str, list[str], list[Path]]] = []
        self.save_calls: list[tuple[str, list[Path]]] = []

    def restore(self, primary: str, fallbacks: Sequence[str], paths: Sequence[Path]) -> str | None:
        self.restore_calls.append((primary, list(fallbacks), list(paths)))
        for fallback in fallbacks:
            if fallback in self.hits:
                return self.hits[fallback]
        return None

    def save(self, primary: str, paths: Sequence[Path]) -> None:
        self.save_calls.append((primary, list(paths)))
        if any(primary.startswith(prefix) for prefix in self.fail_saves_for):
            raise HostCacheError(f"simulated upload failure for {primary}")


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    """Return an isolated user home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture()
def cargo_home(home: Path) -> Path:
    return home / ".cargo"


@pytest.fixture()
def local_cache(tmp_path: Path) -> LocalBlobCache:
    return LocalBlobCache(tmp_path / "blobs")


@pytest.fixture()
def make_context(home: Path, cargo_home: Path):
    """Return a factory for run contexts rooted at the isolated home."""

    def _make(
        blob_cache: object,
        segments: tuple[Segment, ...] | None = None,
        *,
        cargo_home_override: Path | None = None,
    ) -> RunContext:
        return RunContext(
            segments=segments if segments is not None else all_segments(),
            blob_cache=blob_cache,  # type: ignore[arg-type]
            cargo_home=cargo_home_override if cargo_home_override is not None else cargo_home,
            state_home=home,
        )

    return _make


@pytest.fixture()
def recording_cache() -> type[RecordingBlobCache]:
    """Return the recording blob cache class for per-test construction."""
    return RecordingBlobCache
