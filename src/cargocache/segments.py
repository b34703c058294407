"""Registry of independently cached Cargo home segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from cargocache.exceptions import ParseCacheableItemError
from cargocache.fingerprint import Ignores

SegmentKind = Literal["indices", "crates-source", "vcs-checkouts"]


@dataclass(frozen=True)
class Segment:
    """One cacheable subtree of Cargo home."""

    kind: SegmentKind
    short_name: str
    friendly_name: str
    relative_path: tuple[str, ...]
    ignores: Ignores = Ignores()


INDICES = Segment(
    kind="indices",
    short_name="indices",
    friendly_name="Registry indices",
    relative_path=("registry", "index"),
    # Cargo touches this marker on every index update, even when nothing changed.
    ignores=Ignores.of((1, ".last-updated")),
)
CRATES = Segment(
    kind="crates-source",
    short_name="crates",
    friendly_name="Crate files",
    relative_path=("registry", "cache"),
)
GIT_REPOS = Segment(
    kind="vcs-checkouts",
    short_name="git-repos",
    friendly_name="Git repositories",
    relative_path=("git", "db"),
)

_SEGMENTS: tuple[Segment, ...] = (INDICES, CRATES, GIT_REPOS)
_BY_SHORT_NAME: dict[str, Segment] = {segment.short_name: segment for segment in _SEGMENTS}


def all_segments() -> tuple[Segment, ...]:
    """Return every cacheable segment in stable registry order."""
    return _SEGMENTS


def by_short_name(name: str) -> Segment:
    """Look up a segment by its short name."""
    try:
        return _BY_SHORT_NAME[name]
    except KeyError:
        raise ParseCacheableItemError(name) from None


def short_names() -> tuple[str, ...]:
    """Return the short names accepted by ``cache-only``."""
    return tuple(segment.short_name for segment in _SEGMENTS)
