"""Action inputs and the ``cache-only`` segment filter."""

from __future__ import annotations

import os
from collections.abc import Mapping

from cargocache.segments import Segment, all_segments, by_short_name


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for input ``name``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Read an action input, treating unset and blank values as absent."""
    env = os.environ if environ is None else environ
    value = env.get(input_env_name(name), "").strip()
    return value or None


def parse_cache_only(value: str | None) -> tuple[Segment, ...]:
    """Resolve the ``cache-only`` filter into segments, in registry order.

    An absent or blank filter selects every segment. Tokens are separated by
    whitespace; repeats are ignored. The first unknown token raises
    ParseCacheableItemError.
    """
    tokens = value.split() if value else []
    if not tokens:
        return all_segments()

    selected = {by_short_name(token) for token in tokens}
    return tuple(segment for segment in all_segments() if segment in selected)
