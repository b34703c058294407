"""Tests for action input reading and cache-only parsing."""

from __future__ import annotations

import pytest

from cargocache.exceptions import ConfigError, ParseCacheableItemError
from cargocache.host.inputs import get_input, input_env_name, parse_cache_only
from cargocache.segments import all_segments


def _names(value: str | None) -> list[str]:
    return [segment.short_name for segment in parse_cache_only(value)]


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t"], ids=["none", "empty", "spaces", "newline-tab"])
def test_absent_or_blank_selects_everything(value: str | None) -> None:
    assert parse_cache_only(value) == all_segments()


def test_selection_follows_registry_order() -> None:
    assert _names("git-repos indices") == ["indices", "git-repos"]


def test_duplicates_are_dropped() -> None:
    assert _names("crates crates\ncrates") == ["crates"]


def test_selection_is_pure() -> None:
    assert parse_cache_only("crates git-repos") == parse_cache_only("crates git-repos")


def test_unknown_token_is_named() -> None:
    with pytest.raises(ParseCacheableItemError) as exc_info:
        parse_cache_only("indices bogus crates")

    assert exc_info.value.token == "bogus"
    assert isinstance(exc_info.value, ConfigError)


def test_input_env_name_matches_runner_convention() -> None:
    assert input_env_name("cache-only") == "INPUT_CACHE-ONLY"
    assert input_env_name("some input") == "INPUT_SOME_INPUT"


def test_get_input_reads_and_strips() -> None:
    environ = {"INPUT_CACHE-ONLY": "  indices  "}

    assert get_input("cache-only", environ) == "indices"


@pytest.mark.parametrize("environ", [{}, {"INPUT_CACHE-ONLY": ""}, {"INPUT_CACHE-ONLY": "  "}])
def test_get_input_treats_blank_as_absent(environ: dict[str, str]) -> None:
    assert get_input("cache-only", environ) is None
