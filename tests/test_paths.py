"""Tests for home and sidecar path resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from cargocache.paths import find_cargo_home, remove_tree, segment_path, sidecar_dir, sidecar_path
from cargocache.segments import by_short_name


def test_cargo_home_defaults_under_user_home(home: Path) -> None:
    assert find_cargo_home({}, home=home) == home / ".cargo"


def test_cargo_home_env_override(home: Path, tmp_path: Path) -> None:
    override = tmp_path / "opt" / "cargo"

    assert find_cargo_home({"CARGO_HOME": str(override)}, home=home) == override


def test_empty_cargo_home_env_is_ignored(home: Path) -> None:
    assert find_cargo_home({"CARGO_HOME": ""}, home=home) == home / ".cargo"


def test_relative_cargo_home_is_taken_from_cwd(
    home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    resolved = find_cargo_home({"CARGO_HOME": "build/../cargo"}, home=home)

    assert resolved == Path(os.getcwd()) / "cargo"


def test_cargo_home_keeps_symlinked_spelling(home: Path, tmp_path: Path) -> None:
    real = tmp_path / "real-cargo"
    real.mkdir()
    link = tmp_path / "cargo-link"
    link.symlink_to(real)

    assert find_cargo_home({"CARGO_HOME": str(link)}, home=home) == link


def test_segment_path_joins_components(cargo_home: Path) -> None:
    assert segment_path(by_short_name("indices"), cargo_home) == cargo_home / "registry" / "index"
    assert segment_path(by_short_name("git-repos"), cargo_home) == cargo_home / "git" / "db"


def test_sidecar_layout(home: Path) -> None:
    expected_dir = home / ".cache" / "github-rust-actions" / "cached_folder_info"

    assert sidecar_dir(home) == expected_dir
    assert sidecar_path(by_short_name("git-repos"), home) == expected_dir / "git-repos.toml"


def test_remove_tree_handles_files_dirs_and_links(tmp_path: Path) -> None:
    directory = tmp_path / "dir"
    (directory / "nested").mkdir(parents=True)
    (directory / "nested" / "file").write_text("x", encoding="utf-8")
    single = tmp_path / "file"
    single.write_text("x", encoding="utf-8")
    link = tmp_path / "link"
    link.symlink_to(directory)

    remove_tree(link)
    remove_tree(directory)
    remove_tree(single)

    assert not os.path.lexists(link)
    assert not directory.exists()
    assert not single.exists()
