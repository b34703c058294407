"""Content fingerprints for cached directory trees.

A fingerprint covers names, entry types, and regular-file contents. It does not
cover permissions, ownership, or timestamps, so a file whose only change is its
executable bit keeps the same fingerprint.
"""

from __future__ import annotations

import hashlib
import os
import struct
from dataclasses import dataclass
from pathlib import Path

from cargocache.constants.fingerprint import (
    FILE_HASH_CHUNK_SIZE,
    FINGERPRINT_DIGEST_SIZE,
    TAG_DIRECTORY,
    TAG_FILE,
    TAG_OTHER,
    TAG_SYMLINK,
)

_U64 = struct.Struct("<Q")


@dataclass(frozen=True)
class Ignores:
    """Entries excluded from fingerprinting, keyed by depth below the root.

    Depth 1 names the root's immediate children. A matching entry is skipped
    together with its whole subtree.
    """

    rules: frozenset[tuple[int, str]] = frozenset()

    @classmethod
    def of(cls, *rules: tuple[int, str]) -> Ignores:
        return cls(frozenset(rules))

    def add(self, depth: int, name: str) -> Ignores:
        """Return a copy that also ignores ``name`` at ``depth``."""
        if depth < 1:
            raise ValueError(f"Ignore depth must be at least 1, got {depth}")
        return Ignores(self.rules | {(depth, name)})

    def matches(self, depth: int, name: str) -> bool:
        return (depth, name) in self.rules


def fingerprint_directory(root: Path, ignores: Ignores = Ignores()) -> int:
    """Return an unsigned 64-bit fingerprint of the tree under ``root``.

    A missing root hashes the same as an empty directory.
    """
    hasher = hashlib.blake2b(digest_size=FINGERPRINT_DIGEST_SIZE)
    if os.path.lexists(root):
        _absorb_directory(hasher, os.fspath(root), (), 1, ignores)
    return int.from_bytes(hasher.digest(), "little")


def _absorb_directory(
    hasher: hashlib.blake2b,
    directory: str,
    rel_parts: tuple[bytes, ...],
    depth: int,
    ignores: Ignores,
) -> None:
    with os.scandir(directory) as iterator:
        entries = sorted(iterator, key=lambda entry: os.fsencode(entry.name))

    for entry in entries:
        if ignores.matches(depth, entry.name):
            continue
        entry_parts = (*rel_parts, os.fsencode(entry.name))
        _absorb_chunk(hasher, b"/".join(entry_parts))

        if entry.is_symlink():
            hasher.update(TAG_SYMLINK)
            _absorb_chunk(hasher, os.fsencode(os.readlink(entry.path)))
        elif entry.is_dir(follow_symlinks=False):
            hasher.update(TAG_DIRECTORY)
            _absorb_directory(hasher, entry.path, entry_parts, depth + 1, ignores)
        elif entry.is_file(follow_symlinks=False):
            hasher.update(TAG_FILE)
            _absorb_file(hasher, entry.path)
        else:
            hasher.update(TAG_OTHER)


def _absorb_chunk(hasher: hashlib.blake2b, data: bytes) -> None:
    """Absorb ``data`` with a length prefix so adjacent fields cannot blur."""
    hasher.update(_U64.pack(len(data)))
    hasher.update(data)


def _absorb_file(hasher: hashlib.blake2b, path: str) -> None:
    with open(path, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        hasher.update(_U64.pack(size))
        consumed = 0
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            consumed += len(chunk)
            hasher.update(chunk)
    if consumed != size:
        raise OSError(f"File changed size while fingerprinting: {path}")
