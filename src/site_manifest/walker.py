"""Recursive directory walk producing a manifest and content index."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import GIT_DIR
from .errors import UnsupportedEntryError
from .filters import FilterConfig
from .hashing import git_blob_hash
from .manifest import (
    ContentIndex,
    DirectoryEntry,
    FileEntry,
    ManifestEntry,
    SymlinkEntry,
)

logger = logging.getLogger(__name__)


@dataclass
class WalkStats:
    """Statistics from walking a directory tree."""

    files_hashed: int = 0
    symlinks_recorded: int = 0
    directories_processed: int = 0
    entries_filtered: int = 0  # Files and symlinks rejected by the filter
    bytes_hashed: int = 0
    unique_hashes: int = 0

    @property
    def duplicate_files(self) -> int:
        """Files whose content matched an earlier file."""
        return self.files_hashed - self.unique_hashes


@dataclass
class WalkResult:
    """Manifest tree, content index and stats from one walk."""

    root: DirectoryEntry
    index: ContentIndex = field(default_factory=dict)
    stats: WalkStats = field(default_factory=WalkStats)

    def __iter__(self) -> Iterator[DirectoryEntry | ContentIndex]:
        # Unpacks as (manifest_root, content_index)
        yield self.root
        yield self.index

    def to_dict(self) -> dict[str, Any]:
        return {"assets": dict(self.index), "entries": self.root.to_dict()["entries"]}


def walk(root: Path | str, filter_config: FilterConfig | None = None) -> WalkResult:
    """
    Walk `root` and build its manifest.

    Args:
        root: Directory to walk; resolved to an absolute path first
        filter_config: Include/exclude patterns applied to files and symlinks

    Returns:
        WalkResult with the manifest root, the hash -> path index and stats

    Raises:
        UnsupportedEntryError: An entry is not a file, directory or symlink
        OSError: Any filesystem read failure, including a missing root
    """
    root_path = Path(root).resolve()
    if not root_path.is_dir():
        if root_path.exists():
            raise NotADirectoryError(f"Not a directory: {root_path}")
        raise FileNotFoundError(f"No such directory: {root_path}")

    filter_config = filter_config or FilterConfig()
    index: ContentIndex = {}
    stats = WalkStats()

    logger.info("Walking %s", root_path)
    entries = _walk_directory(root_path, root_path, index, filter_config, stats)
    stats.unique_hashes = len(index)
    logger.info(
        "Hashed %d files (%d unique), %d symlinks, %d directories",
        stats.files_hashed,
        stats.unique_hashes,
        stats.symlinks_recorded,
        stats.directories_processed,
    )

    return WalkResult(root=DirectoryEntry(entries=entries), index=index, stats=stats)


def _walk_directory(
    directory: Path,
    root: Path,
    index: ContentIndex,
    filter_config: FilterConfig,
    stats: WalkStats,
) -> dict[str, ManifestEntry]:
    """Build the entries of one directory, recursing into subdirectories."""
    stats.directories_processed += 1
    entries: dict[str, ManifestEntry] = {}

    with os.scandir(directory) as it:
        for child in it:
            path = directory / child.name
            relative = path.relative_to(root).as_posix()

            # Directories are never filtered: --include=foo/bar must still enter foo
            is_dir = child.is_dir(follow_symlinks=False)
            if not is_dir and not filter_config.matches(relative):
                stats.entries_filtered += 1
                logger.debug("Filtered out %s", relative)
                continue

            if child.is_symlink():
                target = os.readlink(path)
                entries[child.name] = SymlinkEntry(target=target)
                stats.symlinks_recorded += 1
                logger.debug("Symlink %s -> %s", relative, target)
            elif child.is_file(follow_symlinks=False):
                data = path.read_bytes()
                content_hash = git_blob_hash(data)
                entries[child.name] = FileEntry(content_hash=content_hash, size=len(data))
                index[content_hash] = str(path)
                stats.files_hashed += 1
                stats.bytes_hashed += len(data)
                logger.debug("File %s %s (%d bytes)", relative, content_hash, len(data))
            elif is_dir:
                if relative == GIT_DIR:
                    logger.debug("Skipping %s", relative)
                    continue
                entries[child.name] = DirectoryEntry(
                    entries=_walk_directory(path, root, index, filter_config, stats)
                )
            else:
                # A vanished entry reports no type either; stat raises its OSError
                child.stat(follow_symlinks=False)
                raise UnsupportedEntryError(path)

    return entries
