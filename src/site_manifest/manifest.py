"""Manifest entries describing a walked directory tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Literal

EntryKind = Literal["file", "directory", "symlink"]


@dataclass(frozen=True)
class FileEntry:
    """A regular file, identified by its git blob hash."""

    content_hash: str
    size: int
    kind: EntryKind = field(default="file", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "git_sha1": self.content_hash, "size": self.size}


@dataclass(frozen=True)
class SymlinkEntry:
    """A symbolic link, recorded by its raw target."""

    target: str
    kind: EntryKind = field(default="symlink", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "target": self.target}


@dataclass
class DirectoryEntry:
    """A directory mapping child names to their entries."""

    entries: dict[str, ManifestEntry] = field(default_factory=dict)
    kind: EntryKind = field(default="directory", init=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain nested dictionary."""
        return {
            "kind": self.kind,
            "entries": {name: entry.to_dict() for name, entry in self.entries.items()},
        }

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __getitem__(self, name: str) -> ManifestEntry:
        return self.entries[name]


ManifestEntry = FileEntry | DirectoryEntry | SymlinkEntry

# Content hash -> one path that produced it
ContentIndex = dict[str, str]


def entry_from_dict(data: dict[str, Any]) -> ManifestEntry:
    """Deserialize an entry produced by `to_dict`."""
    kind = data.get("kind")
    if kind == "file":
        return FileEntry(content_hash=data["git_sha1"], size=data["size"])
    if kind == "symlink":
        return SymlinkEntry(target=data["target"])
    if kind == "directory":
        return DirectoryEntry(
            entries={
                name: entry_from_dict(child)
                for name, child in data.get("entries", {}).items()
            }
        )
    raise ValueError(f"Unknown manifest entry kind: {kind!r}")


def iter_entries(
    directory: DirectoryEntry, prefix: str = ""
) -> Iterator[tuple[str, ManifestEntry]]:
    """Yield (relative_path, entry) pairs depth-first, directories included."""
    for name, entry in directory.entries.items():
        path = f"{prefix}/{name}" if prefix else name
        yield path, entry
        if isinstance(entry, DirectoryEntry):
            yield from iter_entries(entry, path)


def iter_files(
    directory: DirectoryEntry, prefix: str = ""
) -> Iterator[tuple[str, FileEntry]]:
    """Yield (relative_path, FileEntry) for every file under `directory`."""
    for path, entry in iter_entries(directory, prefix):
        if isinstance(entry, FileEntry):
            yield path, entry


def count_entries(directory: DirectoryEntry) -> dict[EntryKind, int]:
    """Count entries of each kind below `directory` (excluding itself)."""
    counts: dict[EntryKind, int] = {"file": 0, "directory": 0, "symlink": 0}
    for _, entry in iter_entries(directory):
        counts[entry.kind] += 1
    return counts
