"""Exceptions raised while building a manifest."""

from pathlib import Path


class ManifestError(Exception):
    """Base exception for manifest errors."""


class UnsupportedEntryError(ManifestError):
    """A directory entry is neither a file, a directory nor a symlink."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"Unsupported filesystem entry: {self.path}")


class InvalidPatternError(ManifestError, ValueError):
    """An include/exclude pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
