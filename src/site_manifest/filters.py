"""Include/exclude filtering of walked paths."""

from __future__ import annotations

import os
import posixpath
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .errors import InvalidPatternError


@dataclass(frozen=True)
class FilterConfig:
    """Compiled include and exclude patterns.

    Patterns are regular expressions searched against the path relative to
    the walk root, with `/` as separator.
    """

    include: tuple[re.Pattern[str], ...] = field(default_factory=tuple)
    exclude: tuple[re.Pattern[str], ...] = field(default_factory=tuple)

    @classmethod
    def from_strings(
        cls,
        include: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> FilterConfig:
        return cls(
            include=tuple(compile_patterns(include)),
            exclude=tuple(compile_patterns(exclude)),
        )

    @property
    def is_empty(self) -> bool:
        return not self.include and not self.exclude

    def matches(self, relative_path: str) -> bool:
        return should_include(relative_path, self.include, self.exclude)


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile pattern strings, reporting the first invalid one."""
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise InvalidPatternError(pattern, str(e)) from e
    return compiled


def normalize_path(relative_path: str) -> str:
    """Collapse redundant separators and segments, using `/` throughout."""
    if os.sep != "/":
        relative_path = relative_path.replace(os.sep, "/")
    return posixpath.normpath(relative_path)


def should_include(
    relative_path: str,
    include: Sequence[re.Pattern[str]],
    exclude: Sequence[re.Pattern[str]],
) -> bool:
    """Check a root-relative path against include and exclude patterns.

    With a non-empty include list the path must match at least one include
    pattern. A match on any exclude pattern then rejects it.
    """
    path = normalize_path(relative_path)
    if include and not any(pattern.search(path) for pattern in include):
        return False
    if exclude and any(pattern.search(path) for pattern in exclude):
        return False
    return True


def glob_to_regex(glob: str) -> str:
    """Translate a path glob into an anchored regular expression.

    `*` and `?` stay within one path segment, `**` spans segments and a
    `**/` prefix also matches zero directories.
    """
    parts: list[str] = []
    i = 0
    n = len(glob)
    while i < n:
        c = glob[i]
        if c == "*":
            if glob.startswith("**", i):
                i += 2
                if glob.startswith("/", i):
                    i += 1
                    parts.append("(?:.*/)?")
                else:
                    parts.append(".*")
                continue
            parts.append("[^/]*")
        elif c == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(c))
        i += 1
    return "^" + "".join(parts) + "$"
