"""Configuration for Site Manifest."""

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from . import DEFAULT_ROOT, ENV_PREFIX
from .filters import FilterConfig, compile_patterns, glob_to_regex


class WalkConfig(BaseModel):
    """Configuration for a manifest walk."""

    root: Path = Field(default=Path(DEFAULT_ROOT))
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    pattern_syntax: Literal["regex", "glob"] = "regex"

    @field_validator("include", "exclude")
    @classmethod
    def drop_empty(cls, patterns: list[str]) -> list[str]:
        return [p for p in patterns if p]

    def regex_patterns(self, patterns: list[str]) -> list[str]:
        """Patterns as regular expressions, translating globs if needed."""
        if self.pattern_syntax == "glob":
            return [glob_to_regex(p) for p in patterns]
        return list(patterns)

    def to_filter_config(self) -> FilterConfig:
        """Compile include/exclude patterns into a FilterConfig."""
        return FilterConfig(
            include=tuple(compile_patterns(self.regex_patterns(self.include))),
            exclude=tuple(compile_patterns(self.regex_patterns(self.exclude))),
        )


def load_config(**overrides: Any) -> WalkConfig:
    """Build a configuration from explicit values.

    Environment variables override the defaults but not explicit values.
    Patterns are compiled eagerly so invalid ones fail here.
    """
    data = _env_overrides()
    data.update({k: v for k, v in overrides.items() if v is not None})
    config = WalkConfig.model_validate(data)
    config.to_filter_config()
    return config


def _env_overrides() -> dict[str, Any]:
    """Read SITE_MANIFEST_* environment variables."""
    data: dict[str, Any] = {}

    # SITE_MANIFEST_ROOT
    if root := os.environ.get(f"{ENV_PREFIX}ROOT"):
        data["root"] = root

    # SITE_MANIFEST_INCLUDE / SITE_MANIFEST_EXCLUDE, one pattern per line
    for key in ("include", "exclude"):
        if value := os.environ.get(f"{ENV_PREFIX}{key.upper()}"):
            data[key] = value.splitlines()

    # SITE_MANIFEST_PATTERN_SYNTAX
    if syntax := os.environ.get(f"{ENV_PREFIX}PATTERN_SYNTAX"):
        if syntax in ("regex", "glob"):
            data["pattern_syntax"] = syntax

    return data
