"""Tests for walk configuration and environment overrides."""

from pathlib import Path

import pytest

from site_manifest.config import WalkConfig, load_config
from site_manifest.errors import InvalidPatternError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ROOT", "INCLUDE", "EXCLUDE", "PATTERN_SYNTAX"):
        monkeypatch.delenv(f"SITE_MANIFEST_{name}", raising=False)


class TestWalkConfig:
    def test_defaults(self):
        config = WalkConfig()

        assert config.root == Path("_site")
        assert config.include == []
        assert config.exclude == []
        assert config.pattern_syntax == "regex"
        assert config.to_filter_config().is_empty

    def test_regex_patterns(self):
        config = WalkConfig(include=[r"^assets/"], exclude=[r"\.map$"])
        filter_config = config.to_filter_config()

        assert filter_config.matches("assets/app.js")
        assert not filter_config.matches("assets/app.js.map")

    def test_glob_patterns(self):
        config = WalkConfig(include=["assets/**"], exclude=["**/*.map"], pattern_syntax="glob")
        filter_config = config.to_filter_config()

        assert filter_config.matches("assets/img/logo.svg")
        assert not filter_config.matches("assets/app.js.map")
        assert not filter_config.matches("index.html")

    def test_empty_patterns_dropped(self):
        config = WalkConfig(include=["", "x"])

        assert config.include == ["x"]


class TestLoadConfig:
    def test_explicit_values(self):
        config = load_config(root=Path("public"), include=["a"])

        assert config.root == Path("public")
        assert config.include == ["a"]

    def test_none_values_ignored(self):
        config = load_config(root=None, include=None)

        assert config.root == Path("_site")
        assert config.include == []

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError):
            load_config(exclude=["[unclosed"])

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SITE_MANIFEST_ROOT", "dist")
        monkeypatch.setenv("SITE_MANIFEST_INCLUDE", "^a\n^b")
        monkeypatch.setenv("SITE_MANIFEST_PATTERN_SYNTAX", "glob")

        config = load_config()

        assert config.root == Path("dist")
        assert config.include == ["^a", "^b"]
        assert config.pattern_syntax == "glob"

    def test_env_patterns_may_contain_colons(self, monkeypatch):
        monkeypatch.setenv("SITE_MANIFEST_INCLUDE", "^(?:assets|img)/\n(?P<name>\\w+)\\.html$")

        config = load_config()

        assert config.include == ["^(?:assets|img)/", r"(?P<name>\w+)\.html$"]
        assert config.to_filter_config().matches("assets/app.js")
        assert config.to_filter_config().matches("index.html")

    def test_explicit_values_win_over_env(self, monkeypatch):
        monkeypatch.setenv("SITE_MANIFEST_ROOT", "dist")

        config = load_config(root=Path("public"))

        assert config.root == Path("public")

    def test_unknown_syntax_in_env_ignored(self, monkeypatch):
        monkeypatch.setenv("SITE_MANIFEST_PATTERN_SYNTAX", "fnmatch")

        assert load_config().pattern_syntax == "regex"
