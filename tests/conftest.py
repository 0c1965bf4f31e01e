"""Shared test fixtures for site-manifest."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


def write_tree(root: Path, files: dict[str, bytes | str]) -> Path:
    """Create files (and their parent directories) under root.

    Args:
        root: Directory to populate
        files: Mapping of relative path -> content

    Returns:
        The root path
    """
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_bytes(content)
    return root


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """
    A small built site.

    Structure:
        _site/
        ├── index.html
        ├── about.html
        ├── assets/
        │   ├── app.js
        │   ├── style.css
        │   └── img/
        │       └── logo.svg
        ├── blog/
        │   └── post.html      (same content as about.html)
        ├── latest.html -> blog/post.html
        └── .git/
            └── HEAD
    """
    root = write_tree(
        tmp_path / "_site",
        {
            "index.html": "<h1>Home</h1>\n",
            "about.html": "<p>About</p>\n",
            "assets/app.js": "console.log('hi');\n",
            "assets/style.css": "body { margin: 0; }\n",
            "assets/img/logo.svg": "<svg/>",
            "blog/post.html": "<p>About</p>\n",
            ".git/HEAD": "ref: refs/heads/main\n",
        },
    )
    (root / "latest.html").symlink_to("blog/post.html")
    return root
