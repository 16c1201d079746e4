"""
Pytest configuration and shared fixtures.

Provides isolated configuration, sample source files in several languages,
and a small markdown docs tree used across the test suite.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from hu.core.config import clear_cache

# ==============================================================================
# Isolation
# ==============================================================================

HU_ENV_VARS = ("HU_READ_CONTEXT", "HU_GREP_LIMIT", "HU_GREP_HIDDEN", "HU_DOCS_LIMIT")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Keep tests away from the real user config and environment.

    Points XDG_CONFIG_HOME at an empty temp directory, removes HU_* variables
    and clears the config cache before and after each test.
    """
    xdg = tmp_path / "xdg-config"
    xdg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for name in HU_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_cache()
    yield xdg
    clear_cache()


# ==============================================================================
# Source Fixtures
# ==============================================================================

RUST_SOURCE = """\
use std::fmt;

pub struct Config {
    name: String,
}

impl Config {
    pub fn new(name: &str) -> Self {
        Config { name: name.to_string() }
    }

    fn validate(&self) -> bool {
        true
    }
}

pub enum Mode {
    Fast,
    Safe,
}

fn helper() {}
"""

PYTHON_SOURCE = """\
import os


class Loader(Base):
    def load(self, path):
        return open(path).read()

    def _cache(self):
        pass


def public_api(x) -> int:
    return x


def _internal():
    pass
"""

MARKDOWN_DOCS = """\
# Main Title

Introduction paragraph.

## First Section

First section content.
More content here.

### Nested Section

Nested content.

## Second Section

Second section content.
"""


@pytest.fixture
def rust_source() -> str:
    """Rust module used by outline and interface tests."""
    return RUST_SOURCE


@pytest.fixture
def python_source() -> str:
    """Python module used by outline and interface tests."""
    return PYTHON_SOURCE


@pytest.fixture
def rust_file(tmp_path: Path) -> Path:
    """Write a small Rust module and return its path."""
    path = tmp_path / "config.rs"
    path.write_text(RUST_SOURCE)
    return path


@pytest.fixture
def python_file(tmp_path: Path) -> Path:
    """Write a small Python module and return its path."""
    path = tmp_path / "loader.py"
    path.write_text(PYTHON_SOURCE)
    return path


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """
    Provide a docs tree.

    Creates:
    - docs/README.md (main doc)
    - docs/guide/setup.md
    - docs/notes.txt (not markdown)
    - docs/node_modules/pkg/README.md (ignored directory)
    - docs/.drafts/wip.md (hidden directory)
    """
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / ".drafts").mkdir()

    (root / "README.md").write_text(MARKDOWN_DOCS)
    (root / "guide" / "setup.md").write_text(
        "# Setup\n\n## Installation\n\npip install hu\n\n## Configuration\n\nEdit .hu.json\n"
    )
    (root / "notes.txt").write_text("# Not markdown\n")
    (root / "node_modules" / "pkg" / "README.md").write_text("# Vendored\n")
    (root / ".drafts" / "wip.md").write_text("# Draft\n")
    return root


# ==============================================================================
# Git Fixtures
# ==============================================================================


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """
    Provide a git repository with one committed file, notes.txt.

    Skips the test when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    (repo / "notes.txt").write_text("first line\nsecond line\n")
    _git(repo, "add", "notes.txt")
    _git(repo, "commit", "-q", "-m", "Initial commit")
    return repo
