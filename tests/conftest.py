"""Shared fixtures: every test gets its own home and working directory."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from steamer_plugin import ConfigStore, Reporter


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Fake user home directory."""
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("HOME", str(path))
    monkeypatch.setenv("USERPROFILE", str(path))
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Fake project directory, made the current working directory."""
    path = tmp_path / "project"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def reporter():
    return Reporter("steamer-plugin-kit", columns=84)


@pytest.fixture
def store(home, workdir, reporter):
    return ConfigStore("steamer-plugin-kit", reporter=reporter)
