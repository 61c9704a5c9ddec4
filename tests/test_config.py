"""Tests for configuration loading."""

from pathlib import Path

from depfile.config import Config
from depfile.models import DepsFormat


def test_defaults():
    config = Config.default()

    assert config.deps.format is DepsFormat.JSON
    assert config.deps.root is None
    assert config.deps.destination == "-"
    assert config.log_level == "WARNING"


def test_from_yaml(tmp_path):
    path = tmp_path / "depfile.yaml"
    path.write_text("deps:\n  format: make\n  root: /proj\n  destination: out.d\n")

    config = Config.from_yaml(path)

    assert config.deps.format is DepsFormat.MAKE
    assert config.deps.root == Path("/proj")
    assert config.deps.destination == "out.d"


def test_empty_yaml(tmp_path):
    path = tmp_path / "depfile.yaml"
    path.write_text("")

    assert Config.from_yaml(path).deps.format is DepsFormat.JSON


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "depfile.yaml"
    config = Config.default()
    config.deps.format = DepsFormat.ZERO
    config.to_yaml(path)

    assert Config.from_yaml(path).deps.format is DepsFormat.ZERO


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DEPFILE_DEPS__FORMAT", "make")
    monkeypatch.setenv("DEPFILE_LOG_LEVEL", "DEBUG")

    config = Config()

    assert config.deps.format is DepsFormat.MAKE
    assert config.log_level == "DEBUG"


def test_resolve_root(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = Config.default()

    assert config.resolve_root() == Path.cwd()

    config.deps.root = Path("/proj")
    assert config.resolve_root() == Path("/proj")
