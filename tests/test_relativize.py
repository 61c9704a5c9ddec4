"""Tests for dependency path relativization."""

import os

import pytest

from depfile.errors import DependencySourceConsumedError
from depfile.relativize import (
    DependencySource,
    PathRelativizer,
    as_text,
    relative_dependencies,
)

from .conftest import NON_UTF8_NAME, RecordingIterator


class TestPathRelativizer:
    def test_path_under_root_same_cwd(self):
        relativizer = PathRelativizer("/proj", cwd="/proj")
        assert relativizer.relativize("/proj/a/b") == "a/b"

    def test_path_outside_root_unchanged(self):
        relativizer = PathRelativizer("/proj", cwd="/proj")
        assert relativizer.relativize("/usr/share/fonts/x.otf") == "/usr/share/fonts/x.otf"

    def test_prefix_is_component_wise(self):
        relativizer = PathRelativizer("/proj", cwd="/proj")
        assert relativizer.relativize("/project/main.typ") == "/project/main.typ"

    def test_cwd_below_root(self):
        relativizer = PathRelativizer("/proj", cwd="/proj/build")
        assert relativizer.relativize("/proj/src/main.typ") == "../src/main.typ"

    def test_cwd_above_root(self):
        relativizer = PathRelativizer("/proj", cwd="/")
        assert relativizer.relativize("/proj/src/main.typ") == "proj/src/main.typ"

    def test_bytes_path(self):
        relativizer = PathRelativizer(b"/proj", cwd=b"/proj")
        assert relativizer.relativize(b"/proj/main.typ") == "main.typ"

    def test_non_utf8_path_preserved(self):
        relativizer = PathRelativizer("/proj", cwd="/proj")
        result = relativizer.relativize("/proj/" + NON_UTF8_NAME)
        assert os.fsencode(result) == b"bad\xff.typ"

    def test_defaults_to_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        relativizer = PathRelativizer(tmp_path)
        assert relativizer.relativize(tmp_path / "main.typ") == "main.typ"

    def test_falls_back_to_root_without_relative_path(self, monkeypatch):
        def no_relpath(path, start=None):
            raise ValueError("path is on mount 'C:', start on mount 'D:'")

        monkeypatch.setattr(os.path, "relpath", no_relpath)
        relativizer = PathRelativizer("/proj", cwd="/elsewhere")
        assert relativizer.relativize("/proj/a/b") == "/proj/a/b"


class TestDependencySource:
    def test_yields_decoded_paths(self):
        source = DependencySource([b"/a", "/b"])
        assert list(source) == ["/a", "/b"]
        assert source.consumed

    def test_second_iteration_raises(self):
        source = DependencySource(["/a"])
        list(source)
        with pytest.raises(DependencySourceConsumedError):
            iter(source)

    def test_consumed_error_is_runtime_error(self):
        source = DependencySource([])
        list(source)
        with pytest.raises(RuntimeError):
            list(source)


class TestRelativeDependencies:
    def test_is_lazy(self):
        deps = RecordingIterator(["/proj/a", "/proj/b"])
        result = relative_dependencies(deps, "/proj", cwd="/proj")
        assert deps.taken == 0
        assert next(result) == "a"
        assert deps.taken == 1

    def test_preserves_order(self):
        deps = ["/proj/z", "/outside/y", "/proj/a"]
        result = list(relative_dependencies(deps, "/proj", cwd="/proj"))
        assert result == ["z", "/outside/y", "a"]


def test_as_text():
    assert as_text("/proj/main.typ") == "/proj/main.typ"
    assert as_text(NON_UTF8_NAME) is None
