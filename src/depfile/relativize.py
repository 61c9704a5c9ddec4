"""Relativization of dependency paths against the compilation root."""

import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .errors import DependencySourceConsumedError

Dependency = Union[str, bytes, os.PathLike]


def as_text(path: str) -> Optional[str]:
    """Return the path as text, or None if it is not valid UTF-8.

    Paths decoded with ``os.fsdecode`` keep undecodable bytes as lone
    surrogates, which refuse to encode.
    """
    try:
        path.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return path


class DependencySource:
    """Single-pass view over the dependencies of a compilation run.

    The dependencies are produced by the compiler and may come from a
    generator, so they can only be walked once. A second iteration raises
    DependencySourceConsumedError instead of silently yielding nothing.
    """

    def __init__(self, dependencies: Iterable[Dependency]):
        self._dependencies = dependencies
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __iter__(self) -> Iterator[str]:
        if self._consumed:
            raise DependencySourceConsumedError()
        self._consumed = True
        return (os.fsdecode(dep) for dep in self._dependencies)


class PathRelativizer:
    """Rewrites paths under a root directory relative to the working directory.

    The root and the working directory are resolved once, at construction,
    and used for every path passed to relativize().
    """

    def __init__(self, root: Dependency, cwd: Optional[Dependency] = None):
        self.root = Path(os.fsdecode(root))
        current_dir = Path(os.fsdecode(cwd)) if cwd is not None else Path.cwd()

        try:
            self.relative_root = Path(os.path.relpath(self.root, current_dir))
        except ValueError:
            # No relative path between drives
            self.relative_root = self.root

    def relativize(self, path: Dependency) -> str:
        """Relativize a single path, leaving paths outside the root as they are."""
        path = os.fsdecode(path)
        try:
            remainder = Path(path).relative_to(self.root)
        except ValueError:
            return path
        return os.fspath(self.relative_root / remainder)

    def relativize_all(self, dependencies: Iterable[Dependency]) -> Iterator[str]:
        """Lazily relativize a single-pass sequence of dependencies."""
        return map(self.relativize, DependencySource(dependencies))


def relative_dependencies(
    dependencies: Iterable[Dependency],
    root: Dependency,
    cwd: Optional[Dependency] = None,
) -> Iterator[str]:
    """Lazily relativize the dependencies of a compilation run.

    Args:
        dependencies: Absolute dependency paths, consumed once
        root: Root directory of the compilation
        cwd: Working directory, defaults to the process working directory

    Returns:
        Iterator of native path strings
    """
    return PathRelativizer(root, cwd).relativize_all(dependencies)
