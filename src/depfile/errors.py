"""Exceptions raised while exporting dependencies."""

from typing import Literal


class DepsError(Exception):
    """Base class for dependency export errors."""


class NonUnicodePathError(DepsError):
    """A path that must be written as text is not valid UTF-8."""

    def __init__(self, path: str, kind: Literal["input", "output"]):
        self.path = path
        self.kind = kind
        super().__init__(f"{kind} {path!r} is not valid utf-8")


class StdoutTargetError(DepsError):
    """Standard output was given as the target of a make rule."""

    def __init__(self):
        super().__init__(
            "make dependencies contain the output path, but the output was stdout"
        )


class DependencySourceConsumedError(DepsError, RuntimeError):
    """A single-pass dependency source was iterated twice."""

    def __init__(self):
        super().__init__("dependency source has already been consumed")
