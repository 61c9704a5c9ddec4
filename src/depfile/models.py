"""Data models for dependency export."""

import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field


class DepsFormat(str, Enum):
    """Dependency file formats understood by external build systems."""

    JSON = "json"
    ZERO = "zero"
    MAKE = "make"


class OutputTarget(BaseModel):
    """An output artifact of the compilation: a file path or standard output."""

    path: Optional[Path] = Field(None, description="Output file, None for stdout")

    model_config = {"frozen": True}

    @classmethod
    def file(cls, path: Union[str, bytes, os.PathLike]) -> "OutputTarget":
        """Create a target for a file path."""
        return cls(path=Path(os.fsdecode(path)))

    @classmethod
    def stdout(cls) -> "OutputTarget":
        """Create a target for standard output."""
        return cls()

    @classmethod
    def parse(cls, value: str) -> "OutputTarget":
        """Parse a command-line value, where ``-`` means standard output."""
        if value == "-":
            return cls.stdout()
        return cls.file(value)

    @property
    def is_stdout(self) -> bool:
        return self.path is None

    def __str__(self) -> str:
        if self.path is None:
            return "<stdout>"
        return os.fspath(self.path)


class DepsManifest(BaseModel):
    """JSON document listing the inputs and outputs of a compilation."""

    inputs: list[str] = Field(default_factory=list, description="Files read")
    outputs: Optional[list[str]] = Field(
        None, description="Files written, null when unknown"
    )
