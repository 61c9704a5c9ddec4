"""Build-dependency export for document compilation runs."""

__version__ = "0.1.0"

from .config import Config
from .deps import write_deps
from .destination import open_destination
from .errors import (
    DependencySourceConsumedError,
    DepsError,
    NonUnicodePathError,
    StdoutTargetError,
)
from .exporters import JSONDepsExporter, MakeDepsExporter, ZeroDepsExporter, munge
from .models import DepsFormat, OutputTarget
from .relativize import DependencySource, PathRelativizer, as_text, relative_dependencies

__all__ = [
    "Config",
    "DependencySource",
    "DependencySourceConsumedError",
    "DepsError",
    "DepsFormat",
    "JSONDepsExporter",
    "MakeDepsExporter",
    "NonUnicodePathError",
    "OutputTarget",
    "PathRelativizer",
    "StdoutTargetError",
    "ZeroDepsExporter",
    "as_text",
    "munge",
    "open_destination",
    "relative_dependencies",
    "write_deps",
]
