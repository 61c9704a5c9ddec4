"""Exporters for writing dependency files."""

from .json import JSONDepsExporter
from .make import MakeDepsExporter, munge
from .zero import ZeroDepsExporter

__all__ = ["JSONDepsExporter", "MakeDepsExporter", "ZeroDepsExporter", "munge"]
