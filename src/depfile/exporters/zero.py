"""NUL-delimited dependency exporter."""

import os
from typing import BinaryIO, Iterable

from ..utils.logging import get_logger


class ZeroDepsExporter:
    """Exports dependencies as raw path bytes, each terminated by a NUL byte.

    Paths are written in their native encoding without escaping, which makes
    this the only format that can carry paths that are not valid UTF-8.
    """

    def __init__(self):
        self.logger = get_logger()

    def export(self, dependencies: Iterable[str], dest: BinaryIO) -> int:
        """Write one NUL-terminated record per dependency.

        Returns:
            Number of dependencies written
        """
        count = 0
        for dep in dependencies:
            dest.write(os.fsencode(dep))
            dest.write(b"\0")
            count += 1

        self.logger.info(f"Exported {count} dependencies as NUL-delimited list")
        return count
