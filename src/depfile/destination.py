"""Acquisition of the stream a dependency file is written to."""

import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .models import OutputTarget
from .utils.logging import get_logger


@contextmanager
def open_destination(target: OutputTarget) -> Iterator[BinaryIO]:
    """Open the destination of a dependency file for binary writing.

    Files are created (with their parent directories) and closed on exit.
    Standard output is flushed but left open.

    Args:
        target: File path or standard output

    Yields:
        Writable binary stream
    """
    if target.is_stdout:
        stream = sys.stdout.buffer
        try:
            yield stream
        finally:
            stream.flush()
        return

    target.path.parent.mkdir(parents=True, exist_ok=True)
    get_logger().debug(f"Writing dependencies to {target}")
    with open(target.path, "wb") as f:
        yield f
