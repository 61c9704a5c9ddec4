"""Writing the dependencies of a compilation run in a chosen format."""

from typing import BinaryIO, Iterable, Optional, Sequence, Union

from .exporters import JSONDepsExporter, MakeDepsExporter, ZeroDepsExporter
from .models import DepsFormat, OutputTarget
from .relativize import Dependency, PathRelativizer
from .utils.logging import get_logger


def write_deps(
    dependencies: Iterable[Dependency],
    root: Dependency,
    dest: BinaryIO,
    format: Union[DepsFormat, str],
    outputs: Optional[Sequence[OutputTarget]] = None,
    cwd: Optional[Dependency] = None,
) -> int:
    """Write dependencies to a stream in the given format.

    Dependencies under the root are written relative to the working
    directory. The dependencies are iterated at most once.

    Args:
        dependencies: Absolute paths read by the compilation
        root: Root directory of the compilation
        dest: Binary destination stream, flushed but not closed
        format: Dependency file format
        outputs: Output targets, or None if unknown
        cwd: Working directory, defaults to the process working directory

    Returns:
        Number of dependencies written

    Raises:
        NonUnicodePathError: For a non-UTF-8 path in JSON format
        StdoutTargetError: For a standard output target in make format
        ValueError: For an unknown format
    """
    format = DepsFormat(format)
    relativizer = PathRelativizer(root, cwd)

    if outputs is not None:
        outputs = [
            output
            if output.is_stdout
            else OutputTarget.file(relativizer.relativize(output.path))
            for output in outputs
        ]

    if format is DepsFormat.JSON:
        count = JSONDepsExporter().export(
            relativizer.relativize_all(dependencies), dest, outputs
        )
    elif format is DepsFormat.ZERO:
        count = ZeroDepsExporter().export(relativizer.relativize_all(dependencies), dest)
    else:
        if outputs is None:
            get_logger().debug("No outputs given, skipping make rule")
            return 0
        count = MakeDepsExporter().export(
            relativizer.relativize_all(dependencies), dest, outputs
        )

    dest.flush()
    return count
