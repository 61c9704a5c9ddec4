"""Make rule dependency exporter."""

from typing import BinaryIO, Iterable, Sequence

from ..errors import StdoutTargetError
from ..models import OutputTarget
from ..relativize import as_text
from ..utils.logging import get_logger


def munge(path: str) -> str:
    """Escape a path for use in a make rule.

    Follows the escaping done by GCC's ``-M`` output (``munge`` in
    libcpp/mkdeps.cc). Some characters have no escape in make syntax and
    are passed through verbatim.

    Args:
        path: Path to escape

    Returns:
        Escaped path
    """
    result = []
    slashes = 0
    for char in path:
        if char == "\\":
            slashes += 1
        elif char == "$":
            result.append("$")
            slashes = 0
        elif char == ":":
            result.append("\\")
            slashes = 0
        elif char in " \t":
            # 2N+1 backslashes before whitespace stand for N backslashes
            # followed by an escaped space
            result.append("\\" * (slashes + 1))
            slashes = 0
        elif char == "#":
            result.append("\\")
            slashes = 0
        else:
            slashes = 0
        result.append(char)
    return "".join(result)


class MakeDepsExporter:
    """Exports dependencies as a single make rule, ``targets: deps``.

    The output paths are the rule's targets, so standard output cannot be
    one of them. Paths that are not valid UTF-8 are skipped so that the
    rule still works for every other path.
    """

    def __init__(self):
        self.logger = get_logger()

    def export(
        self,
        dependencies: Iterable[str],
        dest: BinaryIO,
        outputs: Sequence[OutputTarget],
    ) -> int:
        """Write the make rule.

        Args:
            dependencies: Relativized dependency paths
            dest: Binary destination stream
            outputs: Output targets of the rule

        Returns:
            Number of dependencies written

        Raises:
            StdoutTargetError: If an output is standard output
        """
        if any(output.is_stdout for output in outputs):
            raise StdoutTargetError()

        targets = []
        for output in outputs:
            text = as_text(str(output))
            if text is None:
                self.logger.debug(f"Skipping non-UTF-8 target {str(output)!r}")
                continue
            targets.append(munge(text))

        if not targets:
            self.logger.debug("No make target available, skipping rule")
            return 0

        dest.write(" ".join(targets).encode("utf-8"))
        dest.write(b":")

        count = 0
        for dep in dependencies:
            text = as_text(dep)
            if text is None:
                self.logger.debug(f"Skipping non-UTF-8 dependency {dep!r}")
                continue
            dest.write(b" ")
            dest.write(munge(text).encode("utf-8"))
            count += 1
        dest.write(b"\n")

        self.logger.info(f"Exported {count} dependencies as make rule")
        return count
