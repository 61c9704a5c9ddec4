"""JSON dependency exporter."""

from typing import BinaryIO, Iterable, Optional, Sequence

from ..errors import NonUnicodePathError
from ..models import DepsManifest, OutputTarget
from ..relativize import as_text
from ..utils.logging import get_logger


class JSONDepsExporter:
    """Exports dependencies as a JSON object with ``inputs`` and ``outputs``.

    Every path must be valid UTF-8. The document is assembled before
    anything is written, so a failing export leaves the destination
    untouched.
    """

    def __init__(self):
        self.logger = get_logger()

    def export(
        self,
        dependencies: Iterable[str],
        dest: BinaryIO,
        outputs: Optional[Sequence[OutputTarget]] = None,
    ) -> int:
        """Write the JSON document.

        Args:
            dependencies: Relativized dependency paths
            dest: Binary destination stream
            outputs: Output targets, or None if unknown

        Returns:
            Number of inputs written

        Raises:
            NonUnicodePathError: If an input or output path is not valid UTF-8
        """
        inputs = []
        for dep in dependencies:
            text = as_text(dep)
            if text is None:
                raise NonUnicodePathError(dep, "input")
            inputs.append(text)

        manifest = DepsManifest(inputs=inputs, outputs=self.output_paths(outputs))
        dest.write(manifest.model_dump_json().encode("utf-8"))

        self.logger.info(f"Exported {len(inputs)} dependencies as JSON")
        return len(inputs)

    def output_paths(
        self, outputs: Optional[Sequence[OutputTarget]]
    ) -> Optional[list[str]]:
        """Collect output paths as text, skipping standard output."""
        if outputs is None:
            return None

        paths = []
        for output in outputs:
            if output.is_stdout:
                continue
            path = str(output)
            text = as_text(path)
            if text is None:
                raise NonUnicodePathError(path, "output")
            paths.append(text)
        return paths
