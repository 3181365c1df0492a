"""
Export artifacts and their hand-off to disk.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ExportArtifact:
    """A finished export ready for download."""
    filename: str
    mime_type: str
    data: bytes
    page_count: Optional[int] = None

    @property
    def size(self) -> int:
        return len(self.data)


def write_artifact(artifact: ExportArtifact, output_dir: str) -> bool:
    """
    Write an artifact under output_dir using its filename.

    Args:
        artifact: Artifact to write
        output_dir: Target directory, created if missing

    Returns:
        True if the file was written, False otherwise
    """
    path = os.path.join(output_dir, artifact.filename)
    try:
        os.makedirs(output_dir, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(artifact.data)
    except OSError:
        logger.exception("Could not write %s", path)
        return False

    logger.info("Wrote %s (%d bytes)", path, artifact.size)
    return True
