"""
Top-level export manifest maintenance.

The manifest is read as a set of distinct trimmed lines; an export line is
appended only when it is not already a member of that set. The
read-then-append sequence is not safe against concurrent writers.
"""

from pathlib import Path
from typing import Set, Union

from ..logging_config import get_logger
from .core.errors import FilesystemError

logger = get_logger(__name__)


def parse_manifest(text: str) -> Set[str]:
    """Return the distinct non-empty trimmed lines of manifest text."""
    return {line.strip() for line in text.splitlines() if line.strip()}


def ensure_exported(manifest_path: Union[str, Path], export_line: str) -> bool:
    """
    Ensure a manifest contains an export line exactly once.

    Args:
        manifest_path: Path to the shared top-level index file
        export_line: Export statement, e.g. ``export * from './User';``

    Returns:
        True if the line was appended, False if it was already present

    Raises:
        FilesystemError: If the manifest cannot be created or appended to
    """
    path = Path(manifest_path)
    line = export_line.strip()

    try:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch()
            logger.info("Created manifest %s", path)
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e

    # Read failures count as "line not present"
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("Could not read manifest %s (%s); appending anyway", path, e)
        raw = b""

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Could not decode manifest %s (%s); appending anyway", path, e)
        text = ""

    existing = parse_manifest(text)
    needs_newline = bool(raw) and not raw.endswith(b"\n")

    if line in existing:
        logger.debug("Manifest %s already exports %s", path, line)
        return False

    try:
        with open(path, "a", encoding="utf-8") as f:
            if needs_newline:
                f.write("\n")
            f.write(f"{line}\n")
    except OSError as e:
        raise FilesystemError(path, e.strerror or str(e)) from e

    logger.info("Added %s to %s", line, path)
    return True
