"""Reading and writing of search index artifacts on disk."""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class IndexArtifactNotFoundError(FileNotFoundError):
    """Raised when there is no built search index to overwrite."""


def write_text(output_path: Union[str, Path], payload: str) -> Path:
    """
    Write payload to output_path.

    A missing parent directory is created and the write retried once.

    Args:
        output_path: Destination file
        payload: Serialized index

    Returns:
        The written path
    """
    output_file = Path(output_path)
    try:
        output_file.write_text(payload, encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"Creating missing output directory {output_file.parent}")
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
    return output_file


def find_index_artifact(candidate_dirs: List[Union[str, Path]], pattern: str = "search-index-*.json") -> Path:
    """
    Locate the search index produced by the static-site build.

    Candidate directories are checked in order; within a directory the first
    matching file name in sorted order wins.

    Args:
        candidate_dirs: Directories that may hold the built index
        pattern: Glob pattern of the index file name

    Returns:
        Path of the artifact to overwrite

    Raises:
        IndexArtifactNotFoundError: If no candidate directory holds a match
    """
    for candidate in candidate_dirs:
        directory = Path(candidate)
        if not directory.is_dir():
            logger.debug(f"Search index directory not found: {directory}")
            continue

        matches = sorted(p for p in directory.glob(pattern) if p.is_file())
        if matches:
            return matches[0]

    searched = ", ".join(str(c) for c in candidate_dirs) or "(none)"
    raise IndexArtifactNotFoundError(
        f"No existing search index matching '{pattern}' found to overwrite in: {searched}. Run the docs build first."
    )


def mirror(payload: str, file_name: str, mirror_dirs: List[Union[str, Path]]) -> List[Path]:
    """
    Copy payload into additional output directories.

    Mirrors are best effort: a failed copy is logged and skipped.

    Returns:
        Paths that were written
    """
    written = []
    for mirror_dir in mirror_dirs:
        target = Path(mirror_dir) / file_name
        try:
            written.append(write_text(target, payload))
            logger.info(f"Search index copied to {target}")
        except OSError as e:
            logger.warning(f"Could not copy index to {target}: {e}")
    return written
