"""Discovery of Unity result files on disk."""

import logging
from pathlib import Path
from typing import List, Union

from .errors import NoResultFilesError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.test*"


def find_result_files(directory: Union[str, Path] = "./", pattern: str = DEFAULT_PATTERN) -> List[Path]:
    """
    Find result files below `directory`.

    Args:
        directory: Directory to search recursively
        pattern: Filename glob, e.g. `*.testpass` or `*.test*`

    Returns:
        Sorted list of matching files

    Raises:
        NoResultFilesError: If nothing matches
    """
    root = Path(str(directory).replace("\\", "/"))
    results = sorted(p for p in root.glob(f"**/{pattern}") if p.is_file())

    if not results:
        raise NoResultFilesError(f"{root.as_posix().rstrip('/')}/**/{pattern}")

    logger.info("Found %d result files under %s", len(results), root)
    return results
