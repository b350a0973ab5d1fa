from __future__ import annotations

import logging
import os
from typing import Iterator, List

logger = logging.getLogger(__name__)

JSON_EXT = ".json"


def _is_json(name: str) -> bool:
    # Case-sensitive: "Asset.JSON" is not picked up.
    _, ext = os.path.splitext(name)
    return ext == JSON_EXT


def _log_unlistable(err: OSError) -> None:
    logger.debug(f"Skipping unreadable directory {err.filename}: {err.strerror}")


def iter_json_files(root_dir: str) -> Iterator[str]:
    """
    Yield .json file paths under root_dir, depth first, in sorted order.

    Symlinked directories are followed; a directory already visited through
    another path is not walked again, which also stops symlink loops.
    """
    visited = set()
    for dirpath, dirnames, filenames in os.walk(
        root_dir, onerror=_log_unlistable, followlinks=True
    ):
        real = os.path.realpath(dirpath)
        if real in visited:
            logger.debug(f"Skipping already visited directory {dirpath}")
            dirnames[:] = []
            continue
        visited.add(real)

        dirnames.sort()
        for name in sorted(filenames):
            if _is_json(name):
                yield os.path.join(dirpath, name)


def find_json_files(root_dir: str) -> List[str]:
    """
    Recursively collect every .json file under root_dir.

    Best effort: a missing root or a subdirectory that cannot be listed is
    skipped rather than raised, so the result may simply be empty.
    """
    if not os.path.isdir(root_dir):
        logger.debug(f"Not a directory, nothing to discover: {root_dir}")
        return []

    files = list(iter_json_files(root_dir))
    logger.debug(f"Discovered {len(files)} JSON files under {root_dir}")
    return files
