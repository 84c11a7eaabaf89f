from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


def _skip(error: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", error.filename, error.strerror)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every file below ``root`` in sorted order, skipping unreadable directories."""
    for dirpath, dirnames, filenames in os.walk(root, onerror=_skip):
        dirnames.sort()
        base = Path(dirpath)
        for name in sorted(filenames):
            path = base / name
            if path.is_file():
                yield path


def scan_content(root: Path, extension: str = ".md") -> Iterator[Path]:
    for path in walk_files(root):
        if path.suffix == extension:
            yield path
