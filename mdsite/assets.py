from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .errors import OutputError
from .scanner import walk_files

logger = logging.getLogger(__name__)


def copy_assets(assets_dir: Path, dest_dir: Path) -> int:
    """Copy every file under ``assets_dir`` into ``dest_dir``, keeping the tree shape."""
    count = 0
    for path in walk_files(assets_dir):
        dest = dest_dir / path.relative_to(assets_dir)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputError(f"Failed to create asset directory {dest.parent}") from exc
        try:
            shutil.copyfile(path, dest)
        except OSError as exc:
            raise OutputError(f"Failed to copy asset {path}") from exc
        count += 1
    logger.debug("Copied %d assets to %s", count, dest_dir)
    return count


def copy_cname(cname_file: Path, output_dir: Path) -> bool:
    if not cname_file.exists():
        return False
    try:
        shutil.copyfile(cname_file, output_dir / cname_file.name)
    except OSError as exc:
        raise OutputError(f"Failed to copy {cname_file.name} file") from exc
    return True
