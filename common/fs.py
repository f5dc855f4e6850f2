from __future__ import annotations

import os
import shutil
import logging
from pathlib import Path
from typing import List


def list_immediate_subdirs(parent_dir: Path) -> List[Path]:
    """Immediate subdirectories of ``parent_dir``, sorted by name.

    Symlinked directories are skipped. OSError from the listing propagates.
    """
    parent_dir = Path(parent_dir)
    subdirs: List[Path] = []
    for name in sorted(os.listdir(parent_dir)):
        path = parent_dir / name
        if path.is_symlink():
            logging.debug("Skipping symlinked folder: %s", path)
            continue
        if path.is_dir():
            subdirs.append(path)
    return subdirs


def list_immediate_files(dir_path: Path) -> List[Path]:
    """Regular files directly inside ``dir_path``, sorted by name.

    Symlinks are skipped so writes never leave ``dir_path``.
    """
    dir_path = Path(dir_path)
    files: List[Path] = []
    for name in sorted(os.listdir(dir_path)):
        path = dir_path / name
        if path.is_symlink():
            logging.debug("Skipping symlinked file: %s", path)
            continue
        if path.is_file():
            files.append(path)
    return files


def overwrite_file(src_path: Path, dst_path: Path, preserve_metadata: bool = False) -> None:
    """Copy ``src_path`` over an existing ``dst_path`` in place.

    ``dst_path`` must not be a symlink; its target could live anywhere.
    """
    if Path(dst_path).is_symlink():
        raise OSError(f"Refusing to write through symlink: {dst_path}")
    if preserve_metadata:
        shutil.copy2(src_path, dst_path)
    else:
        shutil.copyfile(src_path, dst_path)
    logging.debug("Overwrote: %s -> %s", src_path, dst_path)
