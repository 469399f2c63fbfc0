"""Filesystem probe and template tree copy helpers."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

VCS_DIR = ".git"
MANIFEST_NAME = "package.json"

# Template files stored under a different name than the one they are written as.
RENAME_FILES = {"_gitignore": ".gitignore"}


def exists(path: Path | str) -> bool:
    return Path(path).exists()


def is_effectively_empty(path: Path | str) -> bool:
    """Return ``True`` when *path* has no entries besides the ``.git`` directory."""
    entries = [entry.name for entry in Path(path).iterdir()]
    return not entries or entries == [VCS_DIR]


def clear(directory: Path | str) -> None:
    """Remove everything inside *directory* except ``.git``.

    Missing directories are left alone and entries that disappear while the
    directory is being emptied are ignored.
    """
    root = Path(directory)
    if not root.exists():
        return
    for entry in root.iterdir():
        if entry.name == VCS_DIR:
            continue
        logger.debug("Removing %s", entry)
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except FileNotFoundError:
            continue


def copy_template(src: Path, dest: Path) -> list[Path]:
    """Copy the template tree at *src* into *dest*.

    The top-level ``package.json`` is skipped since the manifest is written
    separately. Returns the destination paths of the copied files.
    """
    written: list[Path] = []
    dest.mkdir(parents=True, exist_ok=True)
    for entry in sorted(src.iterdir()):
        if entry.name == MANIFEST_NAME:
            continue
        written.extend(_copy_entry(entry, dest / RENAME_FILES.get(entry.name, entry.name)))
    return written


def _copy_entry(src: Path, dest: Path) -> list[Path]:
    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for child in sorted(src.iterdir()):
            written.extend(_copy_entry(child, dest / RENAME_FILES.get(child.name, child.name)))
        return written
    shutil.copyfile(src, dest)
    return [dest]
