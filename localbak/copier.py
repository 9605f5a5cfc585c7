# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Copier - Plain file and directory tree copies.

Directory trees are mirrored entry by entry: subdirectories are recreated
(empty ones included), regular files are copied byte for byte, and anything
else (symlinks, sockets, devices) is skipped with a warning.
"""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

import structlog

from localbak.exceptions import IOFailureError, PartialFailureError

logger = structlog.get_logger()


@dataclass
class CopyStats:
    """Counters for a tree copy."""

    files_copied: int = 0
    dirs_created: int = 0
    skipped: int = 0


def _copy_bytes(src: Path, dst: Path) -> None:
    # copyfile refuses a directory at dst instead of copying into it
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def copy_file(src: Path, dst: Path) -> Path:
    """
    Copy a single regular file's bytes to dst.

    Args:
        src: File to copy
        dst: Destination file path (overwritten if present)

    Returns:
        The destination path
    """
    try:
        _copy_bytes(Path(src), Path(dst))
    except OSError as e:
        raise IOFailureError(
            f"Failed to copy {src} to {dst}: {e}",
            details={"src": str(src), "dst": str(dst)},
        ) from e

    logger.debug("file_copied", src=str(src), dst=str(dst))
    return Path(dst)


def copy_tree(src: Path, dst: Path) -> CopyStats:
    """
    Recursively mirror the contents of src into dst.

    dst and its parents are created if absent. The first I/O error stops
    the traversal; whatever was already copied stays on disk.

    Args:
        src: Directory to copy
        dst: Destination directory

    Returns:
        CopyStats for the whole tree

    Raises:
        PartialFailureError: If creating a directory or copying a file fails
    """
    stats = CopyStats()
    _copy_tree(Path(src), Path(dst), stats)

    logger.debug(
        "tree_copied",
        src=str(src),
        dst=str(dst),
        files=stats.files_copied,
        dirs=stats.dirs_created,
        skipped=stats.skipped,
    )
    return stats


def _copy_tree(src: Path, dst: Path, stats: CopyStats) -> None:
    current = dst
    try:
        dst.mkdir(parents=True, exist_ok=True)
        stats.dirs_created += 1

        with os.scandir(src) as it:
            entries = sorted(it, key=lambda e: e.name)

        for entry in entries:
            current = Path(entry.path)
            target = dst / entry.name

            if entry.is_dir(follow_symlinks=False):
                _copy_tree(current, target, stats)
            elif entry.is_file(follow_symlinks=False):
                _copy_bytes(current, target)
                stats.files_copied += 1
            else:
                stats.skipped += 1
                logger.warning(
                    "entry_skipped",
                    path=entry.path,
                    reason="neither a file nor a directory",
                )

    except PartialFailureError:
        raise
    except OSError as e:
        raise PartialFailureError(
            f"Copy aborted at {current}: {e}",
            details={
                "src": str(src),
                "dst": str(dst),
                "failed_path": str(current),
                "files_copied": stats.files_copied,
            },
        ) from e
