# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Archive Writer - Serialize a file or directory tree into a
zstd compressed tar archive.

What goes into the archive is described by a small value object rather than
a callback:

    SingleFile(path)      -> one member named after the file
    DirectoryTree(root)   -> root itself plus everything below it

Member names are relative to the source's parent directory, so unpacking
recreates the file or the top-level directory under its own name.
"""

import tarfile
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import structlog

from localbak.archive.compressor import open_compressor
from localbak.exceptions import IOFailureError, LocalBakError

logger = structlog.get_logger()


@dataclass(frozen=True)
class SingleFile:
    """A single regular file to archive."""

    path: Path


@dataclass(frozen=True)
class DirectoryTree:
    """A directory to archive recursively."""

    root: Path


ArchiveSource = Union[SingleFile, DirectoryTree]


def _add_entries(tar: tarfile.TarFile, path: Path, arcname: str) -> None:
    """
    Add path and, for directories, everything below it in name order.

    Entries are classified before tar sees them, so symlinks, sockets and
    devices are all skipped with the same warning.
    """
    if path.is_dir() and not path.is_symlink():
        tar.add(path, arcname=arcname, recursive=False)
        for child in sorted(path.iterdir(), key=lambda p: p.name):
            _add_entries(tar, child, f"{arcname}/{child.name}")
    elif path.is_file() and not path.is_symlink():
        tar.add(path, arcname=arcname, recursive=False)
    else:
        logger.warning(
            "entry_skipped",
            path=str(path),
            reason="neither a file nor a directory",
        )


def write_archive(archive_path: Path, source: ArchiveSource) -> Path:
    """
    Write a zstd compressed tar archive for the given source.

    The tar trailer and the zstd frame end are both written before the
    archive file is closed. On failure the partial archive is left on disk.

    Args:
        archive_path: Archive file to create (overwritten if present)
        source: SingleFile or DirectoryTree to serialize

    Returns:
        Path to the written archive

    Raises:
        IOFailureError: If reading the source or writing the archive fails
    """
    if isinstance(source, SingleFile):
        src = Path(source.path)
    elif isinstance(source, DirectoryTree):
        src = Path(source.root)
    else:
        raise TypeError(f"Unsupported archive source: {source!r}")

    archive_path = Path(archive_path)

    try:
        with open(archive_path, "wb") as fh:
            with open_compressor(fh) as compressor:
                with tarfile.open(fileobj=compressor, mode="w|") as tar:
                    if isinstance(source, DirectoryTree):
                        _add_entries(tar, src, src.name)
                    else:
                        tar.add(src, arcname=src.name, recursive=False)

    except LocalBakError:
        raise
    except (OSError, tarfile.TarError) as e:
        raise IOFailureError(
            f"Failed to write archive {archive_path}: {e}",
            details={"archive_path": str(archive_path), "source": str(src)},
        ) from e

    logger.debug(
        "archive_written",
        archive_path=str(archive_path),
        source=str(src),
        size=archive_path.stat().st_size,
    )

    return archive_path


def write_file_archive(archive_path: Path, file_path: Path) -> Path:
    """Archive a single regular file."""
    return write_archive(archive_path, SingleFile(Path(file_path)))


def write_dir_archive(archive_path: Path, dir_path: Path) -> Path:
    """Archive a directory tree, keeping the directory's own name."""
    return write_archive(archive_path, DirectoryTree(Path(dir_path)))
