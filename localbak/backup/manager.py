# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Backup Manager - Create backups of files and directories.

A backup is written next to its source:

    plain      foo -> foo.bak, ichi/ -> ichi.bak.d
    compressed foo -> foo.tar.zstd, ichi/ -> ichi.tar.zstd

The source can optionally be deleted afterwards, but only once the backup
has succeeded and the deletion has been confirmed.
"""

import shutil
from pathlib import Path

import structlog

from localbak.archive.writer import DirectoryTree, SingleFile, write_archive
from localbak.config import DEFAULT_CONFIG, BakConfig
from localbak.copier import copy_file, copy_tree
from localbak.errors import explain_unsupported_source
from localbak.exceptions import IOFailureError, NotFoundError, WrongTypeError
from localbak.naming import to_backup_path
from localbak.prompt import ConfirmFunc, ask_yes_no

logger = structlog.get_logger()


def backup_file(path: Path, compress: bool) -> Path:
    """
    Back up a single regular file.

    Returns:
        Path of the created foo.bak or foo.tar.zstd
    """
    artifact = to_backup_path(path, compress, is_dir=False)
    if compress:
        write_archive(artifact, SingleFile(path))
    else:
        copy_file(path, artifact)
    return artifact


def backup_dir(path: Path, compress: bool) -> Path:
    """
    Back up a directory tree.

    Returns:
        Path of the created ichi.bak.d or ichi.tar.zstd
    """
    artifact = to_backup_path(path, compress, is_dir=True)
    if compress:
        write_archive(artifact, DirectoryTree(path))
    else:
        copy_tree(path, artifact)
    return artifact


def remove_path(path: Path) -> None:
    """
    Remove a file, symlink or directory tree.

    Anything else is left alone with a warning.
    """
    path = Path(path)
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.is_file() or path.is_symlink():
            path.unlink()
        else:
            logger.warning("remove_skipped", path=str(path), reason="unknown file type")
            return
    except OSError as e:
        raise IOFailureError(
            f"Failed to delete {path}: {e}",
            details={"path": str(path)},
        ) from e

    logger.info("path_deleted", path=str(path))


def delete_if_confirmed(path: Path, config: BakConfig, confirm: ConfirmFunc) -> bool:
    """
    Delete path when assume_yes is set or the user agrees.

    Returns:
        True if the path was deleted
    """
    if not (config.assume_yes or confirm(f"delete {path}?")):
        logger.info("delete_declined", path=str(path))
        return False

    remove_path(path)
    return True


def create_backup(
    path: Path,
    compress: bool = False,
    delete: bool = False,
    config: BakConfig = DEFAULT_CONFIG,
    confirm: ConfirmFunc = ask_yes_no,
) -> Path:
    """
    Back up a file or directory next to itself.

    This is the main entry point for backups. The source is validated
    before anything is written.

    Args:
        path: File or directory to back up
        compress: Write a zstd compressed tar archive instead of a plain copy
        delete: Delete the source after a successful backup
        config: Run configuration (assume_yes skips the confirmation)
        confirm: Asks the user before deleting

    Returns:
        Path of the created backup

    Raises:
        NotFoundError: If path does not exist
        WrongTypeError: If path is neither a regular file nor a directory
    """
    path = Path(path)

    if not path.exists() and not path.is_symlink():
        raise NotFoundError(
            f"{path} does not exist",
            details={"path": str(path)},
        )

    if path.is_symlink():
        raise WrongTypeError(explain_unsupported_source(path), details={"path": str(path)})

    if path.is_dir():
        artifact = backup_dir(path, compress)
    elif path.is_file():
        artifact = backup_file(path, compress)
    else:
        raise WrongTypeError(explain_unsupported_source(path), details={"path": str(path)})

    logger.info(
        "backup_created",
        source=str(path),
        artifact=str(artifact),
        compressed=compress,
    )

    if delete:
        delete_if_confirmed(path, config, confirm)

    return artifact
