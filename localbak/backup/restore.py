# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Restore Manager - Restore files and directories from backups.

The artifact's suffix alone decides how it is restored. If what is on disk
does not match the suffix, restore refuses to guess.
"""

from pathlib import Path

import structlog

from localbak.archive.reader import unpack_archive
from localbak.backup.manager import delete_if_confirmed
from localbak.config import DEFAULT_CONFIG, BakConfig
from localbak.copier import copy_file, copy_tree
from localbak.errors import explain_suffix_type_mismatch
from localbak.exceptions import NotFoundError, WrongTypeError
from localbak.naming import (
    ArtifactKind,
    classify_artifact,
    from_artifact_name,
    strip_archive_suffix,
    suffix_for,
)
from localbak.prompt import ConfirmFunc, ask_yes_no

logger = structlog.get_logger()


def _validate(path: Path, output_dir: Path) -> None:
    if not path.exists():
        raise NotFoundError(
            f"File or directory not found: {path}",
            details={"path": str(path)},
        )
    if not output_dir.exists():
        raise NotFoundError(
            f"File or directory not found: {output_dir}",
            details={"path": str(output_dir)},
        )
    if not output_dir.is_dir():
        raise NotFoundError(
            f"Output directory is not a directory: {output_dir}",
            details={"path": str(output_dir)},
        )


def restore_artifact(path: Path, output_dir: Path) -> Path:
    """
    Restore a backup artifact into output_dir.

    Args:
        path: Backup artifact (.bak, .bak.d, .tar.zstd or .tar.zst)
        output_dir: Existing directory to restore into

    Returns:
        Path of the restored file or directory
    """
    path = Path(path)
    output_dir = Path(output_dir)

    _validate(path, output_dir)
    kind = classify_artifact(path)

    if kind is ArtifactKind.ARCHIVE:
        if not path.is_file():
            raise WrongTypeError(
                explain_suffix_type_mismatch(path, "archive"),
                details={"path": str(path), "kind": kind.value},
            )
        unpack_archive(path, output_dir)
        return output_dir / strip_archive_suffix(path).name

    if kind is ArtifactKind.PLAIN_FILE:
        if not path.is_file():
            raise WrongTypeError(
                explain_suffix_type_mismatch(path, "file"),
                details={"path": str(path), "kind": kind.value},
            )
        target = output_dir / from_artifact_name(path, suffix_for(kind)).name
        copy_file(path, target)
        return target

    if kind is ArtifactKind.PLAIN_DIR:
        if not path.is_dir():
            raise WrongTypeError(
                explain_suffix_type_mismatch(path, "directory"),
                details={"path": str(path), "kind": kind.value},
            )
        target = output_dir / from_artifact_name(path, suffix_for(kind)).name
        copy_tree(path, target)
        return target

    raise AssertionError(f"Unhandled artifact kind: {kind}")


def restore_backup(
    path: Path,
    output_dir: Path | None = None,
    delete: bool = False,
    config: BakConfig = DEFAULT_CONFIG,
    confirm: ConfirmFunc = ask_yes_no,
) -> Path:
    """
    Restore a backup and optionally delete it afterwards.

    This is the main entry point for restores.

    Args:
        path: Backup artifact to restore from
        output_dir: Directory to restore into (default: current directory)
        delete: Delete the artifact after a successful restore
        config: Run configuration (assume_yes skips the confirmation)
        confirm: Asks the user before deleting

    Returns:
        Path of the restored file or directory

    Raises:
        NotFoundError: If the artifact or output directory is missing
        UnknownArtifactError: If the artifact has no recognized suffix
        WrongTypeError: If the suffix does not match what is on disk
    """
    path = Path(path)
    output_dir = Path.cwd() if output_dir is None else Path(output_dir)

    target = restore_artifact(path, output_dir)

    logger.info(
        "backup_restored",
        artifact=str(path),
        target=str(target),
    )

    if delete:
        delete_if_confirmed(path, config, confirm)

    return target
