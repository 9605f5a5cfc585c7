# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Naming - Mapping between source paths and backup artifact paths.

Every artifact shares its base name with the source it was made from; the
suffix alone decides how the artifact is restored:

    foo        -> foo.bak         (plain file copy)
    ichi/      -> ichi.bak.d      (mirrored directory tree)
    foo, ichi/ -> foo.tar.zstd    (zstd compressed tar stream)

`.tar.zst` is accepted as an archive on restore as well.
"""

from enum import Enum
from pathlib import Path
from typing import Tuple

from localbak.errors import explain_unknown_artifact
from localbak.exceptions import MalformedArtifactNameError, UnknownArtifactError

BAK_SUFFIX = ".bak"
BAK_DIR_SUFFIX = ".bak.d"
ARCHIVE_SUFFIX = ".tar.zstd"

# Order matters: only the first matching ending is stripped
ARCHIVE_ENDINGS: Tuple[str, ...] = (".tar.zstd", ".tar.zst")


class ArtifactKind(str, Enum):
    """What a backup artifact contains, derived from its name."""

    PLAIN_FILE = "plain_file"  # raw byte copy of a file
    PLAIN_DIR = "plain_dir"  # mirrored directory tree
    ARCHIVE = "archive"  # compressed tar stream of a file or directory


def _final_segment(path: Path) -> str:
    name = path.name
    if name in ("", ".", ".."):
        raise MalformedArtifactNameError(
            f"Path has no final segment to name a backup after: {path}",
            details={"path": str(path)},
        )
    return name


def to_backup_path(path: Path, compress: bool, is_dir: bool | None = None) -> Path:
    """
    Derive the artifact path for a source path.

    The suffix is appended to the last path segment, so the artifact lives
    next to its source.

    Args:
        path: Source file or directory
        compress: Whether the backup is a compressed archive
        is_dir: Whether the source is a directory (looked up on disk if None)

    Returns:
        Path of the backup artifact
    """
    name = _final_segment(Path(path))

    if compress:
        suffix = ARCHIVE_SUFFIX
    else:
        if is_dir is None:
            is_dir = Path(path).is_dir()
        suffix = BAK_DIR_SUFFIX if is_dir else BAK_SUFFIX

    return Path(path).with_name(name + suffix)


def from_artifact_name(artifact_path: Path, suffix: str) -> Path:
    """
    Strip exactly one trailing occurrence of a suffix from an artifact path.

    Args:
        artifact_path: Path of a plain backup artifact
        suffix: Suffix to strip, with or without the leading dot (e.g. ".bak")

    Returns:
        The path the artifact was made from

    Raises:
        MalformedArtifactNameError: If the path does not end with the suffix
    """
    if not suffix.startswith("."):
        suffix = "." + suffix

    raw = str(artifact_path)
    if not raw.endswith(suffix):
        raise MalformedArtifactNameError(
            f"Path does not end with {suffix!r}: {artifact_path}",
            details={"path": raw, "suffix": suffix},
        )

    base = Path(raw[: -len(suffix)])
    # a bare ".bak" leaves nothing to restore to
    _final_segment(base)
    return base


def strip_archive_suffix(path: Path) -> Path:
    """
    Strip the archive ending from a path.

    Only the first matching ending in ARCHIVE_ENDINGS is removed, so a name
    that ends with both endings chained keeps one of them.
    """
    raw = str(path)
    for ending in ARCHIVE_ENDINGS:
        if raw.endswith(ending):
            return Path(raw[: -len(ending)])
    return Path(raw)


def classify_artifact(path: Path) -> ArtifactKind:
    """
    Determine the artifact kind from the path's name alone.

    Raises:
        UnknownArtifactError: If no recognized suffix is present
    """
    name = Path(path).name

    if any(name.endswith(ending) for ending in ARCHIVE_ENDINGS):
        return ArtifactKind.ARCHIVE
    if name.endswith(BAK_DIR_SUFFIX):
        return ArtifactKind.PLAIN_DIR
    if name.endswith(BAK_SUFFIX):
        return ArtifactKind.PLAIN_FILE

    raise UnknownArtifactError(
        explain_unknown_artifact(path),
        details={"path": str(path)},
    )


def suffix_for(kind: ArtifactKind) -> str:
    """Return the suffix written for plain artifacts of the given kind."""
    if kind is ArtifactKind.PLAIN_FILE:
        return BAK_SUFFIX
    if kind is ArtifactKind.PLAIN_DIR:
        return BAK_DIR_SUFFIX
    return ARCHIVE_SUFFIX
