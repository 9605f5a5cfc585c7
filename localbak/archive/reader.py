# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Archive Reader - Unpack a zstd compressed tar archive onto disk.

Each stage fails with its own error so the user can tell what went wrong:

    open        -> IOFailureError       (missing or unreadable archive file)
    decompress  -> ArchiveCorruptError  (not a zstd stream)
    extract     -> ArchiveCorruptError  (broken tar or zstd data)
                   IOFailureError       (writing an entry failed)
"""

import tarfile
from pathlib import Path, PurePosixPath
from typing import List

import structlog
import zstandard as zstd

from localbak.archive.compressor import open_decompressor
from localbak.exceptions import ArchiveCorruptError, IOFailureError, LocalBakError

logger = structlog.get_logger()


def _is_unsafe_member(name: str) -> bool:
    member_path = PurePosixPath(name)
    return member_path.is_absolute() or ".." in member_path.parts


def unpack_archive(archive_path: Path, output_dir: Path) -> List[str]:
    """
    Extract every file and directory in an archive into output_dir.

    Members are read and written one at a time straight from the
    decompressed stream. Members that are neither files nor directories are
    skipped with a warning.

    Args:
        archive_path: Path to a .tar.zstd / .tar.zst archive
        output_dir: Existing directory to extract into

    Returns:
        Names of the extracted members, in archive order
    """
    archive_path = Path(archive_path)
    output_dir = Path(output_dir)

    try:
        fh = open(archive_path, "rb")
    except OSError as e:
        raise IOFailureError(
            f"Could not open archive {archive_path}: {e}",
            details={"archive_path": str(archive_path), "stage": "open"},
        ) from e

    extracted: List[str] = []

    with fh:
        decompressor = open_decompressor(fh, name=str(archive_path))

        try:
            with decompressor, tarfile.open(fileobj=decompressor, mode="r|") as tar:
                for member in tar:
                    if _is_unsafe_member(member.name):
                        raise ArchiveCorruptError(
                            f"Unsafe path in archive: {member.name}",
                            details={
                                "archive_path": str(archive_path),
                                "stage": "extract",
                            },
                        )

                    if not (member.isfile() or member.isdir()):
                        logger.warning(
                            "entry_skipped",
                            path=member.name,
                            reason="neither a file nor a directory",
                        )
                        continue

                    tar.extract(member, output_dir, filter="data")
                    extracted.append(member.name)
                    logger.debug("member_extracted", name=member.name)

        except LocalBakError:
            raise
        except (tarfile.TarError, zstd.ZstdError) as e:
            raise ArchiveCorruptError(
                f"Could not read archive {archive_path}: {e}",
                details={"archive_path": str(archive_path), "stage": "extract"},
            ) from e
        except OSError as e:
            raise IOFailureError(
                f"Failed to extract {archive_path} into {output_dir}: {e}",
                details={
                    "archive_path": str(archive_path),
                    "output_dir": str(output_dir),
                    "stage": "extract",
                },
            ) from e

    logger.debug(
        "archive_unpacked",
        archive_path=str(archive_path),
        output_dir=str(output_dir),
        members=len(extracted),
    )

    return extracted
