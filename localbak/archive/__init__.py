# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Archive - zstd compressed tar archives for backups.
"""

from localbak.archive.compressor import DEFAULT_ZSTD_LEVEL
from localbak.archive.reader import unpack_archive
from localbak.archive.writer import (
    ArchiveSource,
    DirectoryTree,
    SingleFile,
    write_archive,
    write_dir_archive,
    write_file_archive,
)

__all__ = [
    "DEFAULT_ZSTD_LEVEL",
    # Writer
    "ArchiveSource",
    "SingleFile",
    "DirectoryTree",
    "write_archive",
    "write_file_archive",
    "write_dir_archive",
    # Reader
    "unpack_archive",
]
