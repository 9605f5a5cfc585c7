# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Compressor - zstd stream wrapping for archive files.

Archives are never held in memory: the compressor wraps an open file
handle and tar data is streamed through it in bounded chunks.
"""

from typing import BinaryIO

import structlog
import zstandard as zstd

from localbak.exceptions import ArchiveCorruptError

logger = structlog.get_logger()

# zstd's own default level; not configurable
DEFAULT_ZSTD_LEVEL = 3

# Largest possible zstd frame header
MAX_FRAME_HEADER_SIZE = 18


def open_compressor(fh: BinaryIO, level: int = DEFAULT_ZSTD_LEVEL):
    """
    Wrap a writable binary handle with a zstd compressor.

    Closing the returned writer ends the zstd frame but leaves fh open, so
    the caller's `with open(...)` still owns the file handle.
    """
    cctx = zstd.ZstdCompressor(level=level)
    return cctx.stream_writer(fh, closefd=False)


def open_decompressor(fh: BinaryIO, name: str = "<archive>"):
    """
    Wrap a readable, seekable binary handle with a zstd decompressor.

    The frame header is checked up front so that a file that is not zstd at
    all is reported before any tar parsing starts.

    Raises:
        ArchiveCorruptError: If fh does not start with a valid zstd frame
    """
    start = fh.tell()
    header = fh.read(MAX_FRAME_HEADER_SIZE)
    fh.seek(start)

    try:
        params = zstd.get_frame_parameters(header)
    except zstd.ZstdError as e:
        raise ArchiveCorruptError(
            f"Could not open zstd decoder for {name}: {e}",
            details={"path": name, "stage": "decompress"},
        ) from e

    logger.debug(
        "zstd_frame_detected",
        path=name,
        content_size=params.content_size,
        window_size=params.window_size,
    )

    dctx = zstd.ZstdDecompressor()
    return dctx.stream_reader(fh, read_across_frames=True, closefd=False)
