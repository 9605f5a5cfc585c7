# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Exceptions - Custom exceptions for the localbak package.
"""


class LocalBakError(Exception):
    """Base exception for all localbak errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(LocalBakError):
    """Raised when configuration is invalid."""

    pass


class NotFoundError(LocalBakError):
    """Raised when a source, artifact or output directory is missing."""

    pass


class WrongTypeError(LocalBakError):
    """
    Raised when a path is neither a regular file nor a directory, or when
    an artifact's suffix does not match what is actually on disk.
    """

    pass


class UnknownArtifactError(LocalBakError):
    """Raised when a path does not carry any recognized backup suffix."""

    pass


class MalformedArtifactNameError(LocalBakError):
    """Raised when an expected suffix is absent or a name cannot be derived."""

    pass


class IOFailureError(LocalBakError):
    """Raised when creating, opening or copying fails."""

    pass


class PartialFailureError(IOFailureError):
    """Raised when a tree copy aborts partway through."""

    pass


class ArchiveCorruptError(LocalBakError):
    """Raised when an archive cannot be decompressed or its tar stream is broken."""

    pass
