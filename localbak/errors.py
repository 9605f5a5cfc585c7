# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Human-friendly error message helpers for localbak.

These helpers centralize wording for common user errors so that
all modules present consistent, actionable messages.
"""

from pathlib import Path


def explain_invalid_bool_env(name: str, value: str | None) -> str:
    """
    Explain that a boolean environment variable is invalid.
    """

    return (
        f"Invalid {name} value: {value!r}. "
        "Expected one of: 1/0, true/false, yes/no, on/off."
    )


def explain_unknown_artifact(path: Path) -> str:
    """
    Explain that a path is not something restore knows how to read.
    """

    return (
        f"Don't know how to restore {path}. "
        "Backups must end in '.bak', '.bak.d', '.tar.zstd' or '.tar.zst'."
    )


def explain_suffix_type_mismatch(path: Path, expected: str) -> str:
    """
    Explain that an artifact's name promises a different kind of entry.
    """

    return (
        f"{path} is named like a backup {expected}, but it is not one on disk. "
        "Refusing to guess how to restore it."
    )


def explain_unsupported_source(path: Path) -> str:
    """
    Explain that only regular files and directories can be backed up.
    """

    return (
        f"{path} is neither a file nor a directory, don't know what to do with it. "
        "Only regular files and directories can be backed up."
    )
