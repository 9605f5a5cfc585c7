# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak - Simple local backups with a bit of compression.

Backs up a file or directory next to itself, either as a plain copy
(foo.bak, ichi.bak.d) or as a zstd compressed tar archive (foo.tar.zstd),
and restores it again. Package name: localbak.
"""

__version__ = "0.1.0"

# Backup and restore entry points
from localbak.backup import create_backup, restore_backup

# Configuration
from localbak.config import BakConfig
from localbak.env import create_config_from_env

# Naming rules
from localbak.naming import (
    ArtifactKind,
    classify_artifact,
    from_artifact_name,
    strip_archive_suffix,
    to_backup_path,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "create_backup",
    "restore_backup",
    # Configuration
    "BakConfig",
    "create_config_from_env",
    # Naming
    "ArtifactKind",
    "classify_artifact",
    "from_artifact_name",
    "strip_archive_suffix",
    "to_backup_path",
]
