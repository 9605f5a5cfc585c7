# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Backup Engine - Backup and restore entry points.
"""

from localbak.backup.manager import (
    backup_dir,
    backup_file,
    create_backup,
    delete_if_confirmed,
    remove_path,
)

from localbak.backup.restore import (
    restore_artifact,
    restore_backup,
)

__all__ = [
    # Manager
    "create_backup",
    "backup_file",
    "backup_dir",
    "remove_path",
    "delete_if_confirmed",
    # Restore
    "restore_backup",
    "restore_artifact",
]
