# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
LocalBak Configuration - Immutable run configuration.

Process-wide switches are collected here and passed explicitly into the
backup and restore entry points instead of living in module globals.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BakConfig:
    """
    Immutable configuration for a single backup or restore invocation.
    """

    # Skip the confirmation prompt before deleting anything
    assume_yes: bool = False

    # Report every action (INFO logging, print created paths)
    verbose: bool = False

    def with_updates(self, **kwargs) -> "BakConfig":
        """
        Create a new config with updated values.

        Since the config is frozen, this creates a new instance.
        """
        current = asdict(self)
        current.update(kwargs)
        return BakConfig(**current)


DEFAULT_CONFIG = BakConfig()
