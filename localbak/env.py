# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Environment-based configuration helpers.

Optional environment variables:
    - LOCALBAK_ASSUME_YES: Skip delete confirmations (default: false)
    - LOCALBAK_VERBOSE: Report every action (default: false)

Booleans accept 1/0, true/false, yes/no and on/off in any case.
"""

from __future__ import annotations

import os
from typing import Mapping

from localbak.config import BakConfig
from localbak.errors import explain_invalid_bool_env
from localbak.exceptions import ConfigurationError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, value: str | None, default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(explain_invalid_bool_env(name, value))


def create_config_from_env(environ: Mapping[str, str] | None = None) -> BakConfig:
    """
    Create a BakConfig from environment variables.

    Args:
        environ: Mapping to read instead of os.environ
    """

    env = os.environ if environ is None else environ

    return BakConfig(
        assume_yes=_parse_bool("LOCALBAK_ASSUME_YES", env.get("LOCALBAK_ASSUME_YES")),
        verbose=_parse_bool("LOCALBAK_VERBOSE", env.get("LOCALBAK_VERBOSE")),
    )
