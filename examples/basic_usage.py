# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Example script using localbak as a library.

Backs up a directory twice (plain copy and compressed archive), then
restores the archive into a scratch directory and compares the results.

Run with:
    python examples/basic_usage.py path/to/some/dir

Environment variables:
    LOCALBAK_ASSUME_YES: Skip delete confirmations
    LOCALBAK_VERBOSE: Log every action
"""

import sys
import tempfile
from pathlib import Path

from localbak import create_backup, create_config_from_env, restore_backup
from localbak.logs import configure_logging


def main(source: Path) -> int:
    config = create_config_from_env()
    configure_logging(config.verbose)

    plain = create_backup(source, compress=False, config=config)
    archive = create_backup(source, compress=True, config=config)
    print(f"plain copy: {plain}")
    print(f"archive:    {archive} ({archive.stat().st_size} bytes)")

    with tempfile.TemporaryDirectory() as scratch:
        restored = restore_backup(archive, Path(scratch), config=config)
        original = sorted(p.relative_to(source) for p in source.rglob("*"))
        copy = sorted(p.relative_to(restored) for p in restored.rglob("*"))
        print(f"restored {len(copy)} entries, identical layout: {original == copy}")

    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: basic_usage.py DIRECTORY", file=sys.stderr)
        sys.exit(1)
    sys.exit(main(Path(sys.argv[1])))
