# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Test fixtures for localbak tests.

Provides temporary directories, sample trees and a scripted confirmation.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Generator, List

import pytest
import structlog

# Keep the environment from leaking into config tests
os.environ.pop("LOCALBAK_ASSUME_YES", None)
os.environ.pop("LOCALBAK_VERBOSE", None)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_file(temp_dir: Path) -> Path:
    """A file named foo holding 43 bytes of 'A'."""
    path = temp_dir / "foo"
    path.write_bytes(b"A" * 43)
    return path


@pytest.fixture
def sample_tree(temp_dir: Path) -> Dict[Path, bytes]:
    """
    Create ichi/{foo,bar,qux} and ichi/ni/{foo,bar,qux} with random
    16 byte contents.

    Returns:
        Mapping of file path to its content
    """
    contents: Dict[Path, bytes] = {}
    for sub in (temp_dir / "ichi", temp_dir / "ichi" / "ni"):
        sub.mkdir(parents=True)
        for name in ("foo", "bar", "qux"):
            data = os.urandom(16)
            (sub / name).write_bytes(data)
            contents[sub / name] = data
    return contents


class ScriptedConfirm:
    """Confirmation stand-in that records prompts and returns a fixed answer."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.answer


@pytest.fixture
def confirm_yes() -> ScriptedConfirm:
    return ScriptedConfirm(True)


@pytest.fixture
def confirm_no() -> ScriptedConfirm:
    return ScriptedConfirm(False)
