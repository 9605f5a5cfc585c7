# SPDX-License-Identifier: LGPL-2.1-only
# Copyright (c) 2026 Akshat Kotpalliwar (alias IntegerAlex)

"""
Naming Tests for localbak.

Source path <-> artifact path mapping and suffix classification.
"""

from pathlib import Path

import pytest

from localbak.exceptions import MalformedArtifactNameError, UnknownArtifactError
from localbak.naming import (
    ArtifactKind,
    classify_artifact,
    from_artifact_name,
    strip_archive_suffix,
    suffix_for,
    to_backup_path,
)


# ============================================================================
# to_backup_path
# ============================================================================

def test_plain_file_gets_bak_suffix():
    assert to_backup_path(Path("/data/foo"), compress=False, is_dir=False) == Path(
        "/data/foo.bak"
    )


def test_plain_dir_gets_bak_d_suffix():
    assert to_backup_path(Path("/data/ichi"), compress=False, is_dir=True) == Path(
        "/data/ichi.bak.d"
    )


def test_compressed_uses_archive_suffix_for_files_and_dirs():
    assert to_backup_path(Path("foo.txt"), compress=True, is_dir=False) == Path(
        "foo.txt.tar.zstd"
    )
    assert to_backup_path(Path("ichi"), compress=True, is_dir=True) == Path(
        "ichi.tar.zstd"
    )


def test_suffix_goes_on_last_segment_even_with_trailing_separator():
    assert to_backup_path(Path("some/dir/"), compress=False, is_dir=True) == Path(
        "some/dir.bak.d"
    )


def test_kind_is_looked_up_on_disk_when_not_given(temp_dir: Path):
    (temp_dir / "ichi").mkdir()
    (temp_dir / "foo").write_bytes(b"x")

    assert to_backup_path(temp_dir / "ichi", compress=False) == temp_dir / "ichi.bak.d"
    assert to_backup_path(temp_dir / "foo", compress=False) == temp_dir / "foo.bak"


@pytest.mark.parametrize("path", ["/", ".", ".."])
def test_path_without_final_segment_is_rejected(path: str):
    with pytest.raises(MalformedArtifactNameError):
        to_backup_path(Path(path), compress=True)


def test_already_suffixed_names_are_suffixed_again():
    """Re-backing up a backup is allowed and simply stacks suffixes."""
    assert to_backup_path(Path("x.bak.d"), compress=False, is_dir=True) == Path(
        "x.bak.d.bak.d"
    )
    assert to_backup_path(Path("x.tar.zstd"), compress=True) == Path(
        "x.tar.zstd.tar.zstd"
    )


# ============================================================================
# from_artifact_name / strip_archive_suffix
# ============================================================================

def test_from_artifact_name_strips_one_suffix():
    assert from_artifact_name(Path("a/foo.bak"), ".bak") == Path("a/foo")
    assert from_artifact_name(Path("a/ichi.bak.d"), ".bak.d") == Path("a/ichi")


def test_from_artifact_name_accepts_suffix_without_dot():
    assert from_artifact_name(Path("foo.bak"), "bak") == Path("foo")


def test_from_artifact_name_strips_only_one_occurrence():
    assert from_artifact_name(Path("foo.bak.bak"), ".bak") == Path("foo.bak")


def test_from_artifact_name_requires_the_suffix():
    with pytest.raises(MalformedArtifactNameError):
        from_artifact_name(Path("foo.txt"), ".bak")


def test_from_artifact_name_rejects_bare_suffix():
    with pytest.raises(MalformedArtifactNameError):
        from_artifact_name(Path(".bak"), ".bak")


def test_strip_archive_suffix_handles_both_endings():
    assert strip_archive_suffix(Path("out/x.tar.zstd")) == Path("out/x")
    assert strip_archive_suffix(Path("out/x.tar.zst")) == Path("out/x")


def test_strip_archive_suffix_removes_only_one_layer():
    assert strip_archive_suffix(Path("x.tar.zst.tar.zstd")) == Path("x.tar.zst")
    assert strip_archive_suffix(Path("x.tar.zstd.tar.zst")) == Path("x.tar.zstd")


def test_strip_archive_suffix_leaves_other_names_alone():
    assert strip_archive_suffix(Path("x.tar.gz")) == Path("x.tar.gz")


@pytest.mark.parametrize(
    "compress, is_dir",
    [(False, False), (False, True), (True, False), (True, True)],
)
def test_naming_round_trip_recovers_source(compress: bool, is_dir: bool):
    source = Path("/backups/projects/report")
    artifact = to_backup_path(source, compress=compress, is_dir=is_dir)
    kind = classify_artifact(artifact)

    if kind is ArtifactKind.ARCHIVE:
        assert strip_archive_suffix(artifact) == source
    else:
        assert from_artifact_name(artifact, suffix_for(kind)) == source


# ============================================================================
# classify_artifact
# ============================================================================

@pytest.mark.parametrize(
    "name, kind",
    [
        ("foo.bak", ArtifactKind.PLAIN_FILE),
        ("ichi.bak.d", ArtifactKind.PLAIN_DIR),
        ("foo.tar.zstd", ArtifactKind.ARCHIVE),
        ("foo.tar.zst", ArtifactKind.ARCHIVE),
        ("foo.bak.d.bak", ArtifactKind.PLAIN_FILE),
        ("foo.bak.tar.zstd", ArtifactKind.ARCHIVE),
    ],
)
def test_classification_by_suffix(name: str, kind: ArtifactKind):
    assert classify_artifact(Path("/some/where") / name) is kind


@pytest.mark.parametrize("name", ["foo", "foo.txt", "foo.tar.gz", "foo.bakx", "foo.zst"])
def test_unrecognized_suffix_is_rejected(name: str):
    with pytest.raises(UnknownArtifactError):
        classify_artifact(Path(name))
