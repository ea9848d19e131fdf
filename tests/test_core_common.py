# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path
from unittest.mock import patch

import pytest

from batchelor_lib.core.common import (
    construct_job_name,
    construct_script_path,
    get_batch_scripts,
    remove_batch_scripts,
    remove_file,
)
from batchelor_lib.core.error import BatchelorIOError


@pytest.mark.parametrize(
    "prefix,index,expected",
    [
        ("batch", 1, "batch-0001"),
        ("batch", 42, "batch-0042"),
        ("job", 9999, "job-9999"),
        ("job", 12345, "job-12345"),
    ],
)
def test_construct_job_name(prefix, index, expected):
    assert construct_job_name(prefix, index) == expected


def test_construct_script_path():
    assert construct_script_path(Path("out"), "batch-0003") == Path(
        "out/batch-0003.batch.sh"
    )


def test_get_batch_scripts_matches_prefix_and_suffix_only(tmp_path):
    matching = [tmp_path / "run-0001.batch.sh", tmp_path / "run-0002.batch.sh"]
    for file in matching:
        file.write_text("")

    (tmp_path / "other-0001.batch.sh").write_text("")
    (tmp_path / "run-0001.sh").write_text("")
    (tmp_path / "run0001.batch.sh").write_text("")
    (tmp_path / "run-0001.batch.sh.bak").write_text("")
    (tmp_path / "run-dir.batch.sh").mkdir()

    assert get_batch_scripts(tmp_path, "run") == matching


def test_get_batch_scripts_ignores_subdirectories(tmp_path):
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "run-0001.batch.sh").write_text("")

    assert get_batch_scripts(tmp_path, "run") == []


def test_get_batch_scripts_missing_directory_raises(tmp_path):
    with pytest.raises(BatchelorIOError, match="Could not read directory"):
        get_batch_scripts(tmp_path / "missing", "run")


def test_remove_batch_scripts_leaves_unrelated_files(tmp_path):
    (tmp_path / "run-0001.batch.sh").write_text("")
    (tmp_path / "run-0007.batch.sh").write_text("")
    unrelated = [
        tmp_path / "other-0001.batch.sh",
        tmp_path / "run-0001.txt",
        tmp_path / "data.csv",
    ]
    for file in unrelated:
        file.write_text("keep me")

    assert remove_batch_scripts(tmp_path, "run") == 2

    assert sorted(tmp_path.iterdir()) == sorted(unrelated)


def test_remove_file_wraps_os_error(tmp_path):
    file = tmp_path / "file"

    with (
        patch.object(Path, "unlink", side_effect=PermissionError("denied")),
        pytest.raises(BatchelorIOError, match="Could not remove file"),
    ):
        remove_file(file)
