"""Tests for FakeHdfs (Layer 1: Fake Infrastructure Tests).

These tests verify the fake implementation itself works correctly, so that
CLI tests built on it can be trusted.
"""

import pytest

from hdfs_client.core.errors import FormatError, HdfsCommandError, PreconditionError
from hdfs_client.integrations.hdfs.fake import FakeHdfs


async def test_exists_normalizes_paths() -> None:
    fake = FakeHdfs(files={"data/file": 10})

    assert await fake.exists("/data/file") is True
    assert await fake.exists("data/file") is True
    assert await fake.exists("/data/other") is False
    assert fake.calls[0] == ("exists", ("/data/file",))


def test_du_returns_configured_size() -> None:
    fake = FakeHdfs(files={"/data/file": 1234})

    assert fake.du("data/file") == 1234


def test_du_malformed_output() -> None:
    fake = FakeHdfs(files={"/data/file": 1}, malformed_du_paths={"/data/file"})

    with pytest.raises(FormatError):
        fake.du("/data/file")


def test_du_missing_path_fails() -> None:
    with pytest.raises(HdfsCommandError, match="No such file or directory"):
        FakeHdfs().du("/nope")


def test_rm_removes_file() -> None:
    fake = FakeHdfs(files={"/data/file": 10})

    fake.rm("/data/file")

    assert fake.files == {}


def test_copy_from_local_missing_source_is_not_recorded() -> None:
    fake = FakeHdfs()

    with pytest.raises(PreconditionError, match="Failed to find /tmp/missing"):
        fake.copy_from_local("/tmp/missing", "/data/file")

    assert fake.calls == []


def test_copy_round_trip_between_tables() -> None:
    fake = FakeHdfs(local_files={"/tmp/in": 7})

    fake.copy_from_local("/tmp/in", "data/file")
    fake.copy_to_local("/data/file", "/tmp/out")

    assert fake.files == {"/data/file": 7}
    assert fake.local_files == {"/tmp/in": 7, "/tmp/out": 7}


def test_failing_commands_raise_after_recording() -> None:
    fake = FakeHdfs(files={"/data/file": 10}, failing_commands={"rm"})

    with pytest.raises(HdfsCommandError, match="Simulated rm failure"):
        fake.rm("/data/file")

    assert fake.calls == [("rm", ("/data/file",))]
    assert fake.files == {"/data/file": 10}
