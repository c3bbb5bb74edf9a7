"""Tests for parsing `hadoop fs -du` output."""

import pytest

from hdfs_client.core.errors import FormatError
from hdfs_client.integrations.hdfs.real import parse_du_output


def test_skips_log_chatter_and_returns_size() -> None:
    output = "1234 /data/file\nWARN: noisy line\n"

    assert parse_du_output(output, "/data/file") == 1234


def test_data_line_after_warnings() -> None:
    output = (
        "WARN util.NativeCodeLoader: Unable to load native-hadoop library\n"
        "INFO some other chatter\n"
        "987654321   /data/file\n"
    )

    assert parse_du_output(output, "/data/file") == 987654321


def test_fields_separated_by_tabs_and_runs_of_spaces() -> None:
    assert parse_du_output("  42 \t  /data/file  \n", "/data/file") == 42


def test_zero_bytes() -> None:
    assert parse_du_output("0 /data/empty\n", "/data/empty") == 0


def test_path_must_match_exactly() -> None:
    output = "1234 /data/file2\n1234 /data\n"

    with pytest.raises(FormatError) as exc_info:
        parse_du_output(output, "/data/file")

    assert exc_info.value.output == output
    assert output in str(exc_info.value)


def test_lines_with_extra_fields_do_not_qualify() -> None:
    # Newer hadoop releases print "size disk_space path"
    with pytest.raises(FormatError, match="unexpected format"):
        parse_du_output("1234 3702 /data/file\n", "/data/file")


def test_non_numeric_size_is_format_error() -> None:
    with pytest.raises(FormatError, match="invalid size 'abc'"):
        parse_du_output("abc /data/file\n", "/data/file")


def test_negative_size_is_format_error() -> None:
    with pytest.raises(FormatError, match="invalid size '-5'"):
        parse_du_output("-5 /data/file\n", "/data/file")


def test_empty_output_is_format_error() -> None:
    with pytest.raises(FormatError, match="unexpected format: ''"):
        parse_du_output("", "/data/file")
