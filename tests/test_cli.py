import json

import pytest
from click.testing import CliRunner

from prism.cli import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, list(map(str, args)), obj={})


def test_version(runner):
    result = invoke(runner, "--version")
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_profile_json(runner, sample_file, sample_bytes):
    result = invoke(runner, "--output", "json", "profile", sample_file)

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["size"] == len(sample_bytes)
    assert data["label"] == str(sample_file)
    assert set(data["digests"]) == {"md5", "sha1", "sha256"}
    assert data["fuzzy_hash"]
    assert data["fuzzy_error"] is None


def test_profile_console(runner, sample_file):
    result = invoke(runner, "--quiet", "profile", sample_file)
    assert result.exit_code == 0
    assert result.output == ""

    result = invoke(runner, "profile", sample_file)
    assert result.exit_code == 0
    assert "Entropy" in result.output
    assert "SHA256" in result.output


def test_profile_respects_config_size_limit(runner, tmp_path, sample_file):
    config = tmp_path / "prism.toml"
    config.write_text("[profile]\nmax_buffer_size = 16\n", encoding="utf-8")

    result = invoke(runner, "--config", config, "-o", "json", "profile", sample_file)

    assert result.exit_code == 1
    assert "sha256" not in result.output


def test_digest_json(runner, tmp_path):
    path = tmp_path / "abc.txt"
    path.write_bytes(b"abc")

    result = invoke(runner, "-o", "json", "digest", path, "--algorithm", "SHA1")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "file": str(path),
        "sha1": "a9993e364706816aba3e25717850c26c9cd0d89d",
    }


def test_compare_identical_files(runner, sample_file, tmp_path, sample_bytes):
    copy = tmp_path / "copy.bin"
    copy.write_bytes(sample_bytes)

    result = invoke(runner, "-o", "json", "compare", sample_file, copy)

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["score"] == 100
    assert data["left"] == data["right"]


def test_compare_empty_file_is_unavailable(runner, sample_file, tmp_path):
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")

    result = invoke(runner, "compare", empty, sample_file)

    assert result.exit_code == 1
    assert "unavailable" in result.output


def test_names_valid(runner):
    result = invoke(runner, "-o", "json", "names", "--kind", "dos", "KERNEL32.DLL", "ntdll.dll")

    assert result.exit_code == 0, result.output
    assert [item["valid"] for item in json.loads(result.output)] == [True, True]


def test_names_rejected_exit_status(runner):
    result = invoke(runner, "--quiet", "names", "CreateFileA", "foo bar")
    assert result.exit_code == 2


def test_names_console_table(runner):
    result = invoke(runner, "names", "--kind", "dos", "[weird].dll", "bad name")
    assert result.exit_code == 2
    assert "[weird].dll" in result.output
    assert "invalid" in result.output


def test_names_all_accepted_reports_success(runner):
    result = invoke(runner, "names", "--kind", "dos", "KERNEL32.DLL", "msvcrt.dll")
    assert result.exit_code == 0
    assert "All 2 names accepted" in result.output


def test_names_rejection_count_is_reported(runner):
    result = invoke(runner, "names", "CreateFileA", "foo bar")
    assert result.exit_code == 2
    assert "1 of 2 names rejected" in result.output


@pytest.mark.parametrize(
    "body, message",
    [
        ('[profile]\ndigest_algorithms = "sha256"\n', "digest_algorithms must be list"),
        ('[profile]\ndigest_algorithms = ["crc32"]\n', "crc32"),
        ("[profile]\nmax_buffer_size = \"big\"\n", "max_buffer_size must be int"),
        ('[profile]\noutput_format = "xml"\n', "output_format"),
        ("[profile\nfuzzy_hash = true\n", "invalid configuration"),
        ("profile = 5\n", "[profile] must be a table"),
    ],
)
def test_invalid_config_is_reported_with_exit_status_1(runner, tmp_path, sample_file, body, message):
    config = tmp_path / "prism.toml"
    config.write_text(body, encoding="utf-8")

    result = invoke(runner, "--config", config, "profile", sample_file)

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "invalid configuration" in result.output
    assert message in result.output
