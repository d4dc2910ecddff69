"""Tests for CLI commands."""

import asyncio
import gzip
import io
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

from logdrop.cli.main import app
from logdrop.cli.utils import load_config, parse_tags
from logdrop.domain.value_objects.storage_config import StorageConfig

runner = CliRunner()


@pytest.fixture
def cli_root(tmp_path: Path) -> Path:
    return tmp_path / "store"


def invoke(cli_root: Path, tmp_path: Path, *args: str):  # type: ignore[no-untyped-def]
    return runner.invoke(
        app,
        ["--log-file", str(tmp_path / "cli.log"), *args],
        env={"LOGDROP_ROOT": str(cli_root)},
    )


def submit_gzip(cli_root: Path, tmp_path: Path, text: bytes = b"hello\n") -> str:
    bundle = tmp_path / "bundle.log.gz"
    bundle.write_bytes(gzip.compress(text))
    result = invoke(cli_root, tmp_path, "submit", "dev-7", "--file", str(bundle))
    assert result.exit_code == 0, result.output
    (stored,) = (cli_root / "uploads").iterdir()
    return f"uploads/{stored.name}"


class TestUtils:
    def test_parse_tags(self) -> None:
        assert parse_tags([]) is None
        assert parse_tags(["fw=1.2", "site=north=1"]) == {"fw": "1.2", "site": "north=1"}

    def test_parse_tags_rejects_bare_values(self) -> None:
        with pytest.raises(typer.BadParameter):
            parse_tags(["novalue"])

    def test_load_config_default_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        assert load_config(None).root == (tmp_path / ".logdrop").resolve()


class TestSubmitCommand:
    def test_submit_with_gzip_file(self, cli_root: Path, tmp_path: Path) -> None:
        logical = submit_gzip(cli_root, tmp_path)

        assert logical.startswith("uploads/dev-7_")
        assert logical.endswith(".gz")

    def test_submit_without_file(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "submit", "dev-7", "-m", "boot ok", "--tag", "fw=1")

        assert result.exit_code == 0
        assert "submitted" in result.output
        assert not (cli_root / "uploads").exists()

    def test_submit_blank_device_is_bad_request(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "submit", " ")

        assert result.exit_code == 2


    def test_submit_over_upload_limit(self, cli_root: Path, tmp_path: Path) -> None:
        bundle = tmp_path / "big.log"
        bundle.write_bytes(b"x" * 32)
        config = StorageConfig(root=cli_root, max_upload_bytes=16)

        with patch("logdrop.cli.commands.submit.load_config", return_value=config):
            result = invoke(cli_root, tmp_path, "submit", "dev-7", "--file", str(bundle))

        assert result.exit_code == 2
        assert not (cli_root / "uploads").exists()


class TestReadCommand:
    def test_read_decompresses(self, cli_root: Path, tmp_path: Path) -> None:
        logical = submit_gzip(cli_root, tmp_path)

        result = invoke(cli_root, tmp_path, "read", logical)

        assert result.exit_code == 0
        assert "hello" in result.output

    def test_read_traversal_exit_code(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "read", "../../etc/passwd")

        assert result.exit_code == 2

    def test_read_missing_exit_code(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "read", "missing/file.txt")

        assert result.exit_code == 3

    def test_read_corrupt_exit_code(self, cli_root: Path, tmp_path: Path) -> None:
        (cli_root / "uploads").mkdir(parents=True)
        (cli_root / "uploads" / "bad.gz").write_bytes(b"not gzip at all")

        result = invoke(cli_root, tmp_path, "read", "uploads/bad.gz")

        assert result.exit_code == 1


class TestListCommand:
    def test_list_empty(self, cli_root: Path) -> None:
        from logdrop.cli.commands.list_logs import _list_logs
        from logdrop.domain.value_objects.log_filter import LogFilter

        buffer = io.StringIO()
        with patch("logdrop.cli.commands.list_logs.console", Console(file=buffer, width=200)):
            asyncio.run(_list_logs(LogFilter(), cli_root))

        assert "No logs found" in buffer.getvalue()

    def test_list_shows_records(self, cli_root: Path, tmp_path: Path) -> None:
        from logdrop.cli.commands.list_logs import _list_logs
        from logdrop.domain.value_objects.log_filter import LogFilter

        submit_gzip(cli_root, tmp_path)

        buffer = io.StringIO()
        with patch("logdrop.cli.commands.list_logs.console", Console(file=buffer, width=200)):
            asyncio.run(_list_logs(LogFilter(device_id="dev-7"), cli_root))

        output = buffer.getvalue()
        assert "dev-7" in output
        assert "pending" in output


class TestStatusAndDeleteCommands:
    def test_status_update(self, cli_root: Path, tmp_path: Path) -> None:
        submit_gzip(cli_root, tmp_path)

        result = invoke(cli_root, tmp_path, "status", "1", "completed")

        assert result.exit_code == 0
        assert "completed" in result.output

    def test_status_missing_record(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "status", "99", "failed")

        assert result.exit_code == 3

    def test_delete_removes_artifact(self, cli_root: Path, tmp_path: Path) -> None:
        logical = submit_gzip(cli_root, tmp_path)

        result = invoke(cli_root, tmp_path, "delete", "1", "--yes")

        assert result.exit_code == 0
        assert not (cli_root / logical).exists()

    def test_delete_missing_record(self, cli_root: Path, tmp_path: Path) -> None:
        result = invoke(cli_root, tmp_path, "delete", "99", "--yes")

        assert result.exit_code == 3
