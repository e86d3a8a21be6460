"""Tests for the command-line entry point."""

import logging

import psycopg
import pytest

import bitdotio.main as cli
from bitdotio import __version__
from bitdotio.config import get_settings
from bitdotio.main import build_parser, main


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate from the caller's environment and .env file."""
    monkeypatch.delenv("BITDOTIO_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("bitdotio")
    for handler in [h for h in logger.handlers if getattr(h, "_bitdotio", False)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    """version prints the client version."""
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == f"bitdotio v{__version__}"


def test_missing_token(capsys: pytest.CaptureFixture[str]) -> None:
    """Commands that talk to bit.io fail without a token."""
    assert main(["databases"]) == 1
    assert "no access token" in capsys.readouterr().err


def test_invalid_database_name(capsys: pytest.CaptureFixture[str]) -> None:
    """Library errors are reported and mapped to exit code 1."""
    assert main(["--token", "tok", "query", "iris", "select 1"]) == 1
    assert "owner/database" in capsys.readouterr().err


def test_parser_requires_command() -> None:
    """A subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_database_error_is_reported(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Database driver errors from a query are printed and exit with 1."""

    async def failing_query(*args, **kwargs) -> int:
        raise psycopg.OperationalError("connection refused")

    monkeypatch.setattr(cli, "run_query", failing_query)

    assert main(["--token", "tok", "query", "owner/db", "select 1"]) == 1
    assert "error: connection refused" in capsys.readouterr().err
