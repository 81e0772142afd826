"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from trackseq.config.config import Config
from trackseq.platform.logging import DEFAULT_LOG_FILE
from trackseq.ui.cli.args import ArgumentParser, TagArgs


def test_create_parser_defaults() -> None:
    """No flags are required; the run needs no arguments."""

    parser = ArgumentParser.create_parser()

    parsed: Namespace = parser.parse_args([])
    assert parsed.verbose is False
    assert parsed.quiet is False
    assert parsed.log_file is None


def test_create_parser_has_no_input_directory_option() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["some/dir"])


def test_process_args_uses_default_log_file(mocker: MockerFixture) -> None:
    mock_setup = mocker.patch("trackseq.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args([])

    assert args == TagArgs(verbose=False, quiet=False, log_file=DEFAULT_LOG_FILE)
    mock_setup.assert_called_once_with(log_file=DEFAULT_LOG_FILE, console_level=logging.INFO)


def test_process_args_prefers_configured_log_file(mocker: MockerFixture, tmp_path: Path) -> None:
    mock_setup = mocker.patch("trackseq.ui.cli.args.parser.setup_logger")
    configured = tmp_path / "configured.log"
    _ = mocker.patch.object(Config, "load", return_value=Config(log_file=configured))

    args = ArgumentParser.process_args(["--quiet"])

    assert args.log_file == configured
    assert args.quiet is True
    mock_setup.assert_called_once_with(log_file=configured, console_level=logging.ERROR)


def test_process_args_command_line_log_file_wins(mocker: MockerFixture, tmp_path: Path) -> None:
    mock_setup = mocker.patch("trackseq.ui.cli.args.parser.setup_logger")
    _ = mocker.patch.object(Config, "load", return_value=Config(log_file=tmp_path / "configured.log"))
    explicit = tmp_path / "explicit.log"

    args = ArgumentParser.process_args(["--verbose", "--log-file", str(explicit)])

    assert args.log_file == explicit
    mock_setup.assert_called_once_with(log_file=explicit, console_level=logging.DEBUG)
