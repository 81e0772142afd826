"""Tests for CLI functionality."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.easyid3 import EasyID3
from pytest_mock import MockerFixture

from trackseq.features.tagging import TagWriteError
from trackseq.features.tagging.usecases import runner as runner_module
from trackseq.ui.cli import CommandProcessor, main

MakeMp3 = Callable[..., Path]


@pytest.fixture
def in_album(audio_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from the directory that contains ``audio_files``."""

    monkeypatch.chdir(audio_dir.parent)
    return audio_dir


def _run(tmp_path: Path, *extra: str) -> int:
    return CommandProcessor.process_command(["--log-file", str(tmp_path / "logs" / "run.log"), *extra])


def test_progress_lines_and_exit_code(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    capsys: pytest.CaptureFixture[str],
) -> None:
    for name in ("track10.mp3", "track2.mp3", "track1.mp3"):
        _ = make_mp3(name)

    exit_code = _run(tmp_path)

    assert exit_code == 0
    out = capsys.readouterr().out
    assert '[1/3] "track1.mp3" ... OK' in out
    assert '[2/3] "track2.mp3" ... OK' in out
    assert '[3/3] "track10.mp3" ... OK' in out
    assert out.index("track1.mp3") < out.index("track2.mp3") < out.index("track10.mp3")
    assert EasyID3(in_album / "track10.mp3")["tracknumber"] == ["3/3"]


def test_file_failure_keeps_exit_code_zero(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    mocker: MockerFixture,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = make_mp3("a.mp3")
    _ = make_mp3("b.mp3")
    _ = mocker.patch.object(
        runner_module,
        "write_track_number",
        side_effect=[TagWriteError(in_album / "a.mp3", "read-only filesystem"), True],
    )

    exit_code = _run(tmp_path)

    assert exit_code == 0
    captured = capsys.readouterr()
    assert '[1/2] "a.mp3" ... FAILED' in captured.out
    assert '[2/2] "b.mp3" ... OK' in captured.out
    assert "read-only filesystem" in captured.err


def test_missing_directory_exits_non_zero(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)

    exit_code = _run(tmp_path)

    assert exit_code == 1
    assert "..." not in capsys.readouterr().out
    log_text = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    assert "Cannot list" in log_text
    assert str(tmp_path / "audio_files") in log_text


def test_quiet_suppresses_progress(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = make_mp3("a.mp3")

    exit_code = _run(tmp_path, "--quiet")

    assert exit_code == 0
    assert capsys.readouterr().out == ""
    assert EasyID3(in_album / "a.mp3")["tracknumber"] == ["1/1"]


@pytest.mark.parametrize(
    ("flags", "expected_level"),
    [([], logging.INFO), (["--verbose"], logging.DEBUG), (["--quiet"], logging.ERROR)],
)
def test_console_level_follows_flags(
    tmp_path: Path,
    in_album: Path,
    mocker: MockerFixture,
    flags: list[str],
    expected_level: int,
) -> None:
    _ = in_album
    mock_setup = mocker.patch("trackseq.ui.cli.args.parser.setup_logger")
    log_file = tmp_path / "custom.log"

    _ = CommandProcessor.process_command(["--log-file", str(log_file), *flags])

    mock_setup.assert_called_once_with(log_file=log_file, console_level=expected_level)


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = _run(tmp_path, "--verbose", "--quiet")

    assert exc_info.value.code == 2


def test_log_file_receives_errors(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    mocker: MockerFixture,
) -> None:
    _ = make_mp3("a.mp3")
    _ = mocker.patch.object(
        runner_module,
        "write_track_number",
        side_effect=TagWriteError(in_album / "a.mp3", "no space left"),
    )

    _ = _run(tmp_path)

    log_text = (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    assert "ERROR" in log_text
    assert "no space left" in log_text


def test_unwritable_log_file_still_numbers_files(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _ = make_mp3("a.mp3")
    blocker = tmp_path / "blocker"
    _ = blocker.write_text("")

    exit_code = CommandProcessor.process_command(["--log-file", str(blocker / "logs" / "run.log")])

    assert exit_code == 0
    assert EasyID3(in_album / "a.mp3")["tracknumber"] == ["1/1"]
    captured = capsys.readouterr()
    assert '[1/1] "a.mp3" ... OK' in captured.out
    assert "Cannot write log file" in captured.err


def test_keyboard_interrupt_closes_progress_line(
    tmp_path: Path,
    in_album: Path,
    make_mp3: MakeMp3,
    mocker: MockerFixture,
    capsys: pytest.CaptureFixture[str],
) -> None:
    track = make_mp3("a.mp3")
    before = track.read_bytes()
    _ = mocker.patch.object(runner_module, "write_track_number", side_effect=KeyboardInterrupt)

    exit_code = _run(tmp_path)

    assert exit_code == 130
    out = capsys.readouterr().out
    assert '[1/1] "a.mp3" ... INTERRUPTED' in out
    assert "Done." not in out
    assert track.read_bytes() == before


def test_main_uses_process_command(mocker: MockerFixture) -> None:
    mock_process = mocker.patch.object(CommandProcessor, "process_command", return_value=1)

    assert main() == 1
    mock_process.assert_called_once_with()
