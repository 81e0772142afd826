"""Shared pytest fixtures for trackseq tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from mutagen.easyid3 import EasyID3

from trackseq.config.config import Config

# A few bytes of an MPEG frame header; ID3 handling never decodes audio.
FAKE_MPEG_PAYLOAD: bytes = b"\xff\xfb\x90\x00" + b"\x00" * 412

MakeMp3 = Callable[..., Path]


@pytest.fixture
def audio_dir(tmp_path: Path) -> Path:
    """Create ``<tmp_path>/audio_files`` and return it."""

    directory = tmp_path / "audio_files"
    directory.mkdir()
    return directory


@pytest.fixture
def make_mp3(audio_dir: Path) -> MakeMp3:
    """Return a factory writing a stub MP3, optionally with an ID3 tag.

    Keyword arguments become EasyID3 keys, e.g. ``make_mp3("a.mp3", title="A")``.
    Without keyword arguments the file carries no tag at all.
    """

    def _make(name: str, directory: Path | None = None, **tags: str) -> Path:
        path = (directory or audio_dir) / name
        _ = path.write_bytes(FAKE_MPEG_PAYLOAD)
        if tags:
            tag = EasyID3()
            for key, value in tags.items():
                tag[key] = value
            tag.save(path, v2_version=3)
        return path

    return _make


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Keep cached configuration from leaking between tests."""

    Config.reset()
    yield None
    Config.reset()
