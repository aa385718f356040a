"""Shared test fixtures."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_manifest_path() -> Path:
    return FIXTURES_DIR / "sample_manifest.json"


@pytest.fixture
def video(tmp_path, monkeypatch) -> str:
    """An empty ``video.mp4`` in a fresh working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "video.mp4").write_bytes(b"")
    return "video.mp4"
