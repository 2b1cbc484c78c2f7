# tests/conftest.py
import pytest

from hangeul.domain.codeblock import SYLLABLE_END, SYLLABLE_START


@pytest.fixture(scope="session")
def all_syllable_scalars():
    return range(SYLLABLE_START, SYLLABLE_END + 1)


@pytest.fixture
def settings_path(monkeypatch, tmp_path):
    """Point the settings store at a temp file so tests never touch a real settings.yaml."""
    path = tmp_path / "settings.yaml"
    monkeypatch.setenv("HANGEUL_SETTINGS", str(path))
    monkeypatch.delenv("HANGEUL_DEBUG", raising=False)
    return path
