"""Tests for environment-driven settings."""

from democards.config.settings import Settings


def test_defaults():
    settings = Settings()
    assert settings.markdown_exts == [".md"]
    assert settings.default_id_suffix == "-1"


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEMOCARDS_DEFAULT_ID_SUFFIX", "-2")
    monkeypatch.setenv("DEMOCARDS_MARKDOWN_EXTS", '[".md", ".markdown"]')
    settings = Settings()
    assert settings.default_id_suffix == "-2"
    assert settings.markdown_exts == [".md", ".markdown"]
