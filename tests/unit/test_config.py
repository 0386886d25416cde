"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from mdnotes.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults(monkeypatch):
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    monkeypatch.delenv("MDNOTES_HIGHLIGHT_THEME", raising=False)
    settings = load_config()
    assert settings.highlight_theme == "monokai"
    assert settings.default_lang == "en"
    assert settings.stylesheet is None


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml are applied."""
    (tmp_path / "config.yaml").write_text("default_lang: cs\nhighlight_theme: friendly\n")
    settings = load_config()
    assert settings.default_lang == "cs"
    assert settings.highlight_theme == "friendly"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDNOTES_DEFAULT_LANG takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("default_lang: cs\n")
    monkeypatch.setenv("MDNOTES_DEFAULT_LANG", "de")
    assert load_config().default_lang == "de"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDNOTES_HIGHLIGHT_THEME", "friendly")
    settings = load_config(overrides={"highlight_theme": "monokai", "default_lang": None})
    assert settings.highlight_theme == "monokai"
    assert settings.default_lang == "en"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    """A config.yaml that is not a mapping is rejected."""
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_invalid_log_level(monkeypatch):
    """Unknown log levels fail validation."""
    monkeypatch.setenv("MDNOTES_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        load_config()
