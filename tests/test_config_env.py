from __future__ import annotations

import importlib
import os

import pytest


@pytest.fixture()
def config_mod(monkeypatch):
    from boundedfs import config as mod

    yield mod
    monkeypatch.undo()
    importlib.reload(mod)


def test_defaults(config_mod):
    """Test default settings."""
    s = config_mod.Settings()
    assert s.separator in ("/", "\\")
    assert s.dir_mode == 0o777
    assert s.file_mode == 0o777
    assert s.follow_symlinks is False
    assert s.image_extensions == ("png", "jpg", "jpeg", "gif")
    assert "docx" in s.readable_extensions


def test_env_overrides(monkeypatch, config_mod):
    """Test BFS_* overrides."""
    monkeypatch.setenv("BFS_DIR_MODE", "750")
    monkeypatch.setenv("BFS_FILE_MODE", "0o640")
    monkeypatch.setenv("BFS_FOLLOW_SYMLINKS", "yes")
    monkeypatch.setenv("BFS_IMAGE_EXTENSIONS", "PNG, .webp ,,avif")
    monkeypatch.setenv("BFS_SEPARATOR", "\\")
    monkeypatch.setenv("BFS_LOG_LEVEL", "DEBUG")

    importlib.reload(config_mod)
    s = config_mod.settings
    assert s.dir_mode == 0o750
    assert s.file_mode == 0o640
    assert s.follow_symlinks is True
    assert s.image_extensions == ("png", "webp", "avif")
    assert s.separator == "\\"
    assert s.log_level == "debug"


def test_malformed_values_fall_back(monkeypatch, config_mod):
    """Test malformed values fall back to defaults."""
    monkeypatch.setenv("BFS_DIR_MODE", "rwx")
    monkeypatch.setenv("BFS_SEPARATOR", ":")
    monkeypatch.setenv("BFS_READABLE_EXTENSIONS", " , ")

    importlib.reload(config_mod)
    s = config_mod.settings
    assert s.dir_mode == 0o777
    assert s.separator == os.sep
    assert s.readable_extensions == config_mod.DEFAULT_READABLE_EXTENSIONS


def test_only_prefixed_names(config_mod):
    """Test only BFS_* names can be read."""
    with pytest.raises(ValueError, match="Only BFS_"):
        config_mod._env("HOME", "")


def test_settings_frozen(config_mod):
    """Test settings are immutable."""
    with pytest.raises(AttributeError):
        config_mod.settings.dir_mode = 0o700
