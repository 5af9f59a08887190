# shellkit/tests/utils/test_config.py
"""
Unit tests for the YAML configuration loader.
"""
from pathlib import Path

import pytest
import yaml

from shellkit.utils import config


@pytest.fixture(autouse=True)
def clean_config_cache(monkeypatch, tmp_path: Path):
    """Run every test from an empty directory with a cold cache."""
    for var in (
        "SHELLKIT_LOG_LEVEL",
        "SHELLKIT_HISTORY_FILE",
        "SHELLKIT_PLUGINS_DIR",
        "SHELLKIT_DEV",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    config._CONFIG_CACHE = None
    yield
    config._CONFIG_CACHE = None


def test_missing_file_gives_empty_config():
    assert config.get_config() == {}


def test_reads_config_yaml(tmp_path: Path):
    (tmp_path / "config.yaml").write_text(
        yaml.dump({"shell": {"prompt": "$ "}, "logging": {"level": "info"}})
    )
    cfg = config.get_config()
    assert cfg["shell"]["prompt"] == "$ "
    assert cfg["logging"]["level"] == "info"


def test_config_is_cached(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"shell": {"prompt": "a> "}}))
    first = config.get_config()

    path.write_text(yaml.dump({"shell": {"prompt": "b> "}}))
    assert config.get_config() is first
    assert config.reload_config()["shell"]["prompt"] == "b> "


def test_malformed_yaml_is_ignored(tmp_path: Path):
    (tmp_path / "config.yaml").write_text("shell: [unclosed\n")
    assert config.get_config() == {}


def test_environment_overrides(monkeypatch, tmp_path: Path):
    (tmp_path / "config.yaml").write_text(yaml.dump({"shell": {"prompt": "$ "}}))
    monkeypatch.setenv("SHELLKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("SHELLKIT_HISTORY_FILE", "/tmp/hist")
    monkeypatch.setenv("SHELLKIT_DEV", "yes")
    monkeypatch.setenv("SHELLKIT_PLUGINS_DIR", "/opt/plugins")

    cfg = config.get_config()

    assert cfg["logging"]["level"] == "debug"
    assert cfg["shell"] == {
        "prompt": "$ ",
        "history_file": "/tmp/hist",
        "development_mode": True,
    }
    assert cfg["plugins"]["dir"] == "/opt/plugins"
