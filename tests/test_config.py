"""Test configuration loading."""

import json

import pytest

from a11y_heuristics.core.config import (
    Config,
    load_config,
    load_config_from_file,
    merge_env_config,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from an empty directory with no config in HOME."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for var in ("A11Y_HEURISTICS_EXCLUDE", "A11Y_HEURISTICS_FORMAT",
                "A11Y_HEURISTICS_STRICT", "A11Y_HEURISTICS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    config = Config()
    assert config.analyzers.exclude == []
    assert config.output.format == "pretty"
    assert config.output.strict is False
    assert config.logging.level == "INFO"
    assert config.logging.use_rich is True


def test_load_config_without_files_returns_defaults():
    assert load_config().to_dict() == Config().to_dict()


def test_load_yaml_from_working_directory(tmp_path):
    (tmp_path / "a11y-heuristics.yaml").write_text(
        "analyzers:\n"
        "  exclude: [heading_order]\n"
        "output:\n"
        "  format: json\n"
        "  strict: true\n"
        "logging:\n"
        "  level: debug\n"
        "  use_rich: false\n",
        encoding="utf-8",
    )
    config = load_config()
    assert config.analyzers.exclude == ["heading_order"]
    assert config.output.format == "json"
    assert config.output.strict is True
    assert config.logging.level == "DEBUG"
    assert config.logging.use_rich is False


def test_load_json_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"analyzers": {"exclude": "alt_text, link_text"}}), encoding="utf-8")
    config = load_config(str(path))
    assert config.analyzers.exclude == ["alt_text", "link_text"]


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported configuration file format"):
        load_config_from_file(path)


def test_invalid_format_rejected():
    with pytest.raises(ValueError, match="Unsupported output format"):
        Config.from_dict({"output": {"format": "xml"}})


def test_empty_yaml_is_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config_from_file(path).to_dict() == Config().to_dict()


def test_round_trip_dict():
    data = {
        "analyzers": {"exclude": ["button_names"]},
        "output": {"format": "json", "path": "out.json", "strict": True},
        "logging": {"level": "WARNING", "use_rich": False},
    }
    assert Config.from_dict(data).to_dict() == data


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("A11Y_HEURISTICS_EXCLUDE", "alt_text,form_labels")
    monkeypatch.setenv("A11Y_HEURISTICS_FORMAT", "json")
    monkeypatch.setenv("A11Y_HEURISTICS_STRICT", "1")
    monkeypatch.setenv("A11Y_HEURISTICS_LOG_LEVEL", "warning")
    config = merge_env_config(Config())
    assert config.analyzers.exclude == ["alt_text", "form_labels"]
    assert config.output.format == "json"
    assert config.output.strict is True
    assert config.logging.level == "WARNING"


def test_env_invalid_format(monkeypatch):
    monkeypatch.setenv("A11Y_HEURISTICS_FORMAT", "xml")
    with pytest.raises(ValueError):
        merge_env_config(Config())
