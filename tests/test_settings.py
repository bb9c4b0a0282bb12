import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from orgchart.orchestration.config_loader import load_settings
from orgchart.settings import DEFAULT_LOG_FORMAT, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ORGCHART_LOG_LEVEL", "ORGCHART_LOG_FORMAT", "ORGCHART_ENCODING", "ORGCHART_SKIP_MALFORMED"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.log_format == DEFAULT_LOG_FORMAT
    assert settings.encoding == "utf-8"
    assert settings.skip_malformed is False


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("ORGCHART_LOG_LEVEL", "debug")
    monkeypatch.setenv("ORGCHART_ENCODING", "latin-1")
    monkeypatch.setenv("ORGCHART_SKIP_MALFORMED", "yes")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.encoding == "latin-1"
    assert settings.skip_malformed is True


@pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("off", False), ("", False), (True, True)])
def test_skip_malformed_flag_parsing(value, expected):
    assert Settings(skip_malformed=value).skip_malformed is expected


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError):
        Settings(colour="green")


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.log_level = "DEBUG"


def test_load_settings_from_yaml(tmp_path: Path):
    path = tmp_path / "orgchart.yaml"
    path.write_text("log_level: info\nskip_malformed: true\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.log_level == "INFO"
    assert settings.skip_malformed is True
    assert settings.encoding == "utf-8"


def test_load_settings_from_toml_table(tmp_path: Path):
    path = tmp_path / "orgchart.toml"
    path.write_text('[orgchart]\nencoding = "latin-1"\n', encoding="utf-8")

    assert load_settings(path).encoding == "latin-1"


def test_load_settings_from_json(tmp_path: Path):
    path = tmp_path / "orgchart.json"
    path.write_text(json.dumps({"log_level": "ERROR"}), encoding="utf-8")

    assert load_settings(path).log_level == "ERROR"


def test_overrides_win_over_file_and_none_is_ignored(tmp_path: Path):
    path = tmp_path / "orgchart.yml"
    path.write_text("log_level: info\nskip_malformed: true\n", encoding="utf-8")

    settings = load_settings(path, overrides={"log_level": "debug", "skip_malformed": None})

    assert settings.log_level == "DEBUG"
    assert settings.skip_malformed is True


def test_file_wins_over_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("ORGCHART_LOG_LEVEL", "ERROR")
    path = tmp_path / "orgchart.yaml"
    path.write_text("log_level: info\n", encoding="utf-8")

    assert load_settings(path).log_level == "INFO"
    assert load_settings().log_level == "ERROR"


def test_empty_yaml_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == Settings()


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_unsupported_config_format(tmp_path: Path):
    path = tmp_path / "orgchart.ini"
    path.write_text("[orgchart]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported config format"):
        load_settings(path)


def test_non_mapping_config_is_rejected(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_settings(path)


def test_invalid_yaml_is_a_value_error(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("log_level: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_settings(path)


def test_unknown_encoding_is_rejected(monkeypatch):
    monkeypatch.setenv("ORGCHART_ENCODING", "no-such-codec")

    with pytest.raises(ValidationError, match="Unknown encoding"):
        Settings()


def test_non_mapping_orgchart_table_is_rejected(tmp_path: Path):
    path = tmp_path / "orgchart.json"
    path.write_text(json.dumps({"orgchart": [1, 2]}), encoding="utf-8")

    with pytest.raises(ValueError, match="mapping under 'orgchart'"):
        load_settings(path)
