import pytest
from floorstatus.config import AppConfig
from floorstatus.exceptions import ConfigurationError

def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "connection_strings:\n"
        "  DefaultConnection: mysql://user:pw@db/rest\n"
        "log_level: DEBUG\n"
    )
    config = AppConfig.from_yaml(path)

    assert config.get_connection_string("DefaultConnection") == "mysql://user:pw@db/rest"
    assert config.log_level == "DEBUG"

def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        AppConfig.from_yaml(tmp_path / "missing.yaml")

@pytest.mark.parametrize("content", [
    "connection_strings: [unclosed",
    "connection_strings: 5\n",
])
def test_from_yaml_invalid(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        AppConfig.from_yaml(path)

def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    config = AppConfig.from_yaml(path)

    assert config.connection_strings == {}
    assert config.get_connection_string() is None

def test_blank_connection_string_is_absent():
    config = AppConfig(connection_strings={"DefaultConnection": "  "})
    assert config.get_connection_string() is None

def test_connection_strings_from_environment(monkeypatch):
    monkeypatch.setenv("FLOORSTATUS_CONNECTION_STRINGS", '{"DefaultConnection": "sqlite:///floor.db"}')
    assert AppConfig().get_connection_string() == "sqlite:///floor.db"
