from typing import Dict, Optional
from pathlib import Path
import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from .exceptions import ConfigurationError

DEFAULT_CONNECTION = "DefaultConnection"

class AppConfig(BaseSettings):
    """
    Application settings. Values come from keyword arguments (e.g. a YAML file)
    or from FLOORSTATUS_* environment variables.
    """
    model_config = SettingsConfigDict(env_prefix="FLOORSTATUS_")

    connection_strings: Dict[str, str] = {}
    log_level: str = "INFO"
    log_colour: bool = False

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f) or {}
            return cls(**raw_config)
        except (ValidationError, yaml.YAMLError, TypeError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}")

    def get_connection_string(self, name: str = DEFAULT_CONNECTION) -> Optional[str]:
        # Missing and blank entries are both reported as absent
        value = self.connection_strings.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()
