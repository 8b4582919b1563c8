"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

AUTO_WRAP_WIDTH_ENV = "CC_AUTO_WRAP_WIDTH"


@dataclass
class Config:
    """User configuration with sensible defaults."""
    preserve_message: bool = True
    auto_wrap_commit_message: bool = True
    auto_wrap_width: int = 72
    max_subject_length: int = 50
    show_multi_character_gitmojis: bool = True

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        for name in ('preserve_message', 'auto_wrap_commit_message', 'show_multi_character_gitmojis'):
            if not isinstance(getattr(self, name), bool):
                warnings.append(f"Invalid {name} '{getattr(self, name)}', using {str(getattr(defaults, name)).lower()}")
                setattr(self, name, getattr(defaults, name))

        for name in ('auto_wrap_width', 'max_subject_length'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                warnings.append(f"Invalid {name} '{value}', using {getattr(defaults, name)}")
                setattr(self, name, getattr(defaults, name))

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".composerc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        home_path = Path.home() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
        elif home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
        else:
            self._config = Config()

        self._apply_env_overrides(self._config)
        return self._config

    def _apply_env_overrides(self, config: Config) -> None:
        width = os.environ.get(AUTO_WRAP_WIDTH_ENV)
        if width is None:
            return
        if width.isdigit() and int(width) > 0:
            config.auto_wrap_width = int(width)
        else:
            print(f"Config warning: Invalid {AUTO_WRAP_WIDTH_ENV} '{width}', ignoring", file=sys.stderr)

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "AUTO_WRAP_WIDTH_ENV",
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
]
