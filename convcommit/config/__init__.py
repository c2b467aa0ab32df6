"""Configuration Management Package

Settings live in a JSON dotfile, .ccrc, looked up in the current directory
first and then in the home directory.
"""

import json
import sys
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

# Valid configuration values
VALID_OUTPUTS = {"text", "json"}


def _is_output(value) -> bool:
    return isinstance(value, str) and value in VALID_OUTPUTS


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_comment_char(value) -> bool:
    # git's core.commentChar is a single non-whitespace character
    return isinstance(value, str) and len(value) == 1 and not value.isspace()


FIELD_CHECKS = {
    "output": _is_output,
    "max_subject_length": _is_positive_int,
    "strip_comments": lambda value: isinstance(value, bool),
    "comment_char": _is_comment_char,
}


@dataclass
class Config:
    """ccm settings with sensible defaults."""
    output: str = "text"
    max_subject_length: int = 72
    strip_comments: bool = True
    comment_char: str = "#"

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Reset invalid values to their defaults, returning one warning per reset."""
        warnings = []
        defaults = Config()
        for name, is_valid in FIELD_CHECKS.items():
            value = getattr(self, name)
            if not is_valid(value):
                default = getattr(defaults, name)
                warnings.append(f"Invalid {name} {value!r}, using {default!r}")
                setattr(self, name, default)
        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds, loads and saves .ccrc."""

    CONFIG_FILENAME = ".ccrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def search_paths(self) -> list[Path]:
        return [Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME]

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        self._config = Config()
        for path in self.search_paths():
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                break
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        folder = Path.home() if global_config else Path.cwd()
        path = folder / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
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
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "VALID_OUTPUTS",
    "FIELD_CHECKS",
]
