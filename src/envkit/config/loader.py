"""
Project configuration loading.

Load and parse envkit.yaml, which names the dotenv files to load and the
variables that must exist afterwards.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from envkit.exceptions import ConfigurationError

CONFIG_FILENAME = "envkit.yaml"

DEFAULTS: dict[str, Any] = {
    "files": [".env"],
    "required": [],
}


class Config:
    """envkit configuration container with dict-like access."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    @property
    def files(self) -> list[str]:
        """Dotenv files to load, in order."""
        return list(self.data.get("files", DEFAULTS["files"]))

    @property
    def required(self) -> list[str]:
        """Names that must be set once every file is loaded."""
        return list(self.data.get("required", DEFAULTS["required"]))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        value: Any = self.data
        for k in key.split("."):
            if not isinstance(value, dict) or value.get(k) is None:
                return default
            value = value[k]
        return value

    def __getitem__(self, key: str) -> Any:
        """Dict-like access: config['key'] or config['logging.level']."""
        if "." in key:
            value = self.get(key)
            if value is None:
                raise KeyError(f"Config key '{key}' not found")
            return value
        if key in self.data:
            return self.data[key]
        raise KeyError(f"Config key '{key}' not found")

    def __contains__(self, key: str) -> bool:
        """Check if key exists in config."""
        if "." in key:
            value: Any = self.data
            for k in key.split("."):
                if not isinstance(value, dict) or k not in value:
                    return False
                value = value[k]
            return True
        return key in self.data

    def __iter__(self) -> Iterator[str]:
        """Iterate over top-level keys."""
        return iter(self.data)

    def validate(self) -> None:
        """Validate configuration structure and content."""
        errors = []

        if not isinstance(self.data, dict):
            raise ConfigurationError(
                f"Configuration must be a dictionary/mapping, got {type(self.data).__name__}"
            )

        for section in ("files", "required"):
            value = self.data.get(section)
            if value is None:
                continue
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                errors.append(f"Configuration '{section}' must be a list of strings")

        logging_section = self.data.get("logging")
        if logging_section is not None and not isinstance(logging_section, dict):
            errors.append(f"Configuration 'logging' must be a dictionary, got {type(logging_section).__name__}")

        if errors:
            raise ConfigurationError("\n".join(errors), details={"errors": errors})


def _read_yaml(path: Path) -> dict[str, Any]:
    """Parse one YAML file, turning syntax and permission errors into ConfigurationError."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise ConfigurationError(
                f"Error parsing {path.name} at line {mark.line + 1}, column {mark.column + 1}:\n"
                f"  {e}\n"
                f"  File: {path}\n"
                f"  Suggestion: Check YAML syntax, ensure proper indentation and quotes",
                details={"path": str(path)},
            ) from e
        raise ConfigurationError(f"Error parsing {path.name}: {e}\n  File: {path}", details={"path": str(path)}) from e
    except PermissionError as e:
        raise ConfigurationError(
            f"Permission denied reading {path.name}: {path}\n  Suggestion: Check file permissions",
            details={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a dictionary/mapping, got {type(data).__name__}\n  File: {path}",
            details={"path": str(path)},
        )
    return data


def load_config(project_path: Path | None = None, env: str | None = None, *, missing_ok: bool = False) -> Config:
    """
    Load envkit configuration.

    Load envkit.yaml and envkit.{env}.yaml, the latter merged on top.

    Args:
        project_path: Path to project root (default: current directory)
        env: Environment name (dev, staging, prod)
        missing_ok: Return defaults instead of failing when envkit.yaml is absent

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If the file is missing (unless missing_ok), unreadable or invalid
    """
    if project_path is None:
        project_path = Path.cwd()

    base_config_path = project_path / CONFIG_FILENAME
    if not base_config_path.exists():
        if missing_ok:
            return Config(dict(DEFAULTS))
        raise ConfigurationError(
            f"Configuration file not found: {base_config_path}\n"
            f"  Suggestion: Create an {CONFIG_FILENAME} file in your project root",
            details={"path": str(base_config_path)},
        )

    if not base_config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {base_config_path}")

    config_data = _read_yaml(base_config_path)

    if env:
        env_config_path = project_path / f"envkit.{env}.yaml"
        if env_config_path.exists():
            _merge_dict(config_data, _read_yaml(env_config_path))

    config = Config(config_data)
    config.validate()
    return config


def _merge_dict(base: dict, override: dict):
    """Recursively merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value
