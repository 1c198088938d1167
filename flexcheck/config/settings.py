"""
Project Settings.

This module declares the optional preflight.toml settings and merges them
with environment flags.

Key features:
- Typed setting fields with descriptions and environment overrides
- Validation of values read from preflight.toml
- Truthy parsing of environment flags
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flexcheck.config.toml_handler import (
    SettingsError,
    generate_toml_from_schema,
    read_toml,
    write_toml,
)

SETTINGS_FILE = "preflight.toml"
SETTINGS_SECTION = "preflight"

_TRUTHY = frozenset({"true", "1", "yes"})


@dataclass(frozen=True)
class SettingField:
    """
    A single setting with type and default.

    Attributes:
        type_: The expected type of the value
        default: Default value
        description: Human-readable description (written as a TOML comment)
        env: Environment variable that overrides the value, if any
    """

    type_: type
    default: Any
    description: str = ""
    env: str | None = None

    def validate(self, name: str, value: Any) -> None:
        if not isinstance(value, self.type_):
            raise SettingsError(
                f"Setting '{name}': expected type {self.type_.__name__}, "
                f"got {type(value).__name__}"
            )
        if self.type_ is list and not all(isinstance(v, str) for v in value):
            raise SettingsError(f"Setting '{name}': all entries must be strings")


SCHEMA: dict[str, SettingField] = {
    "skip_preflight_check": SettingField(
        bool,
        False,
        "Downgrade dependency version mismatches to warnings",
        env="SKIP_PREFLIGHT_CHECK",
    ),
    "allow_unbundled_react": SettingField(
        bool,
        False,
        "Allow React versions other than the one bundled with Flex UI (>=1.19.0)",
        env="UNBUNDLED_REACT",
    ),
    "packages": SettingField(
        list,
        ["react", "react-dom"],
        "Packages whose installed version must match Flex UI's declared version",
    ),
}


def env_flag(environ: Mapping[str, str], name: str) -> bool | None:
    """
    Read a boolean flag from the environment.

    Returns:
        True/False if the variable is set, None if it is absent
    """
    if name not in environ:
        return None
    return environ[name].strip().lower() in _TRUTHY


def load_settings(
    app_dir: Path, environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """
    Load settings for a project.

    Values come from schema defaults, then [preflight] in preflight.toml,
    then environment variables.

    Args:
        app_dir: Project directory
        environ: Environment mapping (defaults to an empty mapping)

    Returns:
        Dictionary of setting name -> value

    Raises:
        SettingsError: If the settings file is invalid
    """
    environ = environ or {}
    settings = {name: field.default for name, field in SCHEMA.items()}

    settings_path = Path(app_dir) / SETTINGS_FILE
    if settings_path.exists():
        data = read_toml(settings_path)
        section = data.get(SETTINGS_SECTION, {})
        if not isinstance(section, dict):
            raise SettingsError(f"[{SETTINGS_SECTION}] in {settings_path} must be a table")

        for key, value in section.items():
            if key not in SCHEMA:
                raise SettingsError(f"Unknown setting '{key}' in {settings_path}")
            SCHEMA[key].validate(key, value)
            settings[key] = value

    for name, field in SCHEMA.items():
        if field.env:
            flag = env_flag(environ, field.env)
            if flag is not None:
                settings[name] = flag

    return settings


def write_default_settings(app_dir: Path, overwrite: bool = False) -> Path:
    """
    Write a commented preflight.toml with default values.

    Args:
        app_dir: Project directory
        overwrite: Replace an existing file

    Returns:
        Path of the settings file

    Raises:
        SettingsError: If the file exists and overwrite is False, or writing fails
    """
    settings_path = Path(app_dir) / SETTINGS_FILE
    if settings_path.exists() and not overwrite:
        raise SettingsError(f"{settings_path} already exists")

    write_toml(settings_path, generate_toml_from_schema(SETTINGS_SECTION, SCHEMA))
    return settings_path
