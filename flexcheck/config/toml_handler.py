"""
TOML File I/O Handler.

This module provides TOML parsing and writing for the project settings file.

Key features:
- Parse TOML files using tomllib (Python 3.11+)
- Write TOML files using tomlkit (preserves comments and formatting)
- Generate a commented settings file from the settings schema
"""

import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from flexcheck.errors import PreflightError


class SettingsError(PreflightError):
    """Raised when the project settings file cannot be read, written or validated."""

    code = "settings_error"


def read_toml(file_path: Path) -> dict[str, Any]:
    """
    Read and parse a TOML file.

    Args:
        file_path: Path to the TOML file

    Returns:
        Parsed TOML data as dictionary

    Raises:
        SettingsError: If file cannot be read or parsed
    """
    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise SettingsError(f"TOML file not found: {file_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Failed to parse TOML file {file_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read TOML file {file_path}: {e}") from e


def write_toml(file_path: Path, content: str) -> None:
    """
    Write rendered TOML content to a file.

    Args:
        file_path: Path to the TOML file
        content: TOML document text

    Raises:
        SettingsError: If file cannot be written
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise SettingsError(f"Failed to write TOML file {file_path}: {e}") from e


def generate_toml_from_schema(section: str, schema: dict[str, Any]) -> str:
    """
    Generate TOML content from the settings schema with descriptive comments.

    Args:
        section: Name of the table holding the settings
        schema: Schema dictionary (field_name -> SettingField)

    Returns:
        TOML string with comments
    """
    doc = tomlkit.document()

    doc.add(tomlkit.comment("Preflight settings for this Flex plugin project."))
    doc.add(
        tomlkit.comment("Environment variables, when set, take precedence over values here.")
    )
    doc.add(tomlkit.nl())

    table = tomlkit.table()

    for field_name, field in schema.items():
        if field.description:
            table.add(tomlkit.comment(field.description))
        if field.env:
            table.add(tomlkit.comment(f"Overridden by: {field.env}"))

        table.add(field_name, field.default)
        table.add(tomlkit.nl())

    doc.add(section, table)

    return tomlkit.dumps(doc)
