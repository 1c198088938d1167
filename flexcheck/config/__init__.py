"""
Preflight Configuration - per-run context derived from the environment.

This module provides:
- Fixed project, CLI and template paths
- Optional preflight.toml settings merged with environment flags
- ValidationContext, the read-only input of a preflight run

Example usage:
    from flexcheck.config import ValidationContext

    context = ValidationContext.from_environment(Path.cwd(), os.environ)
    print(context.plugin_name, context.allow_skip)
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from flexcheck.config.paths import CLIPaths, ProjectPaths, TemplatePaths
from flexcheck.config.settings import load_settings
from flexcheck.errors import ConfigurationMissing
from flexcheck.fs import FileSystem, FileSystemError


@dataclass(frozen=True)
class ValidationContext:
    """
    Read-only input of a preflight run.

    Attributes:
        allow_skip: Downgrade version mismatches to warnings
        allow_unbundled_react: Enable the relaxed React compatibility path
        paths: Project paths
        cli_paths: User-level CLI paths (plugin registry)
        plugin_name: Name of the current plugin (from package.json)
        plugin_dir: Directory of the current plugin
        packages_to_verify: Packages checked against Flex UI's dependencies
        templates: Bundled template paths
    """

    allow_skip: bool
    allow_unbundled_react: bool
    paths: ProjectPaths
    cli_paths: CLIPaths
    plugin_name: str
    plugin_dir: Path
    packages_to_verify: tuple[str, ...] = ("react", "react-dom")
    templates: TemplatePaths = field(default_factory=TemplatePaths)

    @classmethod
    def from_environment(
        cls,
        app_dir: Path,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
        fs: FileSystem | None = None,
    ) -> "ValidationContext":
        """
        Build the context for a project directory.

        Args:
            app_dir: Project directory
            environ: Environment mapping (defaults to os.environ)
            home: User home directory (defaults to Path.home())
            fs: Filesystem collaborator

        Returns:
            ValidationContext instance

        Raises:
            ConfigurationMissing: If the project has no readable package.json
            SettingsError: If preflight.toml is invalid
        """
        environ = os.environ if environ is None else environ
        home = Path.home() if home is None else Path(home)
        fs = fs or FileSystem()

        paths = ProjectPaths.for_project(app_dir)
        settings = load_settings(paths.dir, environ)

        try:
            package = fs.read_json(paths.package_json)
        except FileSystemError as e:
            raise ConfigurationMissing(
                paths.package_json, "Run this command from a plugin project directory"
            ) from e

        name = package.get("name") if isinstance(package, dict) else None
        if not name:
            raise ConfigurationMissing(
                paths.package_json, "package.json must declare a 'name'"
            )

        return cls(
            allow_skip=settings["skip_preflight_check"],
            allow_unbundled_react=settings["allow_unbundled_react"],
            paths=paths,
            cli_paths=CLIPaths.for_home(home),
            plugin_name=name,
            plugin_dir=paths.dir,
            packages_to_verify=tuple(settings["packages"]),
        )


__all__ = [
    "CLIPaths",
    "ProjectPaths",
    "TemplatePaths",
    "ValidationContext",
]
