"""
Filesystem Access.

This module provides the filesystem collaborator used by every check.

Key features:
- Existence checks and text/JSON reads
- File copies and directory creation
- Recursive source discovery with directory exclusion
- Node module resolution against a node_modules directory

Checks receive a FileSystem instance instead of touching the disk directly,
so tests can pass a subclass that records or fakes operations.
"""

import json
import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import Any


class FileSystemError(Exception):
    """Base exception for filesystem errors."""

    pass


class FileSystem:
    """Thin wrapper over pathlib and shutil."""

    def exists(self, *paths: Path) -> bool:
        """Return True if every given path exists."""
        return all(Path(p).exists() for p in paths)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")

    def read_json(self, path: Path) -> Any:
        """
        Read and parse a JSON file.

        Args:
            path: Path to the JSON file

        Returns:
            Parsed JSON data

        Raises:
            FileSystemError: If file cannot be read or parsed
        """
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise FileSystemError(f"File not found: {path}") from e
        except json.JSONDecodeError as e:
            raise FileSystemError(f"Failed to parse JSON file {path}: {e}") from e
        except OSError as e:
            raise FileSystemError(f"Failed to read file {path}: {e}") from e

    def write_json(self, path: Path, data: Any) -> None:
        """Write data as 2-space indented JSON, replacing the whole file."""
        self.write_text(path, json.dumps(data, indent=2))

    def copy_file(self, source: Path, target: Path) -> None:
        shutil.copyfile(source, target)

    def mkdirp(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def find_files(
        self,
        root: Path,
        suffixes: tuple[str, ...],
        exclude_dirs: tuple[str, ...] = ("node_modules",),
        exclude_suffixes: tuple[str, ...] = (),
    ) -> Iterator[Path]:
        """
        Recursively yield files under root matching any suffix.

        Args:
            root: Directory to search
            suffixes: File name endings to match (e.g. ".ts")
            exclude_dirs: Directory names that are never descended into
            exclude_suffixes: File name endings to skip (e.g. ".d.ts")

        Yields:
            Matching file paths
        """
        root = Path(root)
        if not root.is_dir():
            return

        for entry in sorted(root.iterdir()):
            if entry.is_dir():
                if entry.name in exclude_dirs:
                    continue
                yield from self.find_files(
                    entry, suffixes, exclude_dirs, exclude_suffixes
                )
            elif entry.name.endswith(suffixes):
                if exclude_suffixes and entry.name.endswith(exclude_suffixes):
                    continue
                yield entry

    def resolve_module(self, node_modules: Path, name: str) -> Path | None:
        """
        Resolve an installed node module.

        Args:
            node_modules: The project's node_modules directory
            name: Module name, optionally scoped (e.g. "@twilio/flex-ui")

        Returns:
            Path to the module's package.json, or None if not installed
        """
        manifest = Path(node_modules, *name.split("/"), "package.json")
        if manifest.is_file():
            return manifest
        return None
