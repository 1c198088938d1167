"""
Local Plugin Registry.

This module manages ~/.twilio-cli/flex/plugins.json, the file the CLI uses to
find known plugins and their working directories.

Key features:
- Lazy creation of an empty registry
- Registration of the current plugin
- Interactive directory update when a plugin has moved
- Preservation of unknown keys on rewrite

The file is read and rewritten in full on every mutation. There is no file
locking: concurrent runs against the same registry are last-writer-wins.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flexcheck.errors import RegistryError
from flexcheck.fs import FileSystem, FileSystemError

Confirm = Callable[[str, bool], Awaitable[bool]]


@dataclass
class RegistryEntry:
    """
    A known plugin.

    Attributes:
        name: Plugin name (unique within the registry)
        directory: Plugin working directory
        port: Dev-server port (0 when not assigned)
        extra: Unknown keys read from disk, written back unchanged
    """

    name: str
    directory: str
    port: int = 0
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RegistryEntry":
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise RegistryError(f"Invalid plugin entry: {data!r}")

        extra = {k: v for k, v in data.items() if k not in ("name", "dir", "port")}
        return cls(
            name=data["name"],
            directory=str(data.get("dir", "")),
            port=data.get("port", 0),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "dir": self.directory, "port": self.port, **self.extra}


@dataclass
class PluginRegistryFile:
    """
    The whole registry document.

    Attributes:
        plugins: Entries in file order
        extra: Unknown top-level keys, written back unchanged
    """

    plugins: list[RegistryEntry] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "PluginRegistryFile":
        if not isinstance(data, dict) or not isinstance(data.get("plugins"), list):
            raise RegistryError("Registry file must contain a 'plugins' list")

        extra = {k: v for k, v in data.items() if k != "plugins"}
        return cls(
            plugins=[RegistryEntry.from_dict(p) for p in data["plugins"]],
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"plugins": [p.to_dict() for p in self.plugins], **self.extra}

    def find(self, name: str) -> RegistryEntry | None:
        for entry in self.plugins:
            if entry.name == name:
                return entry
        return None


class PluginRegistry:
    """
    JSON-backed registry of local plugins.

    Args:
        path: Registry file path
        fs: Filesystem collaborator
        confirm: Async prompt returning the user's yes/no answer
    """

    def __init__(self, path: Path, fs: FileSystem, confirm: Confirm):
        self.path = Path(path)
        self.fs = fs
        self.confirm = confirm

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty registry if the file is absent."""
        if self.fs.exists(self.path):
            return

        try:
            self.fs.mkdirp(self.path.parent)
            self.fs.write_json(self.path, PluginRegistryFile().to_dict())
        except OSError as e:
            raise RegistryError(f"Failed to create registry {self.path}: {e}") from e

    def load(self) -> PluginRegistryFile:
        """
        Read the registry, creating it first if needed.

        Raises:
            RegistryError: If the file cannot be read or is malformed
        """
        self.ensure_exists()
        try:
            data = self.fs.read_json(self.path)
        except FileSystemError as e:
            raise RegistryError(str(e)) from e

        return PluginRegistryFile.from_dict(data)

    def save(self, registry: PluginRegistryFile) -> None:
        try:
            self.fs.write_json(self.path, registry.to_dict())
        except OSError as e:
            raise RegistryError(f"Failed to write registry {self.path}: {e}") from e

    def list_plugins(self) -> list[RegistryEntry]:
        return self.load().plugins

    async def reconcile(self, name: str, directory: Path | str) -> bool:
        """
        Make sure the registry points name at directory.

        Args:
            name: Current plugin name
            directory: Current plugin directory

        Returns:
            True if the registry file was written
        """
        directory = str(directory)
        registry = self.load()
        entry = registry.find(name)

        if entry is None:
            registry.plugins.append(RegistryEntry(name=name, directory=directory))
            self.save(registry)
            return True

        if entry.directory == directory:
            return False

        question = (
            f"You already have a plugin called {entry.name} in the local Flex "
            f"configuration file, but it is located at {entry.directory}. "
            f"Do you want to update the directory path to {directory}?"
        )
        if not await self.confirm(question, True):
            return False

        entry.directory = directory
        self.save(registry)
        return True
