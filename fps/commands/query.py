"""
fps query command (-Q).

List plugins in the local registry.
"""

from pathlib import Path
from typing import Any

from flexcheck.config.paths import CLIPaths
from flexcheck.fs import FileSystem
from flexcheck.prompt import accept_default
from flexcheck.registry import PluginRegistry


def query_command(args: Any, home: Path | None = None) -> int:
    """
    Print registered plugins, one per line.

    Args:
        args: Parsed command-line arguments
        home: User home directory (defaults to Path.home())

    Returns:
        Exit code
    """
    cli_paths = CLIPaths.for_home(home or Path.home())
    registry = PluginRegistry(cli_paths.plugins_json, FileSystem(), accept_default)

    plugins = registry.list_plugins()
    if not plugins:
        if args.verbose:
            print(f"No plugins registered in {cli_paths.plugins_json}")
        return 0

    width = max(len(p.name) for p in plugins)
    for plugin in plugins:
        port = f" :{plugin.port}" if plugin.port else ""
        print(f"{plugin.name.ljust(width)}  {plugin.directory}{port}")

    return 0
