"""
Plugin Count Check.

A plugin bundle must load exactly one plugin. The entry file is scanned for
the registration call as plain text, so occurrences inside comments or
strings are counted too.
"""

from pathlib import Path

from flexcheck.checks import CheckResult
from flexcheck.config.paths import ENTRY_EXTENSIONS
from flexcheck.errors import NoEntryFile, PluginLoadCountError
from flexcheck.fs import FileSystem

LOAD_PLUGIN_MARKER = "loadPlugin"


def count_plugin_loads(content: str, marker: str = LOAD_PLUGIN_MARKER) -> int:
    """Count non-overlapping occurrences of the registration marker."""
    return content.count(marker)


class PluginCountValidator:
    """Checks that the entry file registers exactly one plugin."""

    def __init__(
        self,
        fs: FileSystem,
        src_index: Path,
        extensions: tuple[str, ...] = ENTRY_EXTENSIONS,
    ):
        self.fs = fs
        self.src_index = Path(src_index)
        self.extensions = extensions

    def find_entry_file(self) -> Path:
        """
        Find the entry file by probing extensions in order.

        Returns:
            Path of the first existing src/index.<ext>

        Raises:
            NoEntryFile: If no candidate exists
        """
        for ext in self.extensions:
            candidate = self.src_index.with_name(f"{self.src_index.name}.{ext}")
            if self.fs.exists(candidate):
                return candidate

        raise NoEntryFile(self.src_index, self.extensions)

    def validate(self) -> CheckResult:
        result = CheckResult(step="plugin-count")

        content = self.fs.read_text(self.find_entry_file())
        count = count_plugin_loads(content)
        if count != 1:
            result.failure = PluginLoadCountError(count)

        return result
