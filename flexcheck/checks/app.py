"""App config and public directory checks."""

from pathlib import Path

from flexcheck.checks import CheckResult
from flexcheck.errors import ConfigurationMissing, FileSyncFailure
from flexcheck.fs import FileSystem


def check_app_config(fs: FileSystem, app_config: Path) -> CheckResult:
    """Fail if public/appConfig.js is missing."""
    result = CheckResult(step="app-config")
    if not fs.exists(app_config):
        result.failure = ConfigurationMissing(
            app_config,
            "Copy public/appConfig.example.js to public/appConfig.js and update it",
        )
    return result


def sync_public_dir(
    fs: FileSystem, template: Path, target: Path, allow_skip: bool = False
) -> CheckResult:
    """
    Copy the bundled index.html into the project's public directory.

    A failed copy is fatal even when allow_skip is set.
    """
    result = CheckResult(step="public-dir")
    try:
        fs.copy_file(template, target)
    except OSError as e:
        result.failure = FileSyncFailure(template, target, str(e), allow_skip)
    return result
