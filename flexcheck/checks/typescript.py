"""TypeScript project validation."""

from pathlib import Path

from flexcheck.checks import CheckResult
from flexcheck.errors import ToolchainNotInstalled
from flexcheck.fs import FileSystem

TYPESCRIPT_MODULE = "typescript"
TYPESCRIPT_SUFFIXES = (".ts", ".tsx")
DECLARATION_SUFFIX = ".d.ts"


class TypeScriptProjectValidator:
    """
    Ensures a project with TypeScript sources can be compiled.

    If the project has .ts/.tsx sources, the typescript module must be
    installed. A missing tsconfig.json is replaced by the bundled template.
    """

    def __init__(
        self,
        fs: FileSystem,
        app_dir: Path,
        node_modules: Path,
        ts_config: Path,
        ts_config_template: Path,
    ):
        self.fs = fs
        self.app_dir = app_dir
        self.node_modules = node_modules
        self.ts_config = ts_config
        self.ts_config_template = ts_config_template

    def has_typescript_files(self) -> bool:
        """Return True if any non-declaration .ts/.tsx file exists outside node_modules."""
        files = self.fs.find_files(
            self.app_dir,
            TYPESCRIPT_SUFFIXES,
            exclude_dirs=("node_modules",),
            exclude_suffixes=(DECLARATION_SUFFIX,),
        )
        return next(iter(files), None) is not None

    def validate(self) -> CheckResult:
        result = CheckResult(step="typescript")

        if not self.has_typescript_files():
            return result

        if self.fs.resolve_module(self.node_modules, TYPESCRIPT_MODULE) is None:
            result.failure = ToolchainNotInstalled(TYPESCRIPT_MODULE)
            return result

        if self.fs.exists(self.ts_config):
            return result

        self.fs.copy_file(self.ts_config_template, self.ts_config)
        result.notices.append("No tsconfig.json was found, creating a default one.")
        return result
