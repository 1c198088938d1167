"""
Preflight Pipeline.

This module runs the preflight checks in a fixed order before a plugin is
built or started.

Order:
1. app-config            public/appConfig.js exists
2. public-dir            bundled index.html copied into public/
3. dependency-versions   installed React matches Flex UI
4. plugin-count          src/index loads exactly one plugin
5. typescript            TypeScript toolchain and tsconfig.json present
6. plugin-registry       local registry points at this project

The first failing check stops the run. Warnings are printed and the run
continues. Mutations already applied (registry writes, copied templates)
are not rolled back.
"""

import inspect
from collections.abc import Awaitable, Callable
from enum import Enum

from flexcheck.checks import CheckResult
from flexcheck.checks.app import check_app_config, sync_public_dir
from flexcheck.checks.plugin_count import PluginCountValidator
from flexcheck.checks.typescript import TypeScriptProjectValidator
from flexcheck.checks.versions import (
    PackageDescriptor,
    VersionComparator,
    installed_version_reader,
)
from flexcheck.config import ValidationContext
from flexcheck.errors import ConfigurationMissing
from flexcheck.fs import FileSystem, FileSystemError
from flexcheck.prints import Reporter
from flexcheck.prompt import confirm as prompt_confirm
from flexcheck.registry import Confirm, PluginRegistry

Step = Callable[[], CheckResult | Awaitable[CheckResult]]


class PipelineState(Enum):
    """Pipeline state enumeration."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class ValidationPipeline:
    """
    Runs every preflight check for one project.

    Args:
        context: Read-only run context
        fs: Filesystem collaborator
        reporter: Print sink
        confirm: Async yes/no prompt used by the registry step
    """

    def __init__(
        self,
        context: ValidationContext,
        fs: FileSystem | None = None,
        reporter: Reporter | None = None,
        confirm: Confirm | None = None,
    ):
        self.context = context
        self.fs = fs or FileSystem()
        self.reporter = reporter or Reporter()
        self.registry = PluginRegistry(
            context.cli_paths.plugins_json, self.fs, confirm or prompt_confirm
        )

        self.state = PipelineState.PENDING
        self.current_step: str | None = None
        self.results: list[CheckResult] = []

    def steps(self) -> list[tuple[str, Step]]:
        return [
            ("app-config", self.check_app_config),
            ("public-dir", self.sync_public_dir),
            ("dependency-versions", self.check_dependency_versions),
            ("plugin-count", self.check_plugin_count),
            ("typescript", self.validate_typescript),
            ("plugin-registry", self.reconcile_registry),
        ]

    def check_app_config(self) -> CheckResult:
        return check_app_config(self.fs, self.context.paths.app_config)

    def sync_public_dir(self) -> CheckResult:
        return sync_public_dir(
            self.fs,
            self.context.templates.index_html,
            self.context.paths.index_html,
            self.context.allow_skip,
        )

    def check_dependency_versions(self) -> CheckResult:
        paths = self.context.paths
        try:
            flex_ui = PackageDescriptor.from_manifest(
                self.fs.read_json(paths.flex_ui_package_json)
            )
        except FileSystemError:
            return CheckResult(
                step="dependency-versions",
                failure=ConfigurationMissing(
                    paths.flex_ui_package_json, "Run npm install to install Flex UI"
                ),
            )

        comparator = VersionComparator(
            installed_version_reader(self.fs, paths.node_modules)
        )
        return comparator.verify(
            flex_ui,
            self.context.packages_to_verify,
            self.context.allow_skip,
            self.context.allow_unbundled_react,
        )

    def check_plugin_count(self) -> CheckResult:
        return PluginCountValidator(self.fs, self.context.paths.src_index).validate()

    def validate_typescript(self) -> CheckResult:
        paths = self.context.paths
        validator = TypeScriptProjectValidator(
            self.fs,
            paths.dir,
            paths.node_modules,
            paths.ts_config,
            self.context.templates.ts_config,
        )
        return validator.validate()

    async def reconcile_registry(self) -> CheckResult:
        result = CheckResult(step="plugin-registry")
        written = await self.registry.reconcile(
            self.context.plugin_name, self.context.plugin_dir
        )
        if written:
            self.reporter.debug(
                f"Updated {self.registry.path} for {self.context.plugin_name}"
            )
        return result

    async def run(self) -> int:
        """
        Run all checks in order.

        Returns:
            0 if every check passed, 1 on the first failure

        Raises:
            PreflightError: For setup errors that are not check failures
                (no entry file, unreadable registry)
        """
        self.state = PipelineState.RUNNING
        self.reporter.debug(f"Checking Flex plugin project directory {self.context.plugin_dir}")

        try:
            for name, step in self.steps():
                self.current_step = name
                self.reporter.debug(f"Running preflight check: {name}")

                result = step()
                if inspect.isawaitable(result):
                    result = await result
                self.results.append(result)

                for notice in result.notices:
                    self.reporter.notice(notice)
                for warning in result.warnings:
                    self.reporter.warning(warning)

                if not result.passed:
                    self.reporter.error(result.failure)
                    self.state = PipelineState.ABORTED
                    return 1
        except Exception:
            self.state = PipelineState.ABORTED
            raise

        self.current_step = None
        self.state = PipelineState.COMPLETED
        return 0
