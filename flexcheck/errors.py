"""
Preflight Error Taxonomy.

Every diagnostic the preflight checks can produce is a PreflightError
subclass. Validators return these as data inside a CheckResult; only a few
(NoEntryFile, RegistryError) are raised because they indicate a broken
setup rather than a failed check.
"""


class PreflightError(Exception):
    """Base exception for preflight errors."""

    code = "preflight_error"


class ConfigurationMissing(PreflightError):
    """Raised when a required project file is absent."""

    code = "configuration_missing"

    def __init__(self, path, hint: str = ""):
        self.path = path
        message = f"Required file not found: {path}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class FileSyncFailure(PreflightError):
    """Raised when a public asset could not be copied into the project."""

    code = "file_sync_failure"

    def __init__(self, source, target, reason: str, allow_skip: bool = False):
        self.source = source
        self.target = target
        self.allow_skip = allow_skip
        message = f"Failed to copy {source} to {target}: {reason}"
        if allow_skip:
            message += " (SKIP_PREFLIGHT_CHECK does not apply to this check)"
        super().__init__(message)


class DependencyNotFound(PreflightError):
    """Raised when the host package does not declare an expected dependency."""

    code = "dependency_not_found"

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Expected package '{name}' was not found in the Flex UI dependencies"
        )


class VersionMismatch(PreflightError):
    """Raised when an installed dependency differs from the declared one."""

    code = "version_mismatch"

    def __init__(self, name: str, installed: str | None, required: str):
        self.name = name
        self.installed = installed
        self.required = required
        super().__init__(
            f"The project depends on {name}@{installed or 'missing'}, "
            f"but Flex UI requires {name}@{required}. "
            f"Set SKIP_PREFLIGHT_CHECK=true to ignore this check"
        )


class UnbundledReactMismatch(PreflightError):
    """Raised when unbundled React is requested on a Flex UI that lacks support."""

    code = "unbundled_react_mismatch"

    def __init__(self, flex_ui_version: str, name: str, installed: str | None):
        self.flex_ui_version = flex_ui_version
        self.name = name
        self.installed = installed
        super().__init__(
            f"Unbundled React requires Flex UI >=1.19.0, but {flex_ui_version} "
            f"is installed and the project depends on {name}@{installed or 'missing'}"
        )


class ToolchainNotInstalled(PreflightError):
    """Raised when TypeScript sources exist but the compiler is not installed."""

    code = "toolchain_not_installed"

    def __init__(self, module: str = "typescript"):
        self.module = module
        super().__init__(
            f"The project contains TypeScript files but '{module}' is not installed. "
            f"Install it with: npm install --save-dev {module}"
        )


class NoEntryFile(PreflightError):
    """Raised when the project has no src/index entry file."""

    code = "no_entry_file"

    def __init__(self, base_path, extensions: tuple[str, ...]):
        self.base_path = base_path
        self.extensions = extensions
        super().__init__(
            f"No index file was found in your src directory "
            f"(tried {base_path}.{{{','.join(extensions)}}})"
        )


class PluginLoadCountError(PreflightError):
    """Raised when the entry file registers zero or several plugins."""

    code = "plugin_load_count_error"

    def __init__(self, count: int):
        self.count = count
        if count == 0:
            message = "No plugin was loaded: src/index must call loadPlugin exactly once"
        else:
            message = (
                f"Found {count} loadPlugin calls: a plugin bundle can only load "
                f"one plugin"
            )
        super().__init__(message)


class RegistryError(PreflightError):
    """Raised when the local plugin registry cannot be read or written."""

    code = "registry_error"
