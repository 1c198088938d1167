"""
Dependency Version Checks.

This module verifies that the packages a plugin installs match the versions
Flex UI declares for them.

Key features:
- Coercion of a version range to a concrete version ("^16.5.2" -> "16.5.2")
- Minimum-version test for the unbundled React support threshold
- Exact-match comparison of coerced declared and installed versions

Equality is deliberately strict: an installed version that satisfies the
declared range but is not the coerced value is still a mismatch.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from flexcheck.checks import CheckResult
from flexcheck.errors import (
    DependencyNotFound,
    UnbundledReactMismatch,
    VersionMismatch,
)
from flexcheck.fs import FileSystemError

UNBUNDLED_REACT_MIN_VERSION = "1.19.0"

_COERCE_RE = re.compile(r"(?<!\d)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")
_SEMVER_RE = re.compile(
    r"^v?(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.-]+))?(?:\+[0-9A-Za-z.-]+)?$"
)


@dataclass(frozen=True)
class PackageDescriptor:
    """
    The parts of a package.json the version check needs.

    Attributes:
        version: Package version
        dependencies: Dict of package name -> declared version range
    """

    version: str
    dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_manifest(cls, data: dict[str, Any]) -> "PackageDescriptor":
        return cls(
            version=str(data.get("version", "")),
            dependencies=dict(data.get("dependencies") or {}),
        )


def coerce(version_range: str) -> str | None:
    """
    Extract a concrete version from a version range.

    The first run of up to three dot-separated numbers is used and missing
    components are filled with zeros.

    Args:
        version_range: Range expression (e.g. "^16.5.2", "~16", ">=1.2 <2")

    Returns:
        Version string "major.minor.patch", or None if no number is present
    """
    match = _COERCE_RE.search(version_range or "")
    if not match:
        return None

    major, minor, patch = match.groups()
    return f"{int(major)}.{int(minor or 0)}.{int(patch or 0)}"


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two version strings.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2, 0 if v1 == v2, 1 if v1 > v2
    """
    parts1 = [int(x) for x in v1.split(".")]
    parts2 = [int(x) for x in v2.split(".")]

    # Pad shorter version with zeros
    max_len = max(len(parts1), len(parts2))
    parts1.extend([0] * (max_len - len(parts1)))
    parts2.extend([0] * (max_len - len(parts2)))

    for p1, p2 in zip(parts1, parts2, strict=True):
        if p1 < p2:
            return -1
        elif p1 > p2:
            return 1
    return 0


def satisfies_minimum(version: str, minimum: str) -> bool:
    """
    Check whether a version is >= minimum.

    Pre-release versions never satisfy, and neither do unparseable ones.
    """
    match = _SEMVER_RE.match((version or "").strip())
    if not match or match.group(4):
        return False

    return compare_versions(".".join(match.groups()[:3]), minimum) >= 0


class VersionComparator:
    """
    Compares Flex UI's declared dependency versions with installed ones.

    Args:
        installed_version: Callable returning the installed version of a
            package, or None if it is not installed
    """

    def __init__(self, installed_version: Callable[[str], str | None]):
        self._installed_version = installed_version

    def verify(
        self,
        flex_ui: PackageDescriptor,
        names: list[str] | tuple[str, ...],
        allow_skip: bool,
        allow_unbundled_react: bool,
    ) -> CheckResult:
        """
        Verify each package in names.

        Args:
            flex_ui: The Flex UI package descriptor
            names: Packages to verify, in order
            allow_skip: Turn mismatches into warnings
            allow_unbundled_react: Tolerate mismatches on Flex UI >=1.19.0

        Returns:
            CheckResult; a missing declaration always fails, mismatches fail
            unless allow_skip is set
        """
        result = CheckResult(step="dependency-versions")
        supports_unbundled = satisfies_minimum(
            flex_ui.version, UNBUNDLED_REACT_MIN_VERSION
        )

        for name in names:
            declared = flex_ui.dependencies.get(name)
            if not declared:
                result.failure = DependencyNotFound(name)
                return result

            required = coerce(declared) or declared
            installed = self._installed_version(name)

            if required == installed:
                continue

            if allow_unbundled_react:
                if supports_unbundled:
                    continue
                signal = UnbundledReactMismatch(flex_ui.version, name, installed)
            else:
                signal = VersionMismatch(name, installed, required)

            if not allow_skip:
                result.failure = signal
                return result

            result.warnings.append(signal)

        return result


def installed_version_reader(fs, node_modules) -> Callable[[str], str | None]:
    """Return a reader of installed package versions from node_modules."""

    def read(name: str) -> str | None:
        manifest = fs.resolve_module(node_modules, name)
        if manifest is None:
            return None
        try:
            return fs.read_json(manifest).get("version")
        except (FileSystemError, AttributeError):
            return None

    return read
