"""
Preflight Checks - individual project validations.

Each check returns a CheckResult instead of exiting; the pipeline decides
what a failure means for the run.
"""

from dataclasses import dataclass, field

from flexcheck.errors import PreflightError


@dataclass
class CheckResult:
    """
    Outcome of a single check.

    Attributes:
        step: Name of the check that produced this result
        failure: Fatal error, or None if the check passed
        warnings: Non-fatal errors (e.g. skipped version mismatches)
        notices: Informational messages (e.g. a file was created)
    """

    step: str
    failure: PreflightError | None = None
    warnings: list[PreflightError] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.failure is None


__all__ = ["CheckResult"]
