"""
Diagnostic Output.

Reporter is the print sink every user-visible message goes through.
Streams are injectable so tests can capture output.
"""

import sys
from typing import TextIO

from flexcheck.errors import PreflightError


class Reporter:
    """Prints errors, warnings, notices and debug lines."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        verbose: bool = False,
    ):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.verbose = verbose

    def error(self, error: PreflightError | str) -> None:
        print(f"Error: {error}", file=self.err)

    def warning(self, warning: PreflightError | str) -> None:
        print(f"Warning: {warning}", file=self.err)

    def notice(self, message: str) -> None:
        print(message, file=self.out)

    def debug(self, message: str) -> None:
        if self.verbose:
            print(message, file=self.out)
