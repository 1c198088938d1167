"""
fps check command (-C).

Run preflight checks for a plugin project before build or start.
"""

import asyncio
import os
from pathlib import Path
from typing import Any

from flexcheck.config import ValidationContext
from flexcheck.pipeline import ValidationPipeline
from flexcheck.prints import Reporter
from flexcheck.prompt import accept_default, confirm


def check_command(args: Any) -> int:
    """
    Execute preflight checks.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every check passed, 1 otherwise)
    """
    context = ValidationContext.from_environment(Path(args.dir), os.environ)
    pipeline = ValidationPipeline(
        context,
        reporter=Reporter(verbose=args.verbose),
        confirm=accept_default if args.noconfirm else confirm,
    )

    return asyncio.run(pipeline.run())
