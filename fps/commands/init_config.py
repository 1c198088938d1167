"""
fps init-config command (--init-config).

Write a commented preflight.toml into the project.
"""

from pathlib import Path
from typing import Any

from flexcheck.config.settings import write_default_settings


def init_config_command(args: Any) -> int:
    path = write_default_settings(Path(args.dir), overwrite=args.force)
    print(f"Wrote {path}")
    return 0
