"""
flexcheck - Preflight validation for Flex plugin projects.

Checks a plugin project before it is built or started and keeps the local
plugin registry in sync.
"""

__version__ = "0.1.0"

from flexcheck.config import ValidationContext
from flexcheck.errors import PreflightError
from flexcheck.pipeline import PipelineState, ValidationPipeline

__all__ = [
    "__version__",
    "PipelineState",
    "PreflightError",
    "ValidationContext",
    "ValidationPipeline",
]
