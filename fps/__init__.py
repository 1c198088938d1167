"""
fps - Flex plugin scripts command-line tool.

Runs preflight checks and inspects the local plugin registry.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
