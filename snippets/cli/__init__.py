"""Snippets command-line interface.

Built with Click and Rich. The CLI reads configuration and environment
variables, then hands an explicit storage specifier to the storage layer.
"""

from snippets.cli.main import cli

__all__ = ["cli"]
