"""CLI commands for refctl.

This package contains all subcommand implementations.
"""

from refctl.cli.commands import files, setup

__all__ = ["files", "setup"]
