"""CLI package for refctl.

This package contains the Typer application and all subcommands.
"""

from refctl.cli.main import app

__all__ = ["app"]
