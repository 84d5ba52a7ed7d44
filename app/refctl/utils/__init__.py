"""Utility modules for refctl.

This module exports commonly used utility functions.
"""

from refctl.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_line,
    print_success,
    print_warning,
)
from refctl.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_line",
    "print_success",
    "print_warning",
    "run_command",
]
