"""XDG-compliant path management for refctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration storage.

XDG defaults:
- Config: ~/.config/refctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "refctl"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/refctl/ (or XDG_CONFIG_HOME/refctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_exclusions_path() -> Path:
    """Get the exclusion lists file path.

    Returns:
        Path to ~/.config/refctl/exclusions.toml.
    """
    return get_config_dir() / "exclusions.toml"


def get_site_config_path() -> Path:
    """Get the site setup configuration file path.

    Returns:
        Path to ~/.config/refctl/site.toml.
    """
    return get_config_dir() / "site.toml"


def get_user_theme_path() -> Path:
    """Get the user theme configuration path.

    Returns:
        Path to ~/.config/refctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"

