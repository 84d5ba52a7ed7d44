"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory.

    Keeps a developer's own ~/.config/refctl files out of every test.
    """
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


# Relative paths of a trimmed-down WordPress checkout
WORDPRESS_FILES: tuple[str, ...] = (
    "index.php",
    "wp-admin/index.php",
    "wp-admin/css/colors/blue/colors.css",
    "wp-admin/includes/class-pclzip.php",
    "wp-admin/includes/post.php",
    "wp-admin/js/post.js",
    "wp-content/index.php",
    "wp-content/plugins/akismet/akismet.php",
    "wp-content/plugins/hello.php",
    "wp-content/themes/twentyfourteen/functions.php",
    "wp-content/themes/twentyfourteen/style.css",
    "wp-includes/ID3/getid3.php",
    "wp-includes/class-phpmailer.php",
    "wp-includes/class-pop3.php",
    "wp-includes/js/tinymce/wp-tinymce.php",
    "wp-includes/post.php",
)


@pytest.fixture
def wordpress_root(tmp_path: Path) -> Path:
    """A small WordPress checkout on disk."""
    root = tmp_path / "wordpress"
    for relative in WORDPRESS_FILES:
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("<?php\n")
    return root
