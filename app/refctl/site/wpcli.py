"""WP-CLI backed site host.

Implements SiteHost by running the ``wp`` executable against a
WordPress install. Each call is one WP-CLI invocation; a failing
invocation is logged and reported through the return value.
"""

import json
import logging
import subprocess

from refctl.site.host import SiteHost, SiteHostError
from refctl.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

_PAGE_TEMPLATES_PHP = "echo wp_json_encode( wp_get_theme()->get_page_templates() );"
_DEFAULT_THEME_PHP = "echo defined( 'WP_DEFAULT_THEME' ) ? WP_DEFAULT_THEME : '';"


class WpCliHost(SiteHost):
    """SiteHost implementation driving WP-CLI.

    Args:
        wp_path: WordPress root passed as --path. None runs WP-CLI in the
            current directory.
        binary: WP-CLI executable name or path.
    """

    # Timeout for a single WP-CLI invocation
    _WP_TIMEOUT: float = 120.0

    def __init__(self, wp_path: str | None = None, binary: str = "wp") -> None:
        self._wp_path = wp_path
        self._binary = binary

    def is_available(self) -> bool:
        """Check if the WP-CLI executable is available."""
        return command_exists(self._binary)

    # === Options ===

    def get_option(self, name: str) -> str | None:
        result = self._wp("option", "get", name)
        return result.stdout.rstrip("\n") if result.success else None

    def update_option(self, name: str, value: str) -> bool:
        return self._wp("option", "update", name, value).success

    # === Posts ===

    def insert_post(
        self,
        *,
        title: str,
        status: str,
        author: int,
        post_type: str,
    ) -> int | None:
        result = self._wp(
            "post",
            "create",
            f"--post_title={title}",
            f"--post_status={status}",
            f"--post_author={author}",
            f"--post_type={post_type}",
            "--porcelain",
        )
        return _parse_id(result)

    def get_post_title(self, post_id: int) -> str | None:
        result = self._wp("post", "get", str(post_id), "--field=post_title")
        return result.stdout.rstrip("\n") if result.success else None

    def get_post_meta(self, post_id: int, key: str) -> str | None:
        result = self._wp("post", "meta", "get", str(post_id), key)
        if not result.success:
            return None
        return result.stdout.rstrip("\n") or None

    def update_post_meta(self, post_id: int, key: str, value: str) -> bool:
        return self._wp("post", "meta", "update", str(post_id), key, value).success

    def find_posts(self, post_type: str, name: str, limit: int = 1) -> list[int]:
        result = self._wp(
            "post",
            "list",
            f"--post_type={post_type}",
            f"--name={name}",
            f"--posts_per_page={limit}",
            "--format=ids",
        )
        if not result.success:
            return []
        return [int(token) for token in result.stdout.split() if token.isdigit()]

    # === Navigation menus ===

    def nav_menu_exists(self, name: str) -> bool:
        return any(
            name in (menu.get("name"), menu.get("slug"), str(menu.get("term_id")))
            for menu in self._list_menus()
        )

    def create_nav_menu(self, name: str) -> int | None:
        return _parse_id(self._wp("menu", "create", name, "--porcelain"))

    def has_nav_menu(self, location: str) -> bool:
        return any(location in (menu.get("locations") or []) for menu in self._list_menus())

    def assign_nav_menu(self, menu_id: int, location: str) -> bool:
        return self._wp("menu", "location", "assign", str(menu_id), location).success

    # === Theme ===

    def get_page_templates(self) -> dict[str, str]:
        result = self._wp("eval", _PAGE_TEMPLATES_PHP)
        if not result.success:
            return {}
        try:
            data = json.loads(result.stdout or "{}")
        except json.JSONDecodeError as e:
            logger.warning("Unexpected page template output from wp: %s", e)
            return {}
        # PHP encodes an empty array as a JSON list
        if not isinstance(data, dict):
            return {}
        return {str(key): str(value) for key, value in data.items()}

    def get_default_theme(self) -> str | None:
        # Core defines the constant at load time when wp-config.php does not
        result = self._wp("eval", _DEFAULT_THEME_PHP)
        if not result.success:
            return None
        return result.stdout.strip() or None

    # === Private helpers ===

    def _list_menus(self) -> list[dict[str, object]]:
        result = self._wp("menu", "list", "--format=json", "--fields=term_id,name,slug,locations")
        if not result.success:
            return []
        try:
            data = json.loads(result.stdout or "[]")
        except json.JSONDecodeError as e:
            logger.warning("Unexpected menu list output from wp: %s", e)
            return []
        return [menu for menu in data if isinstance(menu, dict)] if isinstance(data, list) else []

    def _wp(self, *args: str) -> CommandResult:
        """Run one WP-CLI command.

        Raises:
            SiteHostError: If WP-CLI cannot be executed at all.
        """
        command = [self._binary]
        if self._wp_path:
            command.append(f"--path={self._wp_path}")
        command.extend(args)

        logger.debug("Running: %s", " ".join(command))
        try:
            result = run_command(command, timeout=self._WP_TIMEOUT)
        except FileNotFoundError as e:
            raise SiteHostError(f"WP-CLI executable not found: {self._binary}") from e
        except subprocess.TimeoutExpired as e:
            raise SiteHostError(f"WP-CLI timed out after {self._WP_TIMEOUT:.0f}s") from e
        except OSError as e:
            raise SiteHostError(f"Failed to run WP-CLI: {e}") from e

        if not result.success:
            logger.debug("wp exited %d: %s", result.returncode, result.stderr.strip())
        return result


def _parse_id(result: CommandResult) -> int | None:
    """Parse an object id printed by a --porcelain command."""
    if not result.success:
        return None
    value = result.stdout.strip()
    if not value.isdigit():
        return None
    return int(value) or None
