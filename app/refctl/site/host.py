"""Abstract interface to the WordPress install being set up.

This module defines the SiteHost interface that the setup steps run
against. Only the handful of content operations the setup needs are
exposed; the host owns all storage and consistency.
"""

from abc import ABC, abstractmethod


class SiteHostError(Exception):
    """Raised when the host cannot be reached or used at all."""


class SiteHost(ABC):
    """Abstract base class for WordPress hosts.

    Methods that create content return the new object id, or None when
    the host did not create anything. They never raise for that case.

    Example:
        >>> host = WpCliHost(wp_path="/srv/wordpress")
        >>> if host.get_option("show_on_front") == "page":
        ...     print(host.get_option("page_on_front"))
    """

    @abstractmethod
    def get_option(self, name: str) -> str | None:
        """Read a site option, or None if it is not set."""

    @abstractmethod
    def update_option(self, name: str, value: str) -> bool:
        """Write a site option. Returns True on success."""

    @abstractmethod
    def insert_post(
        self,
        *,
        title: str,
        status: str,
        author: int,
        post_type: str,
    ) -> int | None:
        """Create a post and return its id, or None if creation failed."""

    @abstractmethod
    def get_post_title(self, post_id: int) -> str | None:
        """Return a post's title, or None if the post doesn't exist."""

    @abstractmethod
    def get_post_meta(self, post_id: int, key: str) -> str | None:
        """Read a single post meta value, or None if unset."""

    @abstractmethod
    def update_post_meta(self, post_id: int, key: str, value: str) -> bool:
        """Write a post meta value. Returns True on success."""

    @abstractmethod
    def find_posts(self, post_type: str, name: str, limit: int = 1) -> list[int]:
        """Return ids of posts of a type whose slug equals name."""

    @abstractmethod
    def nav_menu_exists(self, name: str) -> bool:
        """Check whether a navigation menu with this name or slug exists."""

    @abstractmethod
    def create_nav_menu(self, name: str) -> int | None:
        """Create a navigation menu and return its id, or None on failure."""

    @abstractmethod
    def has_nav_menu(self, location: str) -> bool:
        """Check whether a menu is assigned to a theme menu location."""

    @abstractmethod
    def assign_nav_menu(self, menu_id: int, location: str) -> bool:
        """Bind a menu to a theme menu location. Returns True on success."""

    @abstractmethod
    def get_page_templates(self) -> dict[str, str]:
        """Return the active theme's page templates (file name -> label)."""

    @abstractmethod
    def get_default_theme(self) -> str | None:
        """Return the configured default theme, or None if not configured."""
