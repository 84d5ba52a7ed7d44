"""Site setup configuration.

Names, templates and defaults used when preparing the reference site.
Every field has a default, so the configuration file is optional.

Configuration is stored in ~/.config/refctl/site.toml
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from refctl.core.paths import get_site_config_path

# Theme used when the install doesn't define WP_DEFAULT_THEME.
FALLBACK_THEME = "twentyfourteen"

# Post meta key WordPress stores the page template under.
PAGE_TEMPLATE_META_KEY = "_wp_page_template"


class SiteConfig(BaseModel):
    """Configuration for the reference site setup commands.

    Attributes:
        wp_path: WordPress root passed to WP-CLI (None = current directory).
        wp_binary: WP-CLI executable name or path.
        front_page_title: Title of the static front page.
        reference_page_title: Title (and slug) of the reference landing page.
        front_page_template: Page template assigned to the front page.
        reference_page_template: Page template assigned to the reference page.
        menu_name: Name of the empty navigation menu.
        menu_location: Theme menu location the menu is bound to.
        post_author: User id that owns created pages.
        fallback_theme: Theme reported when no default theme is configured.
    """

    model_config = ConfigDict(extra="forbid")

    wp_path: Annotated[
        str | None,
        Field(description="WordPress root passed to wp --path"),
    ] = None
    wp_binary: Annotated[
        str,
        Field(min_length=1, description="WP-CLI executable"),
    ] = "wp"
    front_page_title: Annotated[str, Field(min_length=1)] = "Front Page"
    reference_page_title: Annotated[str, Field(min_length=1)] = "reference"
    front_page_template: Annotated[str, Field(min_length=1)] = "page-home-landing.php"
    reference_page_template: Annotated[str, Field(min_length=1)] = "page-reference-landing.php"
    menu_name: Annotated[str, Field(min_length=1)] = "Empty Menu"
    menu_location: Annotated[str, Field(min_length=1)] = "devhub-menu"
    post_author: Annotated[int, Field(ge=1)] = 1
    fallback_theme: Annotated[str, Field(min_length=1)] = FALLBACK_THEME


class SiteConfigError(Exception):
    """Raised when the site configuration cannot be read or validated."""


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load site configuration from a TOML file.

    A missing file at the default location yields the defaults. A missing
    file at an explicitly given path is an error.

    Args:
        path: Path to the config file. If None, uses the default site config path.

    Returns:
        Validated SiteConfig object.

    Raises:
        SiteConfigError: If the file is missing (explicit path only),
            unreadable, not valid TOML, or doesn't match the schema.
    """
    config_path = path or get_site_config_path()

    if not config_path.exists():
        if path is not None:
            raise SiteConfigError(f"Site config not found: {config_path}")
        return SiteConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SiteConfigError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SiteConfigError(f"Failed to read site config: {e}") from e

    try:
        return SiteConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SiteConfigError(f"Invalid site config content: {e}") from e
