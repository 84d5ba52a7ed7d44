"""Reference site setup.

This module provides the host interface to a WordPress install, its
WP-CLI implementation, the setup configuration, and the setup steps.
"""

from refctl.site.config import SiteConfig, SiteConfigError, load_site_config
from refctl.site.host import SiteHost, SiteHostError
from refctl.site.setup import ReferenceSetup, SetupReport, SetupStep, StepStatus
from refctl.site.wpcli import WpCliHost

__all__ = [
    "ReferenceSetup",
    "SetupReport",
    "SetupStep",
    "SiteConfig",
    "SiteConfigError",
    "SiteHost",
    "SiteHostError",
    "StepStatus",
    "WpCliHost",
    "load_site_config",
]
