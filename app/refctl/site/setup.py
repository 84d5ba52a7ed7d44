"""Reference site setup steps.

Creates the static front page, the reference landing page and an empty
navigation menu, and looks up the default theme. Each step checks for
existing content first, so running a command twice is a no-op.

Steps never raise for "not created" outcomes. They are recorded in the
returned report and the remaining steps still run.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from refctl.site.config import PAGE_TEMPLATE_META_KEY, SiteConfig
from refctl.site.host import SiteHost

logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    """Outcome of a single setup step.

    Attributes:
        CREATED: The content was created.
        EXISTS: The content already existed; nothing was done.
        FAILED: The host did not create the content.
    """

    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SetupStep:
    """One reported line of a setup command."""

    status: StepStatus
    message: str


@dataclass(slots=True)
class SetupReport:
    """Ordered steps of a setup command plus its final success message.

    Attributes:
        steps: Reported steps in execution order.
        success_message: Final success marker, or None when the command
            stopped early.
    """

    steps: list[SetupStep] = field(default_factory=list)
    success_message: str | None = None

    def add(self, status: StepStatus, message: str) -> None:
        logger.debug("[%s] %s", status.value, message)
        self.steps.append(SetupStep(status=status, message=message))


class ReferenceSetup:
    """Prepares a WordPress install to host the code reference.

    Args:
        host: The WordPress install to operate on.
        config: Titles, templates and names to use.
    """

    def __init__(self, host: SiteHost, config: SiteConfig | None = None) -> None:
        self._host = host
        self._config = config or SiteConfig()

    def create_pages(self) -> SetupReport:
        """Create the static front page and the reference page.

        Returns:
            SetupReport with one step per page.
        """
        report = SetupReport()
        templates = self._host.get_page_templates()

        self._create_front_page(report, templates)
        self._create_reference_page(report, templates)

        report.success_message = "Done creating pages."
        return report

    def create_nav_menu(self) -> SetupReport:
        """Create the empty navigation menu and bind it to its location.

        Returns:
            SetupReport. When the menu already exists the report has no
            success message.
        """
        cfg = self._config
        report = SetupReport()

        if self._host.nav_menu_exists(cfg.menu_name):
            report.add(StepStatus.EXISTS, "Nav menu exists.")
            return report

        menu_id = self._host.create_nav_menu(cfg.menu_name)
        if menu_id:
            report.add(StepStatus.CREATED, f"Created nav menu {menu_id}")
            if not self._host.has_nav_menu(cfg.menu_location):
                if self._host.assign_nav_menu(menu_id, cfg.menu_location):
                    report.add(
                        StepStatus.CREATED,
                        f"Assigned nav menu {menu_id} to {cfg.menu_location}",
                    )
                else:
                    report.add(
                        StepStatus.FAILED,
                        f"Could not assign nav menu to {cfg.menu_location}",
                    )
        else:
            report.add(StepStatus.FAILED, "Could not create nav menu")

        report.success_message = "Done creating nav menu."
        return report

    def default_theme(self) -> str:
        """Return the install's default theme, falling back to the configured one."""
        return self._host.get_default_theme() or self._config.fallback_theme

    # === Private helpers ===

    def _front_page_in_place(self, templates: dict[str, str]) -> bool:
        """Check whether a titled front page with the landing template is set."""
        cfg = self._config
        if self._host.get_option("show_on_front") != "page":
            return False

        page_id = _to_id(self._host.get_option("page_on_front"))
        if page_id is None:
            return False

        is_front_page = self._host.get_post_title(page_id) == cfg.front_page_title
        template = self._host.get_post_meta(page_id, PAGE_TEMPLATE_META_KEY)
        has_template = cfg.front_page_template in templates and template == cfg.front_page_template
        return is_front_page and has_template

    def _create_front_page(self, report: SetupReport, templates: dict[str, str]) -> None:
        cfg = self._config
        if self._front_page_in_place(templates):
            report.add(StepStatus.EXISTS, "Front page exists")
            return

        page_id = self._insert_page(cfg.front_page_title)
        if not page_id:
            report.add(StepStatus.FAILED, "Could not create static front page")
            return

        self._host.update_option("page_on_front", str(page_id))
        self._host.update_option("show_on_front", "page")
        if cfg.front_page_template in templates:
            self._host.update_post_meta(page_id, PAGE_TEMPLATE_META_KEY, cfg.front_page_template)
        report.add(StepStatus.CREATED, f"Created static front page {page_id}")

    def _create_reference_page(self, report: SetupReport, templates: dict[str, str]) -> None:
        cfg = self._config
        if self._host.find_posts("page", cfg.reference_page_title, limit=1):
            report.add(StepStatus.EXISTS, "Reference page exists.")
            return

        page_id = self._insert_page(cfg.reference_page_title)
        if not page_id:
            report.add(StepStatus.FAILED, "Could not create reference page")
            return

        if cfg.reference_page_template in templates:
            self._host.update_post_meta(
                page_id, PAGE_TEMPLATE_META_KEY, cfg.reference_page_template
            )
        report.add(StepStatus.CREATED, f"Created reference page {page_id}")

    def _insert_page(self, title: str) -> int | None:
        return self._host.insert_post(
            title=title,
            status="publish",
            author=self._config.post_author,
            post_type="page",
        )


def _to_id(value: str | None) -> int | None:
    if value is None or not value.strip().isdigit():
        return None
    return int(value.strip()) or None
