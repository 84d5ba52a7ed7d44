"""Unit tests for reference site setup commands.

Tests for the refctl setup pages, nav-menu and theme commands.
"""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from refctl.cli.main import app
from refctl.site.host import SiteHostError
from refctl.site.setup import SetupReport, SetupStep, StepStatus

runner = CliRunner()


def _report(*steps: tuple[StepStatus, str], success: str | None = None) -> SetupReport:
    return SetupReport(
        steps=[SetupStep(status=status, message=message) for status, message in steps],
        success_message=success,
    )


@pytest.fixture
def mock_host_class() -> Iterator[MagicMock]:
    """Patch WpCliHost with an available mock host."""
    with patch("refctl.cli.commands.setup.WpCliHost") as host_class:
        host_class.return_value.is_available.return_value = True
        yield host_class


@pytest.fixture
def mock_setup(mock_host_class: MagicMock) -> Iterator[MagicMock]:
    """Patch ReferenceSetup and return the instance mock."""
    with patch("refctl.cli.commands.setup.ReferenceSetup") as setup_class:
        yield setup_class.return_value


class TestSetupPages:
    """Tests for refctl setup pages."""

    def test_created(self, mock_setup: MagicMock) -> None:
        mock_setup.create_pages.return_value = _report(
            (StepStatus.CREATED, "Created static front page 11"),
            (StepStatus.EXISTS, "Reference page exists."),
            success="Done creating pages.",
        )

        result = runner.invoke(app, ["setup", "pages"])

        assert result.exit_code == 0
        assert "Created static front page 11" in result.stdout
        assert "Reference page exists." in result.stdout
        assert "Success: Done creating pages." in result.stdout

    def test_failure_reported_not_fatal(self, mock_setup: MagicMock) -> None:
        mock_setup.create_pages.return_value = _report(
            (StepStatus.FAILED, "Could not create static front page"),
            success="Done creating pages.",
        )

        result = runner.invoke(app, ["setup", "pages"])

        assert result.exit_code == 0
        assert "Could not create static front page" in result.output
        assert "Success: Done creating pages." in result.output

    def test_quiet_hides_progress(self, mock_setup: MagicMock) -> None:
        mock_setup.create_pages.return_value = _report(
            (StepStatus.CREATED, "Created reference page 12"),
            success="Done creating pages.",
        )

        result = runner.invoke(app, ["--quiet", "setup", "pages"])

        assert result.exit_code == 0
        assert "Created reference page 12" not in result.stdout
        assert "Success: Done creating pages." in result.stdout

    def test_host_error(self, mock_setup: MagicMock) -> None:
        mock_setup.create_pages.side_effect = SiteHostError("WP-CLI timed out after 120s")

        result = runner.invoke(app, ["setup", "pages"])

        assert result.exit_code == 1
        assert "timed out" in result.output

    def test_path_option(self, mock_host_class: MagicMock, mock_setup: MagicMock) -> None:
        mock_setup.create_pages.return_value = _report(success="Done creating pages.")

        runner.invoke(app, ["setup", "pages", "--path", "/srv/wp"])

        mock_host_class.assert_called_once_with(wp_path="/srv/wp", binary="wp")

    def test_config_option(
        self, tmp_path: Path, mock_host_class: MagicMock, mock_setup: MagicMock
    ) -> None:
        mock_setup.create_pages.return_value = _report(success="Done creating pages.")
        config = tmp_path / "site.toml"
        config.write_text('wp_path = "/var/www"\nwp_binary = "wp-cli"\n')

        result = runner.invoke(app, ["setup", "pages", "--config", str(config)])

        assert result.exit_code == 0
        mock_host_class.assert_called_once_with(wp_path="/var/www", binary="wp-cli")

    def test_invalid_config(self, tmp_path: Path, mock_setup: MagicMock) -> None:
        config = tmp_path / "site.toml"
        config.write_text("unknown = 1\n")

        result = runner.invoke(app, ["setup", "pages", "--config", str(config)])

        assert result.exit_code == 1
        assert "Invalid site config" in result.output
        mock_setup.create_pages.assert_not_called()

    def test_wp_cli_missing(self, mock_host_class: MagicMock) -> None:
        mock_host_class.return_value.is_available.return_value = False

        result = runner.invoke(app, ["setup", "pages"])

        assert result.exit_code == 1
        assert "WP-CLI executable not found" in result.output


class TestSetupNavMenu:
    """Tests for refctl setup nav-menu."""

    def test_created(self, mock_setup: MagicMock) -> None:
        mock_setup.create_nav_menu.return_value = _report(
            (StepStatus.CREATED, "Created nav menu 9"),
            success="Done creating nav menu.",
        )

        result = runner.invoke(app, ["setup", "nav-menu"])

        assert result.exit_code == 0
        assert "Created nav menu 9" in result.stdout
        assert "Success: Done creating nav menu." in result.stdout

    def test_exists_has_no_success_marker(self, mock_setup: MagicMock) -> None:
        mock_setup.create_nav_menu.return_value = _report((StepStatus.EXISTS, "Nav menu exists."))

        result = runner.invoke(app, ["setup", "nav-menu"])

        assert result.exit_code == 0
        assert "Nav menu exists." in result.stdout
        assert "Success" not in result.stdout


class TestSetupTheme:
    """Tests for refctl setup theme."""

    def test_prints_theme(self, mock_setup: MagicMock) -> None:
        mock_setup.default_theme.return_value = "twentyfourteen"

        result = runner.invoke(app, ["setup", "theme"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "twentyfourteen"

    def test_end_to_end_fallback(self, mock_host_class: MagicMock) -> None:
        """Without WP_DEFAULT_THEME the configured fallback is printed."""
        mock_host_class.return_value.get_default_theme.return_value = None

        result = runner.invoke(app, ["setup", "theme"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "twentyfourteen"
