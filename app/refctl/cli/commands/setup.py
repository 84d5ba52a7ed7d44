"""Reference site setup commands.

Prepares a WordPress install for the code reference: static front
page, reference page, empty navigation menu, and default theme lookup.
All commands drive the site through WP-CLI.
"""

from pathlib import Path
from typing import Annotated

import typer

from refctl.site.config import SiteConfig, SiteConfigError, load_site_config
from refctl.site.host import SiteHostError
from refctl.site.setup import ReferenceSetup, SetupReport, StepStatus
from refctl.site.wpcli import WpCliHost
from refctl.utils.formatting import print_error, print_line, print_success, print_warning

app = typer.Typer(
    help="Prepare a WordPress install to host the code reference.",
    invoke_without_command=True,
    no_args_is_help=True,
)

PathOption = Annotated[
    str | None,
    typer.Option("--path", "-p", help="WordPress root directory (passed to wp --path)."),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Site config TOML file."),
]


@app.command()
def pages(ctx: typer.Context, wp_path: PathOption = None, config_path: ConfigOption = None) -> None:
    """Create the static front page and the reference page."""
    setup = _build_setup(wp_path, config_path)
    try:
        report = setup.create_pages()
    except SiteHostError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _print_report(report, quiet=_is_quiet(ctx))


@app.command("nav-menu")
def nav_menu(
    ctx: typer.Context, wp_path: PathOption = None, config_path: ConfigOption = None
) -> None:
    """Create the empty navigation menu and bind it to its location."""
    setup = _build_setup(wp_path, config_path)
    try:
        report = setup.create_nav_menu()
    except SiteHostError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    _print_report(report, quiet=_is_quiet(ctx))


@app.command()
def theme(wp_path: PathOption = None, config_path: ConfigOption = None) -> None:
    """Print the install's default theme."""
    setup = _build_setup(wp_path, config_path)
    try:
        name = setup.default_theme()
    except SiteHostError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    print_line(name)


# === Private helper functions ===


def _build_setup(wp_path: str | None, config_path: Path | None) -> ReferenceSetup:
    """Load site config and wire a WP-CLI host, exiting on config errors."""
    try:
        config = load_site_config(config_path)
    except SiteConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if wp_path is not None:
        config = SiteConfig.model_validate({**config.model_dump(), "wp_path": wp_path})

    host = WpCliHost(wp_path=config.wp_path, binary=config.wp_binary)
    if not host.is_available():
        print_error(f"WP-CLI executable not found: {config.wp_binary}")
        raise typer.Exit(code=1)
    return ReferenceSetup(host, config)


def _is_quiet(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("quiet", False))


def _print_report(report: SetupReport, *, quiet: bool = False) -> None:
    """Print one line per step and the final success marker."""
    for step in report.steps:
        if step.status == StepStatus.FAILED:
            print_warning(step.message)
        elif not quiet:
            print_line(step.message)

    if report.success_message:
        print_success(f"Success: {report.success_message}")
