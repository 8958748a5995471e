"""CLI principal (Typer).

Por qué aquí solo orquestación:
- La CLI parsea flags, construye la configuración una vez y decide el orden
  de los pipelines.
- Todo lo que genera ficheros vive en `core.services`.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.http_client import build_client
from cli import doctor
from cli.ui_components import ConsoleReporter, build_summary_table, print_banner
from core.config import CustomizerSettings
from core.domain.models import OutputLayout
from core.errors import ConfigError, CustomizerError
from core.interfaces.reporter import Reporter
from core.services.directories import (
    clean_previous,
    ensure_directories,
    ensure_ignore_file,
    list_icon_files,
    stylesheet_file,
)
from core.services.icon_pipeline import generate_icons
from core.services.style_pipeline import generate_styles

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command(name="doctor")(doctor.run)

_console = Console(highlight=False, markup=False, soft_wrap=True)


def load_settings() -> CustomizerSettings:
    """Construye la configuración desde env/.env, traduciendo errores de pydantic."""

    try:
        return CustomizerSettings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def print_summary(layout: OutputLayout, console: Console, reporter: Reporter) -> None:
    """Resumen a partir de lo que hay en disco, incluidos restos de otras ejecuciones."""

    reporter.header("Customization Summary")
    icons = list_icon_files(layout)
    stylesheet = stylesheet_file(layout)

    if icons:
        console.print(f"  Icons: {len(icons)} files in {layout.public_dir}/")
    if stylesheet is not None:
        console.print(f"  Styles: {stylesheet.path}")
    if icons or stylesheet is not None:
        console.print(build_summary_table(icons, stylesheet))
    else:
        console.print("  No generated files found.")


def run_customization(
    settings: CustomizerSettings,
    reporter: Reporter,
    *,
    clean: bool = False,
    icons_only: bool = False,
    styles_only: bool = False,
) -> OutputLayout:
    if not settings.icon_url and not styles_only:
        raise ConfigError("Missing required environment variable: ICON_URL (set it in your .env file)")

    layout = OutputLayout(root=settings.custom_root)
    ensure_directories(layout, reporter)
    if clean:
        clean_previous(layout, reporter)
    ensure_ignore_file(layout, reporter)

    run_icons = not styles_only
    run_styles = styles_only or not icons_only

    if run_icons:
        with build_client(settings) as client:
            generate_icons(settings, reporter, client=client)
    if run_styles:
        generate_styles(settings, reporter)
    return layout


@app.callback(invoke_without_command=True)
def customize(
    ctx: typer.Context,
    clean: bool = typer.Option(
        False,
        "--clean",
        "-c",
        help="Clean previous customizations before generating new ones.",
    ),
    icons_only: bool = typer.Option(False, "--icons-only", help="Generate only icons."),
    styles_only: bool = typer.Option(
        False,
        "--styles-only",
        help="Generate only styles (ICON_URL is not required).",
    ),
) -> None:
    """Generate branding icons and SCSS definitions from environment settings.

    Environment variables (also read from a .env file):

    ICON_URL - URL to main icon image (required unless --styles-only)
    LOGO_URL - URL to logo image for SVG (optional, uses ICON_URL if not set)
    ICON_BLACK_URL - URL to black variant of icon (optional)
    CUSTOM_PRIMARY_COLOR - Primary color (default: #0a0d10)
    CUSTOM_SECONDARY_COLOR - Secondary color (default: #0a0d10)
    CUSTOM_RED_COLOR - Red/danger color (default: #d74949)
    CUSTOM_GREEN_COLOR - Green/success color (default: #319236)
    CUSTOM_TEXT_MUTED_COLOR - Muted text color (default: #888)
    CUSTOM_SECONDARY_BACKGROUND_COLOR - Secondary background (default: #f1f1f1)
    CUSTOM_SECONDARY_TEXT_COLOR - Secondary text color (default: #7a7a7a)
    CUSTOM_FORCE_LINK_UNDERLINE, CUSTOM_LIGHTER_PRIMARY_HOVER,
    CUSTOM_LIGHTER_SECONDARY_HOVER, CUSTOM_HEADER_LOGO - true/yes/1/on (default: true)
    CUSTOM_ROOT - Output directory (default: custom)
    """

    if ctx.invoked_subcommand is not None:
        return

    reporter = ConsoleReporter(_console)
    print_banner(_console)
    reporter.info("Starting customization process...")

    try:
        settings = load_settings()
        layout = run_customization(
            settings,
            reporter,
            clean=clean,
            icons_only=icons_only,
            styles_only=styles_only,
        )
    except CustomizerError as exc:
        reporter.error(str(exc))
        raise typer.Exit(code=1) from exc

    print_summary(layout, _console, reporter)
    _console.print()
    reporter.info("Customization completed successfully!")
    reporter.info("You can now build the application image with these customizations.")


def run() -> None:
    app()
