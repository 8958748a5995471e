"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import httpx
import typer
from PIL import Image, features
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from adapters.http_client import build_client
from core.config import CustomizerSettings
from core.services.style_pipeline import is_hex_color

_console = Console(highlight=False, markup=False, soft_wrap=True)


def _check_url(client: httpx.Client, url: str) -> tuple[bool, str]:
    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc)
    content_type = response.headers.get("content-type", "unknown")
    return response.is_success, f"HTTP {response.status_code} ({content_type})"


def _check_codecs() -> tuple[bool, str]:
    """PNG and ICO writers are required; WebP decode is only informative."""

    Image.init()
    missing = [fmt for fmt in ("PNG", "ICO") if fmt not in Image.SAVE]
    if missing:
        return False, f"Missing Pillow writers: {', '.join(missing)}"
    webp = "WebP sources supported" if features.check("webp") else "no WebP support"
    return True, f"PNG/ICO writers available, {webp}"


def build_doctor_table(settings: CustomizerSettings, client: httpx.Client | None = None) -> tuple[Table, bool]:
    """Runs the checks and returns the table plus an overall OK flag."""

    table = Table(title="Customizer Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok = True

    if settings.icon_url:
        table.add_row("ICON_URL", "OK", settings.icon_url)
    else:
        table.add_row("ICON_URL", "MISSING", "Required unless running with --styles-only")
        ok = False
    table.add_row("LOGO_URL", "OK" if settings.logo_url else "OPTIONAL", settings.logo_url or "Falls back to ICON_URL")
    table.add_row(
        "ICON_BLACK_URL",
        "OK" if settings.icon_black_url else "OPTIONAL",
        settings.icon_black_url or "Dark favicons use the main icon",
    )

    for env_name, _, value in settings.colors():
        valid = is_hex_color(value)
        ok = ok and valid
        table.add_row(env_name, "OK" if valid else "INVALID", value)

    for name in (
        "custom_force_link_underline",
        "custom_lighter_primary_hover",
        "custom_lighter_secondary_hover",
        "custom_header_logo",
    ):
        table.add_row(name.upper(), "OK", "true" if getattr(settings, name) else "false")

    ok_codecs, detail_codecs = _check_codecs()
    ok = ok and ok_codecs
    table.add_row("Pillow codecs", "OK" if ok_codecs else "FAIL", detail_codecs)

    urls = [
        ("ICON_URL reachable", settings.icon_url),
        ("LOGO_URL reachable", settings.logo_url),
        ("ICON_BLACK_URL reachable", settings.icon_black_url),
    ]
    owns_client = client is None
    client = client or build_client(settings)
    try:
        for label, url in urls:
            if not url:
                continue
            reachable, detail = _check_url(client, url)
            ok = ok and reachable
            table.add_row(label, "OK" if reachable else "FAIL", detail)
    finally:
        if owns_client:
            client.close()

    return table, ok


def run() -> None:
    """Check configuration and source URLs without generating anything."""

    try:
        settings = CustomizerSettings()
    except ValidationError as exc:
        _console.print(Text.assemble(("Invalid configuration: ", "red"), str(exc)))
        raise typer.Exit(code=1) from exc

    table, ok = build_doctor_table(settings)
    _console.print(table)

    if not ok:
        _console.print()
        _console.print(Text.assemble(("Note:", "yellow"), " Fix the failing checks before running `customize`."))
        raise typer.Exit(code=1)
