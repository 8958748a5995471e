"""Style generation pipeline.

Validates the theme colors, resolves the boolean toggles and writes
`styles/_definitions.scss` from the fixed template. Nothing is written when
any color is invalid.
"""

from __future__ import annotations

import re
from pathlib import Path

from adapters.templating import render_template
from core.config import CustomizerSettings
from core.domain.models import OutputLayout, ThemeDefinitions
from core.errors import ConfigError
from core.interfaces.reporter import Reporter

HEX_COLOR_RE = re.compile(r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")

DEFINITIONS_TEMPLATE = "_definitions.scss.j2"


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and HEX_COLOR_RE.fullmatch(value) is not None


def validate_hex_color(value: str, name: str, reporter: Reporter) -> bool:
    """Accepts `#RGB` / `#RRGGBB` (any case); reports and returns False otherwise."""

    if is_hex_color(value):
        return True
    reporter.error(f"Invalid hex color format for {name}: {value} (expected format: #RGB or #RRGGBB)")
    return False


def resolve_theme(settings: CustomizerSettings, reporter: Reporter) -> ThemeDefinitions:
    """Builds the theme values, failing on the first invalid color."""

    for env_name, _, value in settings.colors():
        if not validate_hex_color(value, env_name, reporter):
            raise ConfigError(f"Style generation aborted: invalid color in {env_name}")

    return ThemeDefinitions(
        primary=settings.custom_primary_color,
        secondary=settings.custom_secondary_color,
        red=settings.custom_red_color,
        green=settings.custom_green_color,
        text_muted=settings.custom_text_muted_color,
        secondary_background=settings.custom_secondary_background_color,
        secondary_text=settings.custom_secondary_text_color,
        force_link_underline=settings.custom_force_link_underline,
        lighter_primary_hover=settings.custom_lighter_primary_hover,
        lighter_secondary_hover=settings.custom_lighter_secondary_hover,
        header_logo=settings.custom_header_logo,
    )


def render_definitions(theme: ThemeDefinitions) -> str:
    return render_template(DEFINITIONS_TEMPLATE, **theme.template_context())


def generate_styles(settings: CustomizerSettings, reporter: Reporter) -> Path:
    """Writes `_definitions.scss` and returns its path.

    Raises:
        ConfigError: a color does not match `#RGB` or `#RRGGBB`.
    """

    reporter.header("Generating custom styles...")

    theme = resolve_theme(settings, reporter)

    reporter.info("Using colors:")
    for _, label, value in settings.colors():
        reporter.info(f"  {label}: {value}")
    context = theme.template_context()
    reporter.info("Using options:")
    for key in ("force_link_underline", "lighter_primary_hover", "lighter_secondary_hover", "header_logo"):
        reporter.info(f"  {key.replace('_', ' ').capitalize()}: {context[key]}")

    layout = OutputLayout(root=settings.custom_root)
    layout.styles_dir.mkdir(parents=True, exist_ok=True)

    content = render_definitions(theme)
    output = layout.definitions_file
    output.write_text(content, encoding="utf-8")

    reporter.info(f"Custom _definitions.scss generated successfully at: {output}")
    reporter.info(f"File size: {output.stat().st_size} bytes")
    return output
